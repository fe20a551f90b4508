"""
Exceptions raised by the route planner.
"""


class ConfigurationError(ValueError):
    """Raised when the distance matrix, location table or ACO parameters are invalid."""


class DegenerateRouteError(ZeroDivisionError):
    """
    Raised when an ant's path has zero length and the pheromone deposit 1/L
    cannot be computed (only under ``zero_length_policy: raise``).
    """

    def __init__(self, ant_id: int, route):
        self.ant_id = ant_id
        self.route = list(route)
        super().__init__(
            f"Ant {ant_id} built a zero-length path {self.route}; "
            "pheromone deposit 1/L is undefined"
        )
