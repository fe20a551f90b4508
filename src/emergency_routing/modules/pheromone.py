"""
Pheromone storage, evaporation and reinforcement

[Evaporation]
Every off-diagonal cell is multiplied by (1 - evaporation_rate) once per
iteration. The diagonal is never read and is left untouched.

[Reinforcement]
Each ant deposits delta = 1 / L on every edge of its path, where L is the path
length without the incident leg. Deposits are written in both directions so the
matrix stays symmetric. The edge from the path's last location back to its
first is reinforced as well, as if the route were a cycle.

[Zero-length paths]
1 / L is undefined when L == 0. The ``zero_length_policy`` setting decides:
- "skip": the ant deposits nothing and a warning is logged
- "raise": DegenerateRouteError is raised
"""

import logging
from typing import Dict, Iterable, Optional

import numpy as np

from ..core.ant import Ant
from ..core.graph import LocationGraph
from ..exceptions import ConfigurationError, DegenerateRouteError

logger = logging.getLogger(__name__)

INITIAL_PHEROMONE = 0.01
ZERO_LENGTH_POLICIES = ("skip", "raise")


class PheromoneMatrix:
    """
    Owned N×N pheromone storage with bounds-checked accessors

    Attributes:
        num_cities (int): matrix dimension
        values (np.ndarray): row-major pheromone values
    """

    def __init__(self, num_cities: int, initial_value: float = INITIAL_PHEROMONE):
        self.num_cities = num_cities
        self.initial_value = initial_value
        self.values = np.full((num_cities, num_cities), initial_value, dtype=float)

    def fill(self, value: Optional[float] = None) -> None:
        """Set every cell, diagonal included, to ``value`` (default: the initial value)."""
        self.values.fill(self.initial_value if value is None else value)

    def _check_index(self, city: int) -> int:
        if not 0 <= city < self.num_cities:
            raise IndexError(
                f"Location index {city} out of range [0, {self.num_cities})"
            )
        return city

    def get(self, city1: int, city2: int) -> float:
        return float(self.values[self._check_index(city1), self._check_index(city2)])

    def deposit(self, city1: int, city2: int, amount: float) -> None:
        """Add ``amount`` to both [city1][city2] and [city2][city1]."""
        self._check_index(city1)
        self._check_index(city2)
        self.values[city1, city2] += amount
        self.values[city2, city1] += amount

    def evaporate(self, evaporation_rate: float) -> None:
        """Multiply every off-diagonal cell by (1 - evaporation_rate)."""
        off_diagonal = ~np.eye(self.num_cities, dtype=bool)
        self.values[off_diagonal] *= 1.0 - evaporation_rate

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.values, self.values.T))

    def copy(self) -> np.ndarray:
        """Snapshot of the current values."""
        return self.values.copy()

    def __repr__(self) -> str:
        return f"PheromoneMatrix(num_cities={self.num_cities}, initial={self.initial_value})"


class PheromoneUpdater:
    """
    Evaporation and reinforcement run once per iteration

    Attributes:
        config (Dict): configuration dictionary
        evaporation_rate (float): fraction of pheromone lost per iteration
        zero_length_policy (str): "skip" or "raise"
    """

    def __init__(self, config: Dict):
        """
        Args:
            config: configuration dictionary (``config["aco"]`` is read)

        Raises:
            ConfigurationError: if evaporation_rate or zero_length_policy is invalid
        """
        self.config = config
        self.evaporation_rate = float(config["aco"]["evaporation_rate"])
        self.zero_length_policy = config["aco"].get("zero_length_policy", "skip")

        if not 0.0 <= self.evaporation_rate <= 1.0:
            raise ConfigurationError(
                f"evaporation_rate must be in [0, 1], got {self.evaporation_rate}"
            )
        if self.zero_length_policy not in ZERO_LENGTH_POLICIES:
            raise ConfigurationError(
                f"zero_length_policy must be one of {ZERO_LENGTH_POLICIES}, "
                f"got {self.zero_length_policy!r}"
            )

    def evaporate(self, pheromone: PheromoneMatrix) -> None:
        pheromone.evaporate(self.evaporation_rate)

    def update(
        self, pheromone: PheromoneMatrix, ants: Iterable[Ant], graph: LocationGraph
    ) -> None:
        """
        Evaporate, then let every ant reinforce its path.

        Args:
            pheromone: matrix to update in place
            ants: ants of the current iteration
            graph: location graph used to measure path lengths
        """
        self.evaporate(pheromone)
        for ant in ants:
            self.update_from_ant(pheromone, ant, graph)

    def update_from_ant(
        self, pheromone: PheromoneMatrix, ant: Ant, graph: LocationGraph
    ) -> None:
        """
        Deposit 1 / L on every edge of the ant's path plus the closing edge.

        Raises:
            DegenerateRouteError: if L == 0 and the policy is "raise"
        """
        length = graph.path_length(ant.route)
        if length == 0:
            if self.zero_length_policy == "raise":
                raise DegenerateRouteError(ant.ant_id, ant.route)
            logger.warning(
                "Ant %d has a zero-length path %s; skipping its pheromone deposit",
                ant.ant_id,
                ant.route,
            )
            return

        delta = 1.0 / length
        for city1, city2 in ant.get_route_edges():
            pheromone.deposit(city1, city2, delta)

        last_city, first_city = ant.get_closing_edge()
        pheromone.deposit(last_city, first_city, delta)

