"""
City selection rule

Roulette-wheel choice of the next location, weighted by
pheromone ** alpha * (1 / distance) ** beta over every location that is neither
visited nor the incident location.

When no location is eligible (or every weight is zero) the rule falls back to
the incident location. The outcome is tagged so callers can tell a real
selection from the fallback.
"""

import random
from typing import List, NamedTuple, Sequence

from ..core.graph import LocationGraph
from .pheromone import PheromoneMatrix


class SelectionOutcome(NamedTuple):
    """
    Result of one selection step

    Attributes:
        location: chosen location (the incident location for the fallback)
        degenerate: True if no eligible location could be chosen
    """

    location: int
    degenerate: bool = False

    @classmethod
    def selected(cls, location: int) -> "SelectionOutcome":
        return cls(location, False)

    @classmethod
    def fallback(cls, incident_location: int) -> "SelectionOutcome":
        return cls(incident_location, True)


class CitySelector:
    """
    Stochastic next-location chooser

    Attributes:
        graph (LocationGraph): distances and location count
        pheromone (PheromoneMatrix): current pheromone values
        incident_location (int): excluded from selection; returned as fallback
        rng (random.Random): injected random source
    """

    def __init__(
        self,
        graph: LocationGraph,
        pheromone: PheromoneMatrix,
        incident_location: int,
        rng: random.Random,
    ):
        self.graph = graph
        self.pheromone = pheromone
        self.incident_location = incident_location
        self.rng = rng

    def eligible(self, visited: Sequence[bool]) -> List[int]:
        """Unvisited locations other than the incident location, in index order."""
        return [
            city
            for city in range(self.graph.num_cities)
            if not visited[city] and city != self.incident_location
        ]

    def weight(self, current: int, city: int, alpha: float, beta: float) -> float:
        """pheromone[current][city] ** alpha * (1 / distance[current][city]) ** beta"""
        pheromone = self.pheromone.get(current, city) ** alpha
        attractiveness = (1.0 / self.graph.distance(current, city)) ** beta
        return pheromone * attractiveness

    def select(
        self, current: int, visited: Sequence[bool], alpha: float, beta: float
    ) -> SelectionOutcome:
        """
        Choose the next location from ``current``.

        Args:
            current: location the ant is at
            visited: visited flag per location
            alpha: pheromone exponent
            beta: inverse-distance exponent

        Returns:
            SelectionOutcome; ``degenerate`` is set when the fallback is used
        """
        candidates = self.eligible(visited)
        weights = [self.weight(current, city, alpha, beta) for city in candidates]
        total = sum(weights)

        if not candidates or total == 0:
            return SelectionOutcome.fallback(self.incident_location)

        random_value = self.rng.random() * total
        cumulative = 0.0
        for city, weight in zip(candidates, weights):
            cumulative += weight
            if random_value <= cumulative:
                return SelectionOutcome.selected(city)

        # only reachable through floating-point rounding in the cumulative sum
        return SelectionOutcome.fallback(self.incident_location)
