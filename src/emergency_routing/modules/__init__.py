from .pheromone import PheromoneMatrix, PheromoneUpdater
from .selection import CitySelector, SelectionOutcome

__all__ = [
    "PheromoneMatrix",
    "PheromoneUpdater",
    "CitySelector",
    "SelectionOutcome",
]
