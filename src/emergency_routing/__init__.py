"""
Emergency Response Routing Package

Ant colony optimization route planner for emergency vehicles.
"""

__version__ = "1.0.0"

from .algorithms.exhaustive_solver import find_optimal_route
from .algorithms.route_planner import RoutePlanner
from .config import default_config, load_config
from .core.ant import Ant
from .core.graph import LocationGraph, calculate_total_distance
from .exceptions import ConfigurationError, DegenerateRouteError
from .modules.pheromone import PheromoneMatrix, PheromoneUpdater
from .modules.selection import CitySelector, SelectionOutcome
from .reporting import (
    AntPathEvent,
    CompositeReporter,
    ConsoleReporter,
    IterationEvent,
    NullReporter,
    RecordingReporter,
    RouteObserver,
    RouteResult,
)
from .utils.metrics import MetricsCalculator

__all__ = [
    "RoutePlanner",
    "find_optimal_route",
    "LocationGraph",
    "calculate_total_distance",
    "Ant",
    "PheromoneMatrix",
    "PheromoneUpdater",
    "CitySelector",
    "SelectionOutcome",
    "ConfigurationError",
    "DegenerateRouteError",
    "load_config",
    "default_config",
    "RouteObserver",
    "NullReporter",
    "ConsoleReporter",
    "RecordingReporter",
    "CompositeReporter",
    "AntPathEvent",
    "IterationEvent",
    "RouteResult",
    "MetricsCalculator",
]
