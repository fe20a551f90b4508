from .exhaustive_solver import find_optimal_route, route_score
from .route_planner import RoutePlanner

__all__ = [
    "RoutePlanner",
    "find_optimal_route",
    "route_score",
]
