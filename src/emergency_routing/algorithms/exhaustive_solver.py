"""
Exhaustive solver

Exact reference optimum for the planner's objective, computed by enumerating
every visiting order of the intermediate locations. Only practical for the
small location sets the planner is meant for (the cost grows as (N-2)!).
"""

from itertools import permutations
from typing import List, Tuple

import networkx as nx


def route_score(
    graph: nx.Graph, route: List[int], target: int, weight: str = "distance"
) -> float:
    """
    Length of a route plus the final leg to ``target``.

    Args:
        graph: complete graph with ``weight`` edge attributes
        route: location indices in visiting order
        target: incident location
        weight: edge attribute holding the distance

    Returns:
        route length including the leg from route[-1] to target
    """
    total = 0.0
    for u, v in zip(route, route[1:] + [target]):
        if u != v:
            total += graph[u][v][weight]
    return total


def find_optimal_route(
    graph: nx.Graph, source: int, target: int, weight: str = "distance"
) -> Tuple[List[int], float]:
    """
    Shortest route that starts at ``source``, visits every other location except
    ``target`` exactly once and then continues to ``target``.

    Args:
        graph: complete graph (LocationGraph.to_networkx())
        source: starting location
        target: incident location
        weight: edge attribute holding the distance

    Returns:
        (route, score); the route does not contain target unless target == source

    Raises:
        nx.NodeNotFound: if source or target is not in the graph
    """
    if source not in graph:
        raise nx.NodeNotFound(f"Source {source} not in graph")
    if target not in graph:
        raise nx.NodeNotFound(f"Target {target} not in graph")

    intermediates = sorted(n for n in graph.nodes() if n not in (source, target))

    best_route: List[int] = [source]
    best_score = float("inf")
    for order in permutations(intermediates):
        route = [source, *order]
        score = route_score(graph, route, target, weight)
        if score < best_score:
            best_route = route
            best_score = score

    return best_route, best_score
