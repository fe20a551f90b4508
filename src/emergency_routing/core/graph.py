"""
Location graph module

Holds the fixed distance matrix and location names for one planning run.

[Responsibilities]
1. Validation: the matrix must be square, symmetric, non-negative, with a zero
   diagonal and strictly positive off-diagonal weights
2. Lookup: bounds-checked distance access and index -> name lookup
3. Utilities: route length (calculate_total_distance) and route rendering
4. Export: conversion to a NetworkX complete graph for visualization
"""

from typing import List, Optional, Sequence

import networkx as nx
import numpy as np

from ..exceptions import ConfigurationError

ROUTE_SEPARATOR = " -> "


def calculate_total_distance(route: Sequence[int], distances) -> float:
    """
    Sum of distances between consecutive locations on a route.

    The leg to the incident location is not added, so the result differs from
    the score used by RoutePlanner.find_best_route.

    Args:
        route: location indices in visiting order
        distances: N×N distance matrix (nested lists or numpy array)

    Returns:
        total traversed distance

    Example:
        >>> calculate_total_distance([1, 3, 4, 2, 0], distances)
        9.0
    """
    total_distance = 0.0
    for i in range(len(route) - 1):
        total_distance += float(distances[route[i]][route[i + 1]])
    return total_distance


class LocationGraph:
    """
    Fully-connected graph of named locations (numpy distance matrix wrapper)

    The matrix is copied into an owned, read-only float array when the graph is
    built, so it cannot change during a planning run.

    Attributes:
        num_cities (int): number of locations N
        distances (np.ndarray): N×N read-only distance matrix
        location_names (List[str]): display name per location index

    Example:
        >>> graph = LocationGraph([[0, 2], [2, 0]], ["A", "B"])
        >>> graph.distance(0, 1)
        2.0
        >>> graph.format_route([1, 0])
        'B -> A'
    """

    def __init__(
        self,
        distances: Sequence[Sequence[float]],
        location_names: Sequence[str],
        num_cities: Optional[int] = None,
    ):
        """
        Args:
            distances: N×N symmetric matrix of non-negative edge weights
            location_names: N display names
            num_cities: expected N; checked against the matrix when given

        Raises:
            ConfigurationError: if any precondition on the matrix or names fails
        """
        try:
            matrix = np.array(distances, dtype=float)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Distance matrix is not numeric: {e}") from e

        self._validate_matrix(matrix)
        n = matrix.shape[0]

        if num_cities is not None and num_cities != n:
            raise ConfigurationError(
                f"num_cities={num_cities} does not match the {n}x{n} distance matrix"
            )
        if isinstance(location_names, str) or not isinstance(location_names, Sequence):
            raise ConfigurationError(
                f"Location names must be a list, got {location_names!r}"
            )
        if len(location_names) != n:
            raise ConfigurationError(
                f"Expected {n} location names, got {len(location_names)}"
            )

        matrix.setflags(write=False)
        self.num_cities = n
        self.distances = matrix
        self.location_names: List[str] = [str(name) for name in location_names]

    @staticmethod
    def _validate_matrix(matrix: np.ndarray) -> None:
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ConfigurationError(
                f"Distance matrix must be square, got shape {matrix.shape}"
            )
        if matrix.shape[0] == 0:
            raise ConfigurationError("Distance matrix must not be empty")
        if not np.all(np.isfinite(matrix)):
            raise ConfigurationError("Distance matrix contains non-finite values")
        if np.any(matrix < 0):
            raise ConfigurationError("Distance matrix contains negative distances")
        if np.any(np.diag(matrix) != 0):
            raise ConfigurationError("Distance matrix diagonal must be zero")
        if not np.array_equal(matrix, matrix.T):
            raise ConfigurationError("Distance matrix must be symmetric")

        # 1/d is evaluated for every pair of distinct locations
        off_diagonal = ~np.eye(matrix.shape[0], dtype=bool)
        if np.any(matrix[off_diagonal] == 0):
            raise ConfigurationError(
                "Distinct locations must have a positive distance between them"
            )

    def _check_index(self, city: int) -> int:
        if not 0 <= city < self.num_cities:
            raise IndexError(
                f"Location index {city} out of range [0, {self.num_cities})"
            )
        return city

    def distance(self, city1: int, city2: int) -> float:
        """Distance between two locations (bounds-checked)."""
        return float(self.distances[self._check_index(city1), self._check_index(city2)])

    def name(self, city: int) -> str:
        """Display name of a location (bounds-checked)."""
        return self.location_names[self._check_index(city)]

    def route_names(self, route: Sequence[int]) -> List[str]:
        return [self.name(city) for city in route]

    def format_route(self, route: Sequence[int]) -> str:
        """Render a route as ``"A -> B -> C"``."""
        return ROUTE_SEPARATOR.join(self.route_names(route))

    def path_length(self, route: Sequence[int]) -> float:
        """Length of a route without any incident leg."""
        return calculate_total_distance(route, self.distances)

    def to_networkx(self) -> nx.Graph:
        """
        Export as a complete NetworkX graph.

        Nodes carry a ``name`` attribute and edges a ``distance`` attribute.
        """
        graph = nx.complete_graph(self.num_cities)
        for city in graph.nodes():
            graph.nodes[city]["name"] = self.location_names[city]
        for u, v in graph.edges():
            graph.edges[u, v]["distance"] = float(self.distances[u, v])
        return graph

    def __len__(self) -> int:
        return self.num_cities

    def __repr__(self) -> str:
        return f"LocationGraph(num_cities={self.num_cities}, names={self.location_names})"
