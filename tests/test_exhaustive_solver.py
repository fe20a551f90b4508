"""
Exhaustive solver tests
"""

import networkx as nx
import pytest

from emergency_routing.algorithms.exhaustive_solver import find_optimal_route, route_score
from emergency_routing.algorithms.route_planner import RoutePlanner
from emergency_routing.core.graph import LocationGraph


class TestFindOptimalRoute:
    """Exact optimum by enumeration"""

    def test_reference_optimum(self, reference_graph):
        """Panditwari -> Premnagar -> Ballupur -> Railway Station, then ISBT: 2 + 5 + 4 + 1"""
        route, score = find_optimal_route(reference_graph.to_networkx(), 1, 4)
        assert route == [1, 0, 2, 3]
        assert score == 12.0

    def test_route_score(self, reference_graph):
        graph = reference_graph.to_networkx()
        assert route_score(graph, [1, 3, 2, 0], 4) == 1 + 4 + 5 + 9
        # an incident entry at the end adds nothing
        assert route_score(graph, [1, 0, 2, 3, 4], 4) == 12.0

    def test_two_cities(self):
        graph = LocationGraph([[0, 3], [3, 0]], ["Depot", "Incident"]).to_networkx()
        assert find_optimal_route(graph, 0, 1) == ([0], 3.0)

    def test_single_city(self):
        graph = LocationGraph([[0]], ["Solo"]).to_networkx()
        assert find_optimal_route(graph, 0, 0) == ([0], 0.0)

    def test_unknown_node(self, reference_graph):
        with pytest.raises(nx.NodeNotFound):
            find_optimal_route(reference_graph.to_networkx(), 1, 9)

    def test_planner_never_beats_optimum(self, reference_config):
        planner = RoutePlanner.from_config(reference_config)
        planner.find_best_route()
        _, optimal = find_optimal_route(planner.graph.to_networkx(), 1, 4)
        assert planner.last_result.score >= optimal
