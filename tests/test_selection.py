"""
City selection rule tests
"""

import random

import pytest

from emergency_routing.core.graph import LocationGraph
from emergency_routing.modules.pheromone import PheromoneMatrix
from emergency_routing.modules.selection import CitySelector, SelectionOutcome


@pytest.fixture
def selector_factory(reference_graph, fixed_random):
    def factory(value=0.0, pheromone=None, graph=None, incident=4):
        graph = graph or reference_graph
        pheromone = pheromone or PheromoneMatrix(graph.num_cities)
        return CitySelector(graph, pheromone, incident, fixed_random(value))

    return factory


# From Panditwari (1) with 0.01 pheromone and alpha = beta = 1 the weights of
# Premnagar (0), Ballupur (2) and Railway Station (3) are 0.005, 0.01/6 and 0.01.
VISITED_START = [False, True, False, False, False]


class TestSelectionOutcome:
    """Tagged selection result"""

    def test_selected(self):
        outcome = SelectionOutcome.selected(2)
        assert outcome.location == 2
        assert outcome.degenerate is False

    def test_fallback(self):
        outcome = SelectionOutcome.fallback(4)
        assert outcome == (4, True)


class TestCitySelector:
    """Roulette-wheel selection"""

    def test_eligible_excludes_visited_and_incident(self, selector_factory):
        selector = selector_factory()
        assert selector.eligible(VISITED_START) == [0, 2, 3]

    def test_weight(self, selector_factory):
        selector = selector_factory()
        assert selector.weight(1, 0, 1.0, 1.0) == pytest.approx(0.005)
        assert selector.weight(1, 2, 1.0, 1.0) == pytest.approx(0.01 / 6.0)
        assert selector.weight(1, 3, 1.0, 1.0) == pytest.approx(0.01)

    def test_weight_exponents(self, selector_factory):
        selector = selector_factory()
        assert selector.weight(1, 2, 0.0, 0.0) == 1.0
        assert selector.weight(1, 0, 2.0, 1.0) == pytest.approx(0.0001 * 0.5)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0),  # draw 0 stops at the first eligible location
            (0.25, 0),  # first weight is 0.005 of 0.016667
            (0.35, 2),  # past 0.005, within 0.006667
            (0.5, 3),
            (0.999, 3),
        ],
    )
    def test_select_walks_in_index_order(self, selector_factory, value, expected):
        selector = selector_factory(value)
        outcome = selector.select(1, VISITED_START, 1.0, 1.0)
        assert outcome == SelectionOutcome.selected(expected)

    def test_fallback_when_nothing_eligible(self, selector_factory):
        selector = selector_factory(0.5)
        outcome = selector.select(3, [True, True, True, True, False], 1.0, 1.0)
        assert outcome.location == 4
        assert outcome.degenerate is True

    def test_fallback_when_all_weights_zero(self, selector_factory):
        pheromone = PheromoneMatrix(5, initial_value=0.01)
        pheromone.fill(0.0)
        selector = selector_factory(0.5, pheromone=pheromone)
        outcome = selector.select(1, VISITED_START, 1.0, 1.0)
        assert outcome == SelectionOutcome.fallback(4)

    def test_two_city_graph_always_falls_back(self, fixed_random):
        graph = LocationGraph([[0, 3], [3, 0]], ["Depot", "Incident"])
        selector = CitySelector(graph, PheromoneMatrix(2), 1, fixed_random(0.1))
        assert selector.select(0, [True, False], 1.0, 1.0) == SelectionOutcome.fallback(1)

    def test_never_selects_visited_or_incident(self, reference_graph):
        selector = CitySelector(
            reference_graph, PheromoneMatrix(5), 4, random.Random(123)
        )
        visited = [True, True, False, True, False]
        for _ in range(200):
            assert selector.select(1, visited, 1.0, 1.0) == SelectionOutcome.selected(2)
