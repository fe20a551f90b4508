"""
Metrics tests
"""

import pytest

from emergency_routing.reporting import IterationEvent
from emergency_routing.utils.metrics import MetricsCalculator


class TestMetricsCalculator:
    """Optimality gap, discovery rate, convergence"""

    def test_is_optimal(self):
        metrics = MetricsCalculator(tolerance=0.01)
        assert metrics.is_optimal(12.0, 12.0) is True
        assert metrics.is_optimal(12.005, 12.0) is True
        assert metrics.is_optimal(12.5, 12.0) is False

    def test_optimality_gap(self):
        metrics = MetricsCalculator()
        assert metrics.optimality_gap(15.0, 12.0) == pytest.approx(0.25)
        assert metrics.optimality_gap(12.0, 12.0) == 0.0

    def test_optimality_gap_zero_optimum(self):
        metrics = MetricsCalculator()
        assert metrics.optimality_gap(0.0, 0.0) == 0.0
        assert metrics.optimality_gap(1.0, 0.0) == float("inf")

    def test_discovery_rate(self):
        metrics = MetricsCalculator()
        assert metrics.discovery_rate([12.0, 15.0, 12.001], 12.0) == pytest.approx(2 / 3)
        assert metrics.discovery_rate([], 12.0) == 0.0

    def test_convergence(self):
        events = [
            IterationEvent(iteration=i, alpha=1.0, beta=1.0, best_ant=0, best_score=score)
            for i, score in enumerate([15.0, 12.0, 13.0])
        ]
        assert MetricsCalculator().convergence(events) == [15.0, 12.0, 12.0]
