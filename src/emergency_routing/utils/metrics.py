"""
Evaluation metrics

Compares planner scores with the exact optimum from the exhaustive solver.
"""

from typing import List, Sequence

from ..reporting import IterationEvent


class MetricsCalculator:
    """
    Computes optimality gap, discovery rate and convergence

    Attributes:
        tolerance (float): absolute tolerance when comparing scores
    """

    def __init__(self, tolerance: float = 0.01):
        """
        Args:
            tolerance: scores closer than this to the optimum count as optimal
        """
        self.tolerance = tolerance

    def is_optimal(self, score: float, optimal_score: float) -> bool:
        return abs(score - optimal_score) < self.tolerance

    def optimality_gap(self, score: float, optimal_score: float) -> float:
        """
        Relative excess over the optimum.

        Definition: (score - optimal_score) / optimal_score, 0.0 when the optimum
        is 0 and the score matches it.

        Returns:
            gap >= 0 (inf if the optimum is 0 and the score is not)
        """
        if optimal_score == 0:
            return 0.0 if self.is_optimal(score, optimal_score) else float("inf")
        return (score - optimal_score) / optimal_score

    def discovery_rate(self, scores: Sequence[float], optimal_score: float) -> float:
        """
        Fraction of scores that reach the optimum.

        Args:
            scores: planner scores (e.g. one per ant or one per run)
            optimal_score: exact optimum

        Returns:
            rate in [0.0, 1.0]; 0.0 for an empty list
        """
        if not scores:
            return 0.0
        found = sum(1 for score in scores if self.is_optimal(score, optimal_score))
        return found / len(scores)

    def convergence(self, iterations: Sequence[IterationEvent]) -> List[float]:
        """
        Best-so-far score after each iteration.

        Args:
            iterations: iteration events in order

        Returns:
            non-increasing list with one entry per iteration
        """
        history = []
        best = float("inf")
        for event in iterations:
            best = min(best, event.best_score)
            history.append(best)
        return history
