from .metrics import MetricsCalculator

__all__ = ["MetricsCalculator"]
