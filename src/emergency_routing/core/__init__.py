from .ant import Ant
from .graph import LocationGraph, calculate_total_distance

__all__ = ["Ant", "LocationGraph", "calculate_total_distance"]
