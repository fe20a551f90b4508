"""
Shared fixtures: the reference Dehradun scenario and small edge-case graphs.
"""

import matplotlib
import pytest

from emergency_routing.config import default_config
from emergency_routing.core.graph import LocationGraph

matplotlib.use("Agg")


class FixedRandom:
    """random.Random stand-in that always draws the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def reference_config():
    """Reference scenario with a fixed seed."""
    config = default_config()
    config["experiment"]["seed"] = 42
    return config


@pytest.fixture
def reference_graph(reference_config):
    locations = reference_config["locations"]
    return LocationGraph(locations["distances"], locations["names"])


@pytest.fixture
def two_city_config():
    """Only the start and the incident location: every path takes the fallback."""
    config = default_config()
    config["experiment"]["seed"] = 7
    config["locations"] = {
        "names": ["Depot", "Incident"],
        "distances": [[0, 3], [3, 0]],
        "starting_city": 0,
        "incident_location": 1,
    }
    return config


@pytest.fixture
def single_city_config():
    """One location that is both start and incident: every path has zero length."""
    config = default_config()
    config["experiment"]["seed"] = 7
    config["locations"] = {
        "names": ["Solo"],
        "distances": [[0]],
        "starting_city": 0,
        "incident_location": 0,
    }
    return config


@pytest.fixture
def fixed_random():
    """Factory for a random source that always draws the given value."""
    return FixedRandom
