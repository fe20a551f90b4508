"""
Configuration loading

The configuration is a nested dictionary read from YAML (see config/config.yaml).
Values missing from the file fall back to REFERENCE_CONFIG, the Dehradun
scenario the planner was designed around.
"""

import copy
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from .exceptions import ConfigurationError
from .modules.pheromone import INITIAL_PHEROMONE, ZERO_LENGTH_POLICIES

REFERENCE_CONFIG: Dict = {
    "experiment": {
        "name": "dehradun_emergency_response",
        "seed": None,
    },
    "locations": {
        "names": ["Premnagar", "Panditwari", "Ballupur", "Railway Station", "ISBT"],
        "distances": [
            [0, 2, 5, 7, 9],
            [2, 0, 6, 1, 4],
            [5, 6, 0, 4, 2],
            [7, 1, 4, 0, 1],
            [9, 4, 2, 1, 0],
        ],
        "starting_city": 1,  # Panditwari
        "incident_location": 4,  # ISBT
    },
    "aco": {
        "num_ants": 10,
        "num_iterations": 3,
        "alpha": 1.0,
        "beta": 1.0,
        "evaporation_rate": 0.5,
        "initial_pheromone": INITIAL_PHEROMONE,
        "zero_length_policy": "skip",
    },
    "output": {
        "verbose": True,
        "results_dir": "results",
        "plot": False,
    },
}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config() -> Dict:
    """Deep copy of the reference configuration."""
    return copy.deepcopy(REFERENCE_CONFIG)


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Read a YAML configuration file and merge it over the reference configuration.

    Args:
        config_path: path to the YAML file; None returns the reference configuration

    Returns:
        validated configuration dictionary

    Raises:
        ConfigurationError: if the file is missing, malformed or invalid
    """
    if config_path is None:
        config = default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"{config_path} must contain a mapping at the top level"
            )
        config = _deep_merge(REFERENCE_CONFIG, data)

    validate_config(config)
    return config


def validate_config(config: Dict) -> None:
    """
    Check the section layout and the location and ACO parameters.

    The distance matrix contents are validated by LocationGraph.

    Raises:
        ConfigurationError: on the first violated precondition
    """
    for section in ("experiment", "locations", "aco", "output"):
        if not isinstance(config.get(section), dict):
            raise ConfigurationError(f"Missing or malformed '{section}' section")

    seed = config["experiment"].get("seed")
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
        raise ConfigurationError(f"experiment.seed must be an integer or null, got {seed!r}")

    locations = config["locations"]
    for key in ("names", "distances", "starting_city", "incident_location"):
        if key not in locations:
            raise ConfigurationError(f"locations.{key} is required")
    for key in ("names", "distances"):
        if not isinstance(locations[key], list):
            raise ConfigurationError(
                f"locations.{key} must be a list, got {locations[key]!r}"
            )

    num_cities = len(locations["distances"])
    for key in ("starting_city", "incident_location"):
        city = locations[key]
        if not isinstance(city, int) or isinstance(city, bool):
            raise ConfigurationError(f"locations.{key} must be an integer, got {city!r}")
        if not 0 <= city < num_cities:
            raise ConfigurationError(
                f"locations.{key}={city} is out of range [0, {num_cities})"
            )

    aco = config["aco"]
    for key in ("num_ants", "num_iterations"):
        value = aco.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ConfigurationError(f"aco.{key} must be a positive integer, got {value!r}")

    for key in ("alpha", "beta"):
        if not isinstance(aco.get(key), (int, float)):
            raise ConfigurationError(f"aco.{key} must be a number, got {aco.get(key)!r}")

    rate = aco.get("evaporation_rate")
    if not isinstance(rate, (int, float)) or not 0.0 <= rate <= 1.0:
        raise ConfigurationError(f"aco.evaporation_rate must be in [0, 1], got {rate!r}")

    initial = aco.get("initial_pheromone", INITIAL_PHEROMONE)
    if not isinstance(initial, (int, float)) or initial <= 0:
        raise ConfigurationError(
            f"aco.initial_pheromone must be positive, got {initial!r}"
        )

    policy = aco.get("zero_length_policy", "skip")
    if policy not in ZERO_LENGTH_POLICIES:
        raise ConfigurationError(
            f"aco.zero_length_policy must be one of {ZERO_LENGTH_POLICIES}, got {policy!r}"
        )
