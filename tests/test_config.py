"""
Configuration loading tests
"""

import pytest
import yaml

from emergency_routing.config import REFERENCE_CONFIG, default_config, load_config, validate_config
from emergency_routing.exceptions import ConfigurationError


class TestLoadConfig:
    """YAML loading and merging"""

    def test_defaults_without_file(self):
        config = load_config()
        assert config == REFERENCE_CONFIG
        assert config is not REFERENCE_CONFIG

    def test_default_config_is_a_copy(self):
        config = default_config()
        config["aco"]["num_ants"] = 99
        assert REFERENCE_CONFIG["aco"]["num_ants"] == 10

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump({"aco": {"num_ants": 4, "evaporation_rate": 0.2}}),
            encoding="utf-8",
        )

        config = load_config(path)

        assert config["aco"]["num_ants"] == 4
        assert config["aco"]["evaporation_rate"] == 0.2
        assert config["aco"]["num_iterations"] == 3
        assert config["locations"]["names"][1] == "Panditwari"

    def test_file_replaces_locations(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "locations": {
                        "names": ["A", "B", "C"],
                        "distances": [[0, 1, 2], [1, 0, 3], [2, 3, 0]],
                        "starting_city": 0,
                        "incident_location": 2,
                    }
                }
            ),
            encoding="utf-8",
        )

        config = load_config(str(path))

        assert config["locations"]["names"] == ["A", "B", "C"]
        assert config["locations"]["incident_location"] == 2

    def test_shipped_config_matches_reference(self):
        from pathlib import Path

        path = Path(__file__).parent.parent / "config" / "config.yaml"
        assert load_config(path) == REFERENCE_CONFIG

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == REFERENCE_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("aco: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(path)

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)


class TestValidateConfig:
    """Parameter preconditions"""

    @pytest.mark.parametrize(
        "section, key, value",
        [
            ("aco", "num_ants", 0),
            ("aco", "num_ants", 2.5),
            ("aco", "num_iterations", 0),
            ("aco", "num_iterations", True),
            ("aco", "alpha", "high"),
            ("aco", "evaporation_rate", -0.1),
            ("aco", "evaporation_rate", 1.01),
            ("aco", "initial_pheromone", 0),
            ("aco", "zero_length_policy", "ignore"),
            ("locations", "starting_city", 5),
            ("locations", "starting_city", -1),
            ("locations", "incident_location", "ISBT"),
        ],
    )
    def test_invalid_values(self, section, key, value):
        config = default_config()
        config[section][key] = value
        with pytest.raises(ConfigurationError):
            validate_config(config)

    def test_missing_section(self):
        config = default_config()
        del config["aco"]
        with pytest.raises(ConfigurationError, match="aco"):
            validate_config(config)

    def test_missing_location_key(self):
        config = default_config()
        del config["locations"]["incident_location"]
        with pytest.raises(ConfigurationError, match="incident_location"):
            validate_config(config)

    def test_evaporation_bounds_are_inclusive(self):
        config = default_config()
        for rate in (0.0, 1.0, 0, 1):
            config["aco"]["evaporation_rate"] = rate
            validate_config(config)

    @pytest.mark.parametrize("section", ["experiment", "locations", "aco", "output"])
    def test_section_must_be_mapping(self, section):
        config = default_config()
        config[section] = None
        with pytest.raises(ConfigurationError, match=section):
            validate_config(config)

    @pytest.mark.parametrize(
        "key, value",
        [
            ("distances", 5),
            ("distances", None),
            ("distances", "0 1; 1 0"),
            ("names", None),
            ("names", "Premnagar"),
        ],
    )
    def test_location_lists(self, key, value):
        config = default_config()
        config["locations"][key] = value
        with pytest.raises(ConfigurationError, match=f"locations.{key}"):
            validate_config(config)

    @pytest.mark.parametrize("seed", ["abc", 1.5, True, [1]])
    def test_invalid_seed(self, seed):
        config = default_config()
        config["experiment"]["seed"] = seed
        with pytest.raises(ConfigurationError, match="seed"):
            validate_config(config)

    @pytest.mark.parametrize(
        "body",
        [
            "experiment: null\n",
            "output: null\n",
            "locations:\n  distances: 7\n",
            "locations:\n  names: null\n",
        ],
    )
    def test_malformed_sections_in_file(self, tmp_path, body):
        path = tmp_path / "config.yaml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)
