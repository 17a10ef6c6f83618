"""Tests for config module."""

from pathlib import Path

import pytest
import yaml

from src.config import RunConfig, get_nested, load_config
from src.summation import SumMode

CONF_DIR = Path(__file__).resolve().parents[3] / "conf"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_yaml(self, tmp_path: Path) -> None:
        """Test loading a valid YAML file."""
        config_data = {"arraysum": {"length": 5, "mode": "intended"}}
        config_file = tmp_path / "test.yaml"
        config_file.write_text(yaml.dump(config_data))

        result = load_config(config_file)

        assert result == config_data

    def test_load_missing_file(self) -> None:
        """Test loading a non-existent file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/path/config.yaml")

    def test_load_empty_yaml(self, tmp_path: Path) -> None:
        """Test loading an empty YAML file returns empty dict."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        result = load_config(config_file)

        assert result == {}

    def test_shipped_config_matches_defaults(self) -> None:
        """Test conf/arraysum.yaml resolves to the default settings."""
        config = RunConfig.from_dict(load_config(CONF_DIR / "arraysum.yaml"))

        assert config == RunConfig()


class TestGetNested:
    """Tests for get_nested function."""

    def test_get_nested_key(self) -> None:
        config = {"arraysum": {"length": 42}}

        assert get_nested(config, "arraysum", "length") == 42

    def test_get_missing_key_returns_default(self) -> None:
        config = {"arraysum": {}}

        assert get_nested(config, "arraysum", "seed", default=7) == 7

    def test_get_through_non_dict(self) -> None:
        """Test traversal into a scalar returns default."""
        config = {"arraysum": 3}

        assert get_nested(config, "arraysum", "length", default=None) is None


class TestRunConfig:
    """Tests for RunConfig dataclass."""

    def test_defaults(self) -> None:
        config = RunConfig()

        assert config.length == 10001
        assert config.low == 1
        assert config.high == 1000
        assert config.seed is None
        assert config.mode is SumMode.OBSERVED

    def test_from_dict_partial(self) -> None:
        """Test missing keys fall back to defaults."""
        config = RunConfig.from_dict({"arraysum": {"mode": "intended", "seed": 3}})

        assert config.mode is SumMode.INTENDED
        assert config.seed == 3
        assert config.length == 10001

    def test_from_empty_dict(self) -> None:
        assert RunConfig.from_dict({}) == RunConfig()

    def test_invalid_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown sum mode"):
            RunConfig(mode="sometimes")

    def test_negative_length(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            RunConfig(length=-5)

    def test_inverted_range(self) -> None:
        with pytest.raises(ValueError, match="must not exceed"):
            RunConfig(low=10, high=1)

    def test_range_outside_int32(self) -> None:
        """Test bounds that do not fit the array dtype are rejected."""
        with pytest.raises(ValueError, match="does not fit"):
            RunConfig(low=3_000_000_000, high=3_000_000_000)

    def test_non_integer_length(self) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            RunConfig(length="10001")

    def test_to_dict(self) -> None:
        data = RunConfig(seed=1).to_dict()

        assert data == {
            "length": 10001,
            "low": 1,
            "high": 1000,
            "seed": 1,
            "mode": "observed",
        }
