"""Configuration loading utilities.

This module provides functions to load the YAML configuration that
parameterizes a fill-and-sum run, and the dataclass it resolves to.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from .fill import DEFAULT_HIGH, DEFAULT_LENGTH, DEFAULT_LOW, check_dtype_range
from .summation import SumMode, resolve_mode

CONFIG_SECTION = "arraysum"


def load_config(path: str | Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    path : str | Path
        Path to the YAML configuration file.

    Returns
    -------
    dict[str, Any]
        Configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    yaml.YAMLError
        If the YAML is malformed.

    Examples
    --------
    >>> cfg = load_config("conf/arraysum.yaml")
    >>> cfg["arraysum"]["length"]
    10001
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        config = yaml.safe_load(f)

    return config if config is not None else {}


def get_nested(config: dict[str, Any], *keys: str, default: Any = None) -> Any:
    """
    Get a nested value from a configuration dictionary.

    Parameters
    ----------
    config : dict[str, Any]
        Configuration dictionary.
    *keys : str
        Sequence of keys to traverse.
    default : Any, optional
        Default value if key path doesn't exist.

    Returns
    -------
    Any
        The value at the nested key path, or default.

    Examples
    --------
    >>> cfg = {"arraysum": {"length": 10001}}
    >>> get_nested(cfg, "arraysum", "length")
    10001
    >>> get_nested(cfg, "arraysum", "missing", default=100)
    100
    """
    result = config
    for key in keys:
        if isinstance(result, dict) and key in result:
            result = result[key]
        else:
            return default
    return result


@dataclass
class RunConfig:
    """Settings for one fill-and-sum run.

    Parameters
    ----------
    length : int, default 10001
        Array length (indices 0..length - 1).
    low : int, default 1
        Smallest fill value (inclusive).
    high : int, default 1000
        Largest fill value (inclusive).
    seed : int | None, default None
        RNG seed. None uses the process-wide generator.
    mode : SumMode, default SumMode.OBSERVED
        Summation contract.
    """

    length: int = DEFAULT_LENGTH
    low: int = DEFAULT_LOW
    high: int = DEFAULT_HIGH
    seed: int | None = None
    mode: SumMode = SumMode.OBSERVED

    def __post_init__(self) -> None:
        self.mode = resolve_mode(self.mode)
        for name in ("length", "low", "high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        check_dtype_range(self.low, self.high)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "RunConfig":
        """Build from a loaded configuration, reading the ``arraysum`` section."""
        return cls(
            length=get_nested(config, CONFIG_SECTION, "length", default=DEFAULT_LENGTH),
            low=get_nested(config, CONFIG_SECTION, "low", default=DEFAULT_LOW),
            high=get_nested(config, CONFIG_SECTION, "high", default=DEFAULT_HIGH),
            seed=get_nested(config, CONFIG_SECTION, "seed", default=None),
            mode=get_nested(config, CONFIG_SECTION, "mode", default=SumMode.OBSERVED.value),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data
