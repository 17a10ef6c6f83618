"""Fill-and-sum runner.

This module wires the array initializer, the summation step and the
reporter into the linear procedure:

    initialize -> sum -> print

``main`` is the process entry point. A bare invocation reads no
arguments, files or environment variables and prints only the total.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import numpy as np
import yaml

from .config import RunConfig, load_config
from .fill import fill_array, make_rng
from .report import describe_array, report_total
from .results import RunResult
from .summation import SumMode, accumulate
from .validation import validate_array, validate_total

logger = logging.getLogger(__name__)


def run(
    config: RunConfig | None = None,
    rng: np.random.Generator | None = None,
) -> RunResult:
    """
    Fill an array and sum it.

    Parameters
    ----------
    config : RunConfig | None, optional
        Run settings. Defaults to RunConfig().
    rng : np.random.Generator | None, optional
        Generator to draw from. Overrides ``config.seed``; when both
        are absent the process-wide generator is used.

    Returns
    -------
    RunResult
        Array, total and the configuration used.

    Raises
    ------
    ValueError
        If the filled array or the total fails validation.
    """
    if config is None:
        config = RunConfig()

    if rng is None and config.seed is not None:
        rng = make_rng(config.seed)

    arr = fill_array(config.length, config.low, config.high, rng=rng)

    validation = validate_array(arr, config.length, config.low, config.high)
    if not validation.is_valid:
        for error in validation.errors:
            logger.error("Array validation failed: %s", error)
        raise ValueError(f"Filled array is invalid: {'; '.join(validation.errors)}")

    total = accumulate(arr, config.mode)
    if not validate_total(total, config.length, config.low, config.high, config.mode):
        logger.error("Total %d violates the %s contract", total, config.mode.value)
        raise ValueError(f"Total {total} is inconsistent with mode {config.mode.value!r}")

    return RunResult(
        array=arr,
        total=total,
        mode=config.mode,
        config=config.to_dict(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arraysum",
        description="Fill an integer array with random values and print its sum.",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SumMode],
        help="summation contract (default: observed)",
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    parser.add_argument(
        "--describe",
        action="store_true",
        help="print descriptive statistics of the array after the total",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Merge a YAML file (if given) with command-line overrides."""
    data = load_config(args.config) if args.config else {}
    config = RunConfig.from_dict(data)

    if args.mode is not None:
        config.mode = SumMode(args.mode)
    if args.seed is not None:
        config.seed = args.seed

    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run from the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
        result = run(config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("arraysum failed: %s", e)
        return 1

    report_total(result.total)

    if args.describe:
        sys.stdout.write(describe_array(result.array).to_string() + "\n")

    logger.debug("\n%s", result.summary())
    return 0
