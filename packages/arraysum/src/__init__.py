"""arraysum - Random array fill and summation.

Allocates a fixed-length integer array, fills it with uniform random
values and accumulates it into a single integer.

Public API:
- fill_array, make_rng: Array initialization
- accumulate, sum_intended, sum_observed, sum_bounds, SumMode: Summation
- validate_array, validate_total: Validation
- format_total, report_total, describe_array: Reporting
- load_config, RunConfig: Configuration
- run, main, RunResult: Runner
"""

from .fill import fill_array, make_rng
from .summation import SumMode, accumulate, sum_intended, sum_observed, sum_bounds
from .validation import ValidationResult, validate_array, validate_total
from .report import format_total, report_total, describe_array
from .config import load_config, RunConfig
from .results import RunResult
from .runner import run, main

__all__ = [
    # Fill
    "fill_array",
    "make_rng",
    # Summation
    "SumMode",
    "accumulate",
    "sum_intended",
    "sum_observed",
    "sum_bounds",
    # Validation
    "ValidationResult",
    "validate_array",
    "validate_total",
    # Report
    "format_total",
    "report_total",
    "describe_array",
    # Config
    "load_config",
    "RunConfig",
    # Runner
    "run",
    "main",
    "RunResult",
]
