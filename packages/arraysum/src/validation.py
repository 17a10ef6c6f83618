"""Array and total validation.

This module checks a filled array against the parameters it was
filled with, and a final total against the contract that produced it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .summation import SumMode, resolve_mode, sum_bounds

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of a validation check."""

    is_valid: bool
    errors: list[str]
    warnings: list[str]
    stats: dict[str, int | float]


def validate_array(
    arr: np.ndarray,
    length: int = 10001,
    low: int = 1,
    high: int = 1000,
) -> ValidationResult:
    """
    Validate a filled array.

    Parameters
    ----------
    arr : np.ndarray
        Array to validate.
    length : int, default 10001
        Number of elements the fill and sum loops both cover.
    low, high : int
        Inclusive range every element must fall into.

    Returns
    -------
    ValidationResult
        Validation result with errors, warnings, and stats.

    Examples
    --------
    >>> result = validate_array(fill_array())
    >>> result.is_valid
    True
    >>> result.stats["total_rows"]
    10001
    """
    errors: list[str] = []
    warnings: list[str] = []
    stats: dict[str, int | float] = {"total_rows": len(arr)}

    if len(arr) != length:
        errors.append(f"Length mismatch: expected {length} elements, found {len(arr)}")

    if not np.issubdtype(arr.dtype, np.integer):
        errors.append(f"Expected an integer array, found dtype {arr.dtype}")

    if len(arr) == 0:
        warnings.append("Array is empty")
    else:
        stats["min"] = int(arr.min())
        stats["max"] = int(arr.max())

        out_of_range = int(((arr < low) | (arr > high)).sum())
        stats["out_of_range"] = out_of_range
        if out_of_range > 0:
            errors.append(f"Found {out_of_range} values outside [{low}, {high}]")

    logger.info(f"Validated {len(arr)} elements: {len(errors)} errors, {len(warnings)} warnings")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        stats=stats,
    )


def validate_total(
    total: int,
    length: int,
    low: int = 1,
    high: int = 1000,
    mode: SumMode | str = SumMode.OBSERVED,
) -> bool:
    """
    Check a final total against its contract.

    Parameters
    ----------
    total : int
        Accumulator value.
    length : int
        Number of summed elements.
    low, high : int
        Inclusive element range.
    mode : SumMode | str, default SumMode.OBSERVED
        Contract that produced the total.

    Returns
    -------
    bool
        True if the total is 0 (observed) or lies within
        [low * length, high * length] (intended).
    """
    if resolve_mode(mode) is SumMode.OBSERVED:
        return total == 0

    lower, upper = sum_bounds(length, low, high)
    return lower <= total <= upper
