"""Array summation.

This module accumulates a filled array into a single integer.

Two contracts are available:

Intended:
    total = sum(arr[i] for i in 0 .. L - 1), starting from 0

Observed:
    the same loop, but each partial sum is bound to a throwaway local
    and discarded, so total stays at 0.

Every binding in both loops is a function local.
"""

from __future__ import annotations

import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)


class SumMode(str, Enum):
    """Which summation contract to reproduce."""

    OBSERVED = "observed"
    INTENDED = "intended"


def sum_intended(arr: np.ndarray) -> int:
    """
    Sum every element of the array.

    Parameters
    ----------
    arr : np.ndarray
        Integer array.

    Returns
    -------
    int
        Exact sum, 0 for an empty array.

    Notes
    -----
    Elements are converted to Python ints before adding, so the
    accumulator cannot overflow the array dtype.
    """
    total = 0
    for value in arr.tolist():
        total = total + value
    return total


def sum_observed(arr: np.ndarray) -> int:
    """
    Walk the array like the legacy fill-and-sum script and return 0.

    Each partial sum is computed from the accumulator and then dropped;
    the accumulator itself is never reassigned.

    Parameters
    ----------
    arr : np.ndarray
        Integer array.

    Returns
    -------
    int
        Always 0.
    """
    total = 0
    for value in arr.tolist():
        _partial = total + value  # noqa: F841
    return total


def resolve_mode(mode: SumMode | str) -> SumMode:
    """Coerce a mode name or member to SumMode."""
    if isinstance(mode, SumMode):
        return mode
    try:
        return SumMode(str(mode).lower())
    except ValueError:
        valid = ", ".join(m.value for m in SumMode)
        raise ValueError(f"Unknown sum mode {mode!r}, expected one of: {valid}") from None


def accumulate(
    arr: np.ndarray,
    mode: SumMode | str = SumMode.OBSERVED,
) -> int:
    """
    Sum an array under the chosen contract.

    Parameters
    ----------
    arr : np.ndarray
        Integer array.
    mode : SumMode | str, default SumMode.OBSERVED
        "observed" reproduces the always-zero output, "intended"
        returns the true sum.

    Returns
    -------
    int
        Final accumulator value.

    Raises
    ------
    ValueError
        If mode is not a known contract.

    Examples
    --------
    >>> arr = np.array([1, 2, 3], dtype=np.int32)
    >>> accumulate(arr, "intended")
    6
    >>> accumulate(arr, "observed")
    0
    """
    mode = resolve_mode(mode)

    if mode is SumMode.INTENDED:
        total = sum_intended(arr)
    else:
        total = sum_observed(arr)

    logger.debug("Accumulated %d elements (%s): %d", len(arr), mode.value, total)
    return total


def sum_bounds(length: int, low: int = 1, high: int = 1000) -> tuple[int, int]:
    """
    Range an intended sum must fall into.

    Parameters
    ----------
    length : int
        Number of elements.
    low, high : int
        Inclusive value range of each element.

    Returns
    -------
    tuple[int, int]
        (low * length, high * length).
    """
    return low * length, high * length
