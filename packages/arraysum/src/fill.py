"""Array initialization.

This module allocates the fixed-length integer array and fills every
slot with a uniform pseudo-random integer.

Fill:
    arr[i] ~ U{low, ..., high}   for i = 0 .. length - 1
    drawn in index order, element 0 first
"""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

# C ``int``
ARRAY_DTYPE = np.int32

# Indices 0..10000 inclusive
DEFAULT_LENGTH = 10001
DEFAULT_LOW = 1
DEFAULT_HIGH = 1000

_process_rng: np.random.Generator | None = None


def make_rng(seed: int | None = None) -> np.random.Generator:
    """
    Build a random generator.

    Parameters
    ----------
    seed : int | None, optional
        Seed for reproducible draws. None draws fresh OS entropy.

    Returns
    -------
    np.random.Generator
        Independent generator.

    Examples
    --------
    >>> a = fill_array(5, rng=make_rng(42))
    >>> b = fill_array(5, rng=make_rng(42))
    >>> (a == b).all()
    True
    """
    return np.random.default_rng(seed)


def process_rng() -> np.random.Generator:
    """Return the shared process-wide generator, creating it on first use."""
    global _process_rng
    if _process_rng is None:
        _process_rng = make_rng()
    return _process_rng


def check_dtype_range(low: int, high: int) -> None:
    """Raise ValueError unless [low, high] fits in ARRAY_DTYPE."""
    info = np.iinfo(ARRAY_DTYPE)
    if low < info.min or high > info.max:
        raise ValueError(
            f"range [{low}, {high}] does not fit in {np.dtype(ARRAY_DTYPE).name} "
            f"[{info.min}, {info.max}]"
        )


def fill_array(
    length: int = DEFAULT_LENGTH,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Allocate an integer array and fill it with uniform random values.

    Parameters
    ----------
    length : int, default 10001
        Number of slots.
    low : int, default 1
        Smallest value that can be drawn (inclusive).
    high : int, default 1000
        Largest value that can be drawn (inclusive).
    rng : np.random.Generator | None, optional
        Generator to consume. Defaults to the process-wide generator.

    Returns
    -------
    np.ndarray
        int32 array of shape (length,).

    Raises
    ------
    ValueError
        If length is negative, low > high, or the range does not fit
        in the int32 array.

    Notes
    -----
    Allocation failure is not handled; a MemoryError propagates.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    check_dtype_range(low, high)

    if rng is None:
        rng = process_rng()

    arr = np.empty(length, dtype=ARRAY_DTYPE)
    # Generator.integers excludes the upper bound unless endpoint=True
    arr[:] = rng.integers(low, high, size=length, endpoint=True)

    logger.debug("Filled array: length=%d, range=[%d, %d]", length, low, high)
    return arr
