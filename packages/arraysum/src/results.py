"""Run result container.

This module defines the RunResult dataclass that holds
all outputs from a fill-and-sum run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .summation import SumMode, sum_intended


@dataclass
class RunResult:
    """Container for run outputs.

    Attributes
    ----------
    array : np.ndarray
        The filled array.
    total : int
        Final accumulator value under ``mode``.
    mode : SumMode
        Summation contract that produced ``total``.
    config : dict[str, Any]
        Configuration used for the run.

    Examples
    --------
    >>> result = run(RunConfig(seed=42))
    >>> result.total
    0
    >>> result.length
    10001
    """

    array: np.ndarray
    total: int
    mode: SumMode = SumMode.OBSERVED
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def length(self) -> int:
        """Number of elements filled and summed."""
        return len(self.array)

    @property
    def expected_total(self) -> int:
        """True sum of the array, regardless of mode."""
        return sum_intended(self.array)

    def summary(self) -> str:
        """Generate summary string."""
        lines = [
            "Run Results",
            "=" * 40,
            f"Mode: {self.mode.value}",
            f"Length: {self.length}",
            f"Total: {self.total}",
            f"Expected Total: {self.expected_total}",
        ]
        if self.length > 0:
            lines.append(f"Min/Max: {int(self.array.min())}/{int(self.array.max())}")
        return "\n".join(lines)
