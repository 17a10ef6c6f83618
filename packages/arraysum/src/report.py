"""Reporting of the final accumulator."""

from __future__ import annotations

import sys
from typing import TextIO

import numpy as np
import pandas as pd


def format_total(total: int) -> str:
    """Decimal representation of the total followed by a newline."""
    return f"{int(total)}\n"


def report_total(total: int, stream: TextIO | None = None) -> None:
    """
    Write the total to a text stream.

    Parameters
    ----------
    total : int
        Final accumulator value.
    stream : TextIO | None, optional
        Destination. Defaults to sys.stdout.
    """
    if stream is None:
        stream = sys.stdout
    stream.write(format_total(total))


def describe_array(arr: np.ndarray) -> pd.Series:
    """
    Descriptive statistics of a filled array.

    Parameters
    ----------
    arr : np.ndarray
        Filled array.

    Returns
    -------
    pd.Series
        count, mean, std, min, 25%, 50%, 75%, max.
        Empty-array stats are NaN except count.
    """
    return pd.Series(arr, dtype="int64", name="value").describe()
