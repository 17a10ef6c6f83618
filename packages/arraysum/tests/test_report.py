"""Tests for report module."""

import io

import numpy as np
import pytest

from src.report import describe_array, format_total, report_total


class TestFormatTotal:
    """Tests for format_total function."""

    def test_zero(self) -> None:
        assert format_total(0) == "0\n"

    def test_large(self) -> None:
        assert format_total(10001000) == "10001000\n"

    def test_numpy_integer(self) -> None:
        """Test numpy scalars are printed as plain decimals."""
        assert format_total(np.int64(42)) == "42\n"


class TestReportTotal:
    """Tests for report_total function."""

    def test_writes_to_stream(self) -> None:
        stream = io.StringIO()

        report_total(10001, stream)

        assert stream.getvalue() == "10001\n"

    def test_defaults_to_stdout(self, capsys) -> None:
        """Test output goes to stdout when no stream is given."""
        report_total(0)

        captured = capsys.readouterr()
        assert captured.out == "0\n"
        assert captured.err == ""


class TestDescribeArray:
    """Tests for describe_array function."""

    def test_basic_stats(self) -> None:
        arr = np.array([1, 2, 3, 4], dtype=np.int32)

        stats = describe_array(arr)

        assert stats["count"] == 4
        assert stats["mean"] == pytest.approx(2.5)
        assert stats["min"] == 1
        assert stats["max"] == 4
