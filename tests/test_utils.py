"""Tests for parse-or-default helpers."""

from __future__ import annotations

import math

import pytest

from tm_settings.utils import (
    bool_or_default,
    cell_str,
    number_or_default,
    parse_float_prefix,
    split_csv,
)


class TestParseFloatPrefix:
    """Tests for parse_float_prefix()."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("42", 42.0),
            ("3.14", 3.14),
            ("  -0.5", -0.5),
            ("+8", 8.0),
            (".25", 0.25),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("1e", 1.0),
            ("25%", 25.0),
            ("50 miles", 50.0),
        ],
    )
    def test_leading_prefix(self, raw, expected) -> None:
        """The longest leading decimal literal is parsed, trailing text ignored."""
        assert parse_float_prefix(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "-", ".", "e5", "$10", None])
    def test_no_prefix(self, raw) -> None:
        """Input that does not start with a number yields None."""
        assert parse_float_prefix(raw) is None

    def test_infinity(self) -> None:
        """Infinity literals parse to signed infinities."""
        assert parse_float_prefix("Infinity") == math.inf
        assert parse_float_prefix("-Infinity") == -math.inf


class TestOrDefault:
    """Tests for number_or_default() and bool_or_default()."""

    def test_number_empty_and_none_use_default(self) -> None:
        """None and empty string both fall back."""
        assert number_or_default(None, 4) == 4
        assert number_or_default("", 4) == 4

    def test_number_parses(self) -> None:
        """A stored zero is a value, not a fallback."""
        assert number_or_default("0", 4) == 0

    def test_bool_is_single_literal(self) -> None:
        """Only TRUE (any case) is true; empty falls back to the default."""
        assert bool_or_default("tRuE", False) is True
        assert bool_or_default("on", True) is False
        assert bool_or_default(None, True) is True
        assert bool_or_default("", True) is True


def test_split_csv_trims_and_keeps_empty() -> None:
    """Parts are trimmed and empty parts, including an empty input, are kept."""
    assert split_csv("94103, 94110 ,94016") == ["94103", "94110", "94016"]
    assert split_csv("") == [""]
    assert split_csv(None) == [""]
    assert split_csv("94103,,") == ["94103", "", ""]


def test_cell_str() -> None:
    """None becomes empty; everything else goes through str()."""
    assert cell_str(None) == ""
    assert cell_str(0) == "0"
    assert cell_str("x") == "x"
