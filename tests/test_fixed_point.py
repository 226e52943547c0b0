# tests/test_fixed_point.py
"""
Fixed-Point Codec Tests - Unit Tests for Decimal Rendering and Parsing

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxgraph.adapters.formatting.fixed_point (SCALE, render, render_rate, parse, from_whole)
- fxgraph.domain (ExactRational, InvalidFormatError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from fxgraph.adapters.formatting.fixed_point import (
    SCALE,
    from_whole,
    parse,
    render,
    render_rate,
)
from fxgraph.domain.errors import InvalidArgumentError, InvalidFormatError
from fxgraph.domain.rational import ExactRational


class TestRender:
    def test_scale(self):
        assert SCALE == 100_000_000
        assert from_whole(1000) == 100_000_000_000

    @pytest.mark.parametrize(
        "scaled,text",
        [
            (0, "0.00000000"),
            (1, "0.00000001"),
            (100_000_000_000, "1000.00000000"),
            (3_333_333_333, "33.33333333"),
            (-150_000_000, "-1.50000000"),
            (-125_000_000, "-1.75000000"),
        ],
    )
    def test_render(self, scaled, text):
        assert render(scaled) == text

    def test_negative_below_one_unit_loses_sign(self):
        # Whole part truncates to 0; the fraction is the non-negative remainder.
        assert render(-50_000_000) == "0.50000000"
        assert render(-1) == "0.99999999"

    def test_negative_fraction_is_floored_remainder(self):
        assert render(-125_000_000) == "-1.75000000"
        assert render(-100_000_000) == "-1.00000000"


class TestRenderRate:
    @pytest.mark.parametrize(
        "n,d,text",
        [
            (91, 100, "0.91000000"),
            (75, 1, "75.00000000"),
            (1, 50000, "0.00002000"),
            (100, 91, "1.09890109"),
            (1, 75, "0.01333333"),
            (2, 3, "0.66666666"),
        ],
    )
    def test_exactly_eight_digits_truncated(self, n, d, text):
        assert render_rate(ExactRational.of(n, d)) == text


class TestParse:
    def test_whole_and_fraction(self):
        assert parse("12.34") == 1_234_000_000
        assert parse("1000") == 100_000_000_000
        assert parse("0.00000001") == 1

    def test_fraction_longer_than_eight_digits_is_truncated(self):
        assert parse("0.123456789") == 12_345_678

    def test_whitespace_and_trailing_point(self):
        assert parse("  5. ") == 500_000_000

    def test_signed_whole_part(self):
        assert parse("-2") == -200_000_000
        # The fraction is added to the signed whole part.
        assert parse("-1.5") == -50_000_000

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "1.2.3", ".5", "1.-5", "1e5", "1,5", "12.3a", "1\n.5", "1.5\n5"],
    )
    def test_malformed(self, text):
        with pytest.raises(InvalidFormatError):
            parse(text)

    def test_format_error_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError):
            parse(None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "scaled",
        [0, 1, 99_999_999, 100_000_000, 123_456_789_012, 10 ** 30 + 7],
    )
    def test_round_trip(self, scaled):
        assert parse(render(scaled)) == scaled
