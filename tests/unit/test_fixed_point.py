"""Тесты для fixed-point helpers"""

import math

import pytest

from src.core.math import (
    base_units_to_whole,
    bps_to_fraction,
    deviation,
    is_finite,
    scale_integer,
    to_implied_integer,
)


class TestScaleInteger:
    """Тесты scale_integer."""

    def test_cents(self) -> None:
        assert scale_integer(999, 2) == 9.99

    def test_zero_decimals(self) -> None:
        assert scale_integer(42, 0) == 42.0

    def test_large_int64_no_overflow(self) -> None:
        assert scale_integer(2**63 - 1, 9) == pytest.approx(9223372036.854776)

    def test_negative(self) -> None:
        assert scale_integer(-999, 2) == -9.99

    def test_negative_decimals_raises(self) -> None:
        with pytest.raises(ValueError):
            scale_integer(1, -1)


class TestImpliedInteger:
    """Тесты to_implied_integer."""

    def test_cents(self) -> None:
        assert to_implied_integer(9.99) == 999

    def test_rounding(self) -> None:
        assert to_implied_integer(0.1 + 0.2) == 30

    def test_custom_decimals(self) -> None:
        assert to_implied_integer(1.5, 3) == 1500

    def test_non_finite_raises(self) -> None:
        with pytest.raises(ValueError):
            to_implied_integer(math.inf)

    def test_overflow_raises(self) -> None:
        with pytest.raises(ValueError):
            to_implied_integer(1e307)

    def test_decimals_overflow_raises(self) -> None:
        with pytest.raises(ValueError):
            to_implied_integer(9.99, 400)


class TestDeviation:
    """Тесты deviation."""

    def test_non_negative(self) -> None:
        assert deviation(9.98, 9.99) == pytest.approx(0.01)
        assert deviation(10.0, 9.99) == pytest.approx(0.01)

    def test_exact(self) -> None:
        assert deviation(9.99, 9.99) == 0.0

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_is_inf(self, value: float) -> None:
        assert deviation(value, 9.99) == math.inf
        assert deviation(9.99, value) == math.inf


class TestUnits:
    """Тесты bps / base units."""

    def test_bps(self) -> None:
        assert bps_to_fraction(500) == 0.05
        assert bps_to_fraction(2000) == 0.2

    def test_base_units(self) -> None:
        assert base_units_to_whole(1_000_000_000_000) == 1000
        assert base_units_to_whole(1_999_999_999) == 1
        assert base_units_to_whole(1_500_000, 6) == 1

    def test_base_units_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            base_units_to_whole(-1)

    def test_is_finite(self) -> None:
        assert is_finite(1.0)
        assert not is_finite(math.nan)
