"""Tests for half-away-from-zero rounding."""

from __future__ import annotations

import math

import pytest

from valuefmt.domain.numbers import round_half_away, round_to_places


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (2.5, 3.0),
            (-2.5, -3.0),
            (0.5, 1.0),
            (-0.5, -1.0),
            (1.4999, 1.0),
            (0.49999999999999994, 0.0),
            (3.0, 3.0),
        ],
    )
    def test_ties_away_from_zero(self, value: float, expected: float) -> None:
        assert round_half_away(value) == expected

    def test_differs_from_bankers_rounding(self) -> None:
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3.0

    def test_non_finite_pass_through(self) -> None:
        assert math.isnan(round_half_away(math.nan))
        assert round_half_away(math.inf) == math.inf
        assert round_half_away(-math.inf) == -math.inf


class TestRoundToPlaces:
    def test_two_places(self) -> None:
        assert round_to_places(0.2289, 2) == 0.23

    def test_negative_value(self) -> None:
        assert round_to_places(-0.2289, 2) == -0.23

    def test_binary_representation_is_respected(self) -> None:
        """1.005 is stored just below 1.005, so the product rounds down."""
        assert round_to_places(1.005, 2) == 1.0

    def test_zero_places(self) -> None:
        assert round_to_places(2.5, 0) == 3.0
        assert round_to_places(-2.5, 0) == -3.0

    def test_negative_places_round_to_powers_of_ten(self) -> None:
        assert round_to_places(1234.5, -2) == pytest.approx(1200.0)
        assert round_to_places(1250.0, -2) == pytest.approx(1300.0)

    def test_nan(self) -> None:
        assert math.isnan(round_to_places(math.nan, 2))

    @pytest.mark.parametrize("places", [400, -400, 10**400, -(10**400)])
    def test_scale_out_of_float_range_is_nan(self, places: int) -> None:
        assert math.isnan(round_to_places(1.5, places))

    def test_largest_finite_scale(self) -> None:
        assert round_to_places(1.5, 300) == pytest.approx(1.5)
