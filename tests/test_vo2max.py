"""Tests for VO2max estimation."""

import math

import pytest

from training_zones.exceptions import ErrorCode, InvalidInputError
from training_zones.metrics.vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_cooper_test_imperial,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
    estimate_vo2max_from_race_and_heart_rate,
)


class TestCooperTest:
    """Tests for the Cooper test regression."""

    def test_2800_meters(self):
        """2800 m in 12 minutes should give about 51.3."""
        vo2max = estimate_vo2max_from_cooper_test(2800)
        assert vo2max == pytest.approx(22.351 * 2.8 - 11.288)
        assert round(vo2max, 1) == 51.3

    def test_longer_distance_means_higher_vo2max(self):
        """VO2max increases linearly with distance."""
        assert estimate_vo2max_from_cooper_test(3200) > estimate_vo2max_from_cooper_test(2400)

    def test_zero_distance_returns_intercept(self):
        """Zero distance gives the regression intercept."""
        assert estimate_vo2max_from_cooper_test(0) == pytest.approx(-11.288)

    def test_negative_distance_rejected(self):
        """Negative distance is an invalid input."""
        with pytest.raises(InvalidInputError) as exc_info:
            estimate_vo2max_from_cooper_test(-100)
        assert exc_info.value.field == "distance_m"

    def test_imperial_formula(self):
        """Imperial variant uses its own coefficients."""
        assert estimate_vo2max_from_cooper_test_imperial(1.75) == pytest.approx(35.97 * 1.75 - 11.29)

    def test_imperial_close_to_metric(self):
        """Metric and imperial regressions agree to within a unit."""
        metric = estimate_vo2max_from_cooper_test(2816.3)
        imperial = estimate_vo2max_from_cooper_test_imperial(1.75)
        assert abs(metric - imperial) < 1.0


class TestRacePerformance:
    """Tests for the Daniels and Gilbert race formula."""

    def test_matches_formula(self):
        """5K in 20:00 follows the published equation exactly."""
        t = 20.0
        v = 5000 / t
        expected = (-4.60 + 0.182258 * v + 0.000104 * v ** 2) / (
            0.8 + 0.1894393 * math.exp(-0.012778 * t) + 0.2989558 * math.exp(-0.1932605 * t)
        )
        assert estimate_vo2max_from_race(5000, 1200) == pytest.approx(expected)

    def test_20_minute_5k_range(self):
        """A 20 minute 5K is roughly VO2max 50."""
        assert 49.0 <= estimate_vo2max_from_race(5000, 1200) <= 51.0

    def test_faster_time_means_higher_vo2max(self):
        """Running the same distance faster implies a higher VO2max."""
        assert estimate_vo2max_from_race(5000, 1100) > estimate_vo2max_from_race(5000, 1300)

    def test_not_clamped(self):
        """Very slow efforts are not clamped to a table minimum."""
        assert estimate_vo2max_from_race(5000, 3600) < 25.0

    def test_zero_duration_rejected(self):
        """Zero duration fails fast instead of producing infinity."""
        with pytest.raises(InvalidInputError) as exc_info:
            estimate_vo2max_from_race(5000, 0)
        assert exc_info.value.field == "duration_sec"
        assert exc_info.value.code == ErrorCode.INVALID_INPUT

    def test_negative_duration_rejected(self):
        """Negative duration is invalid."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_race(5000, -60)

    def test_zero_distance_rejected(self):
        """Zero distance is invalid."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_race(0, 1200)


class TestHeartRateReserve:
    """Tests for the max/resting heart rate ratio."""

    def test_known_values(self):
        """188 max and 49 resting gives about 58.7."""
        vo2max = estimate_vo2max_from_heart_rate_reserve(188, 49)
        assert vo2max == pytest.approx(15.3 * (188 / 49))
        assert vo2max == pytest.approx(58.69, abs=0.05)

    def test_zero_resting_hr_rejected(self):
        """Zero resting HR would divide by zero."""
        with pytest.raises(InvalidInputError) as exc_info:
            estimate_vo2max_from_heart_rate_reserve(188, 0)
        assert exc_info.value.field == "resting_hr"
        assert exc_info.value.details["value"] == 0

    def test_negative_resting_hr_rejected(self):
        """Negative resting HR is invalid."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_heart_rate_reserve(188, -50)

    def test_idempotent(self):
        """Same inputs give the same output."""
        assert estimate_vo2max_from_heart_rate_reserve(180, 55) == estimate_vo2max_from_heart_rate_reserve(180, 55)


class TestRaceAndHeartRate:
    """Tests for the sub-maximal effort estimate."""

    def test_known_values(self):
        """Formula applied to a 10K in 50 minutes at 160 bpm."""
        vo2max = estimate_vo2max_from_race_and_heart_rate(
            distance_m=10000,
            duration_min=50,
            load_hr=160,
            resting_hr=50,
            max_hr=190,
        )
        expected = (10000 / 50 * 0.2) / ((160 - 50) / (190 - 50)) + 3.5
        assert vo2max == pytest.approx(expected)

    def test_max_not_above_resting_rejected(self):
        """Max HR must exceed resting HR."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_race_and_heart_rate(10000, 50, 160, 60, 60)

    def test_load_not_above_resting_rejected(self):
        """Load HR must exceed resting HR."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_race_and_heart_rate(10000, 50, 50, 60, 190)

    def test_zero_duration_rejected(self):
        """Duration must be positive."""
        with pytest.raises(InvalidInputError):
            estimate_vo2max_from_race_and_heart_rate(10000, 0, 160, 50, 190)
