"""Tests for training pace calculations."""

import pytest

from training_zones.metrics.paces import (
    PACE_INTENSITIES,
    TrainingPaceType,
    calculate_paces_from_cooper_test,
    calculate_paces_from_heart_rate_reserve,
    calculate_paces_from_race,
    calculate_paces_from_vo2max,
    convert_vo2_to_speed,
)
from training_zones.metrics.vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
)


class TestConvertVo2ToSpeed:
    """Tests for the VO2 to speed polynomial."""

    def test_intercept(self):
        """Zero VO2 gives the polynomial intercept."""
        assert convert_vo2_to_speed(0) == pytest.approx(29.54)

    def test_known_value(self):
        """VO2 35 gives about 195.3 m/min."""
        expected = 29.54 + 5.000663 * 35 - 0.007546 * 35 ** 2
        assert convert_vo2_to_speed(35) == pytest.approx(expected)
        assert convert_vo2_to_speed(35) == pytest.approx(195.32, abs=0.01)


class TestPacesFromVo2max:
    """Tests for the seven named paces."""

    def test_all_paces_present(self):
        """Every pace type is in the table."""
        paces = calculate_paces_from_vo2max(50.0)
        assert set(paces) == set(TrainingPaceType)

    def test_category_order(self):
        """Table is ordered from long run to short interval."""
        paces = calculate_paces_from_vo2max(50.0)
        assert list(paces) == [
            TrainingPaceType.LONG_RUN,
            TrainingPaceType.EASY_RUN,
            TrainingPaceType.MARATHON,
            TrainingPaceType.TEMPO_RUN,
            TrainingPaceType.FUNCTIONAL_THRESHOLD,
            TrainingPaceType.SPEED_SESSION,
            TrainingPaceType.SHORT_INTERVAL,
        ]

    def test_speeds_increase_with_intensity(self):
        """Harder paces are faster."""
        speeds = list(calculate_paces_from_vo2max(50.0).values())
        assert all(a < b for a, b in zip(speeds, speeds[1:]))

    def test_intensities(self):
        """Each pace uses its fixed share of VO2max."""
        assert PACE_INTENSITIES[TrainingPaceType.LONG_RUN] == 0.60
        assert PACE_INTENSITIES[TrainingPaceType.MARATHON] == 0.82
        assert PACE_INTENSITIES[TrainingPaceType.FUNCTIONAL_THRESHOLD] == 0.90
        assert PACE_INTENSITIES[TrainingPaceType.SHORT_INTERVAL] == 1.15

    def test_easy_run_speed(self):
        """Easy run at VO2max 50 is run at VO2 35."""
        paces = calculate_paces_from_vo2max(50.0)
        assert paces[TrainingPaceType.EASY_RUN] == pytest.approx(convert_vo2_to_speed(35.0))

    def test_display_names(self):
        """Pace types have human-readable names."""
        assert TrainingPaceType.LONG_RUN.display_name == "Long Run Pace"
        assert TrainingPaceType.SHORT_INTERVAL.display_name == "Short Interval Run Pace"

    def test_idempotent(self):
        """Same VO2max gives the same table."""
        assert calculate_paces_from_vo2max(47.3) == calculate_paces_from_vo2max(47.3)


class TestConvenienceEntryPoints:
    """Entry points derive VO2max first, then delegate."""

    def test_cooper_test(self):
        """Cooper test paces match paces for the Cooper VO2max."""
        expected = calculate_paces_from_vo2max(estimate_vo2max_from_cooper_test(2800))
        assert calculate_paces_from_cooper_test(2800) == pytest.approx(expected)

    def test_race(self):
        """Race paces take duration first and distance second."""
        expected = calculate_paces_from_vo2max(estimate_vo2max_from_race(5000, 1200))
        assert calculate_paces_from_race(1200, 5000) == pytest.approx(expected)

    def test_heart_rate_reserve(self):
        """Heart rate paces take resting HR first and max HR second."""
        expected = calculate_paces_from_vo2max(estimate_vo2max_from_heart_rate_reserve(188, 49))
        assert calculate_paces_from_heart_rate_reserve(49, 188) == pytest.approx(expected)
