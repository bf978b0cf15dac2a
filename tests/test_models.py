"""Tests for the PhysiologicalInputs model."""

import pytest
from pydantic import ValidationError

from training_zones.models import PhysiologicalInputs


class TestPhysiologicalInputs:
    """Tests for construction and validation."""

    def test_all_optional(self):
        """Every field defaults to None."""
        inputs = PhysiologicalInputs()
        assert inputs.resting_hr is None
        assert inputs.max_hr is None
        assert inputs.age_years is None
        assert inputs.vo2max is None
        assert inputs.ftp is None
        assert inputs.best_5k_duration_sec is None
        assert inputs.best_12min_distance_m is None

    @pytest.mark.parametrize("field", ["resting_hr", "max_hr", "age_years", "vo2max", "ftp"])
    def test_negative_values_rejected(self, field):
        """Negative readings are not physiological."""
        with pytest.raises(ValidationError):
            PhysiologicalInputs(**{field: -1})

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_values_rejected(self, value):
        """NaN and infinity are not readings."""
        with pytest.raises(ValidationError):
            PhysiologicalInputs(vo2max=value)

    def test_frozen(self):
        """Inputs cannot be changed after construction."""
        inputs = PhysiologicalInputs(max_hr=188)
        with pytest.raises(ValidationError):
            inputs.max_hr = 190


class TestAvailability:
    """Tests for the availability predicates."""

    def test_hr_data_from_max_hr(self):
        """Max HR above 1 bpm is enough for HR zones."""
        assert PhysiologicalInputs(max_hr=188).has_hr_data()

    def test_hr_data_from_age(self):
        """Age alone is enough for HR zones."""
        assert PhysiologicalInputs(age_years=40).has_hr_data()

    def test_no_hr_data(self):
        """Resting HR alone is not enough."""
        assert not PhysiologicalInputs(resting_hr=50).has_hr_data()
        assert not PhysiologicalInputs(max_hr=1.0).has_hr_data()

    def test_power_data(self):
        """FTP must be set and positive."""
        assert PhysiologicalInputs(ftp=220).has_power_data()
        assert not PhysiologicalInputs(ftp=0).has_power_data()
        assert not PhysiologicalInputs().has_power_data()

    @pytest.mark.parametrize("kwargs", [
        {"best_12min_distance_m": 2800},
        {"best_5k_duration_sec": 1200},
        {"resting_hr": 49, "max_hr": 188},
        {"vo2max": 50},
    ])
    def test_run_data(self, kwargs):
        """Any qualifying pace input counts as run data."""
        assert PhysiologicalInputs(**kwargs).has_run_data()

    @pytest.mark.parametrize("kwargs", [
        {},
        {"best_12min_distance_m": 100},
        {"best_5k_duration_sec": 600},
        {"max_hr": 188},
        {"resting_hr": 1.0, "max_hr": 188},
        {"vo2max": 0},
    ])
    def test_no_run_data(self, kwargs):
        """Inputs at or below the thresholds do not count."""
        assert not PhysiologicalInputs(**kwargs).has_run_data()
