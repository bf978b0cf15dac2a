"""Input model for the zone and pace calculators.

Every field is optional; the availability predicates tell a caller which
results can be computed before asking for them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Thresholds an input must exceed before a method will use it
MIN_VALID_HR = 1.0
MIN_COOPER_DISTANCE_M = 100.0
MIN_BEST_5K_DURATION_SEC = 600.0


class PhysiologicalInputs(BaseModel):
    """Scalar physiological readings supplied by the data-access layer."""

    model_config = ConfigDict(frozen=True)

    resting_hr: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Resting heart rate in bpm")
    max_hr: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Maximum heart rate in bpm")
    age_years: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Age in years")
    vo2max: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="VO2max in ml/kg/min")
    ftp: Optional[float] = Field(None, ge=0, allow_inf_nan=False, description="Functional Threshold Power in watts")
    best_5k_duration_sec: Optional[float] = Field(
        None, ge=0, allow_inf_nan=False, description="Duration of the best recent 5K-or-longer effort in seconds"
    )
    best_12min_distance_m: Optional[float] = Field(
        None, ge=0, allow_inf_nan=False, description="Distance of the best recent ~12 minute effort in meters"
    )

    @property
    def has_resting_hr(self) -> bool:
        return self.resting_hr is not None and self.resting_hr > MIN_VALID_HR

    @property
    def has_max_hr(self) -> bool:
        return self.max_hr is not None and self.max_hr > MIN_VALID_HR

    @property
    def has_cooper_test(self) -> bool:
        return (
            self.best_12min_distance_m is not None
            and self.best_12min_distance_m > MIN_COOPER_DISTANCE_M
        )

    @property
    def has_best_5k(self) -> bool:
        return (
            self.best_5k_duration_sec is not None
            and self.best_5k_duration_sec > MIN_BEST_5K_DURATION_SEC
        )

    @property
    def has_vo2max(self) -> bool:
        return self.vo2max is not None and self.vo2max > 0.0

    def has_hr_data(self) -> bool:
        """True when heart rate zones can be computed (max HR or age known)."""
        return self.has_max_hr or self.age_years is not None

    def has_power_data(self) -> bool:
        """True when power zones can be computed."""
        return self.ftp is not None and self.ftp > 0

    def has_run_data(self) -> bool:
        """True when at least one training pace method qualifies."""
        return (
            self.has_cooper_test
            or self.has_best_5k
            or (self.has_resting_hr and self.has_max_hr)
            or self.has_vo2max
        )
