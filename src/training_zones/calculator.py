"""
Zone and pace calculator.

Picks the best available method for the inputs at hand and returns the
computed values together with the name of the method used.

Heart rate zones, first match wins:
1. Resting and max HR known -> Karvonen (heart rate reserve)
2. Max HR known -> percentages of actual max HR
3. Otherwise -> percentages of max HR estimated from age

Training paces, first qualifying input wins:
1. Cooper test distance > 100 m
2. Best recent 5K duration > 600 s
3. Resting and max HR known
4. VO2max > 0 (wearable estimates rank last)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from .exceptions import InvalidInputError, MissingInputError
from .metrics.paces import (
    TrainingPaceType,
    calculate_paces_from_cooper_test,
    calculate_paces_from_heart_rate_reserve,
    calculate_paces_from_race,
    calculate_paces_from_vo2max,
)
from .metrics.vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
)
from .metrics.zones import (
    HeartRateZoneMethod,
    HeartRateZoneSet,
    PowerZoneSet,
    calculate_hr_zones_karvonen,
    calculate_hr_zones_max_hr,
    calculate_power_zones,
    estimate_max_hr_from_age,
)
from .models import MIN_VALID_HR, PhysiologicalInputs

logger = logging.getLogger(__name__)

BEST_EFFORT_DISTANCE_M = 5000.0


class PaceMethod(str, Enum):
    """Input used to derive the training paces, in priority order."""
    COOPER_TEST = "Cooper Test"
    BEST_RECENT_5K = "Best Recent 5K"
    HEART_RATE = "Heart Rate"
    VO2MAX = "VO2 Max"


@dataclass(frozen=True)
class TrainingPaceTable:
    """
    Training paces as speeds (m/min) and the method that produced them.

    An empty table with no method means there was not enough data.
    """
    paces: Dict[TrainingPaceType, float] = field(default_factory=dict)
    method: Optional[PaceMethod] = None
    vo2max: Optional[float] = None

    @property
    def is_available(self) -> bool:
        return self.method is not None and bool(self.paces)

    def get(self, pace_type: TrainingPaceType) -> Optional[float]:
        """Speed for a pace type, or None when unavailable."""
        return self.paces.get(pace_type)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "method": self.method.value if self.method else None,
            "vo2max": round(self.vo2max, 2) if self.vo2max is not None else None,
            "paces_m_per_min": {
                pace_type.value: round(speed, 2)
                for pace_type, speed in self.paces.items()
            },
        }


def _check_resting_below_max(resting_hr: float, max_hr: float) -> None:
    if resting_hr >= max_hr:
        raise InvalidInputError(
            "Resting heart rate must be below maximum heart rate",
            field="resting_hr",
            value=resting_hr,
            details={"max_hr": max_hr},
        )


def compute_heart_rate_zones(
    resting_hr: Optional[float] = None,
    max_hr: Optional[float] = None,
    age_years: Optional[float] = None,
) -> HeartRateZoneSet:
    """
    Compute five heart rate zone boundaries from whatever HR data is known.

    Heart rates count as known when they are above 1 bpm.

    Args:
        resting_hr: Resting heart rate in bpm
        max_hr: Maximum heart rate in bpm
        age_years: Age in years, used only when max HR is unknown

    Returns:
        HeartRateZoneSet with boundaries and the method used

    Raises:
        MissingInputError: If neither max HR nor age is available
        InvalidInputError: If resting HR is not below max HR, or the age
            gives a non-positive max HR estimate

    Example:
        >>> compute_heart_rate_zones(resting_hr=49, max_hr=188).method.value
        'Heart Rate Reserve (Karvonen Formula)'
    """
    resting_known = resting_hr is not None and resting_hr > MIN_VALID_HR
    max_known = max_hr is not None and max_hr > MIN_VALID_HR

    if resting_known and max_known:
        _check_resting_below_max(resting_hr, max_hr)
        boundaries = calculate_hr_zones_karvonen(max_hr, resting_hr)
        method = HeartRateZoneMethod.HEART_RATE_RESERVE
        zone_max = max_hr
    elif max_known:
        boundaries = calculate_hr_zones_max_hr(max_hr)
        method = HeartRateZoneMethod.ACTUAL_MAX_HR
        zone_max = max_hr
    elif age_years is not None:
        zone_max = estimate_max_hr_from_age(age_years)
        if zone_max <= 0:
            raise InvalidInputError(
                "Age is outside the range of the max heart rate estimate",
                field="age_years",
                value=age_years,
            )
        boundaries = calculate_hr_zones_max_hr(zone_max)
        method = HeartRateZoneMethod.ESTIMATED_MAX_HR
    else:
        raise MissingInputError(
            "Heart rate zones need a maximum heart rate or an age",
            fields=["max_hr", "age_years"],
        )

    logger.debug("Heart rate zones calculated using %s", method.value)
    return HeartRateZoneSet(boundaries=boundaries, method=method, max_hr=zone_max)


def compute_power_zones(ftp: float) -> PowerZoneSet:
    """
    Compute the six Coggan power zone boundaries for an FTP.

    Raises:
        InvalidInputError: If FTP is zero or negative
    """
    return PowerZoneSet(ftp=ftp, boundaries=calculate_power_zones(ftp))


def compute_training_paces(inputs: PhysiologicalInputs) -> TrainingPaceTable:
    """
    Select the best available pace method and compute the training paces.

    The ranking is Cooper test, then best recent 5K, then heart rate, then
    VO2max. Directly measured VO2max from wearables is the least trusted
    input, so it only applies when no effort-based estimate is possible.

    Args:
        inputs: Physiological inputs

    Returns:
        TrainingPaceTable; empty when no input qualifies
    """
    if inputs.has_cooper_test:
        distance = inputs.best_12min_distance_m
        vo2max = estimate_vo2max_from_cooper_test(distance)
        paces = calculate_paces_from_cooper_test(distance)
        method = PaceMethod.COOPER_TEST
    elif inputs.has_best_5k:
        duration = inputs.best_5k_duration_sec
        vo2max = estimate_vo2max_from_race(BEST_EFFORT_DISTANCE_M, duration)
        paces = calculate_paces_from_race(duration, BEST_EFFORT_DISTANCE_M)
        method = PaceMethod.BEST_RECENT_5K
    elif inputs.has_resting_hr and inputs.has_max_hr:
        _check_resting_below_max(inputs.resting_hr, inputs.max_hr)
        vo2max = estimate_vo2max_from_heart_rate_reserve(inputs.max_hr, inputs.resting_hr)
        paces = calculate_paces_from_heart_rate_reserve(inputs.resting_hr, inputs.max_hr)
        method = PaceMethod.HEART_RATE
    elif inputs.has_vo2max:
        vo2max = inputs.vo2max
        paces = calculate_paces_from_vo2max(vo2max)
        method = PaceMethod.VO2MAX
    else:
        logger.debug("Not enough data to calculate training paces")
        return TrainingPaceTable()

    logger.debug("Training paces calculated using %s (VO2max %.1f)", method.value, vo2max)
    return TrainingPaceTable(paces=paces, method=method, vo2max=vo2max)


class ZoneCalculator:
    """
    Convenience wrapper computing every result available for one set of inputs.

    Methods return None (or an empty pace table) instead of raising when the
    matching availability predicate is false.
    """

    def __init__(self, inputs: PhysiologicalInputs):
        self.inputs = inputs

    def heart_rate_zones(self) -> Optional[HeartRateZoneSet]:
        if not self.inputs.has_hr_data():
            return None
        return compute_heart_rate_zones(
            resting_hr=self.inputs.resting_hr,
            max_hr=self.inputs.max_hr,
            age_years=self.inputs.age_years,
        )

    def power_zones(self) -> Optional[PowerZoneSet]:
        if not self.inputs.has_power_data():
            return None
        return compute_power_zones(self.inputs.ftp)

    def training_paces(self) -> TrainingPaceTable:
        return compute_training_paces(self.inputs)

    def to_dict(self) -> dict:
        """Convert all available results to a dictionary."""
        hr_zones = self.heart_rate_zones()
        power_zones = self.power_zones()
        return {
            "heart_rate_zones": hr_zones.to_dict() if hr_zones else None,
            "power_zones": power_zones.to_dict() if power_zones else None,
            "training_paces": self.training_paces().to_dict(),
        }
