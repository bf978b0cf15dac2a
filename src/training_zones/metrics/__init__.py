"""Training zone and pace formulas."""

from .vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_cooper_test_imperial,
    estimate_vo2max_from_race,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race_and_heart_rate,
)
from .paces import (
    TrainingPaceType,
    PACE_INTENSITIES,
    convert_vo2_to_speed,
    calculate_paces_from_vo2max,
    calculate_paces_from_cooper_test,
    calculate_paces_from_race,
    calculate_paces_from_heart_rate_reserve,
)
from .zones import (
    HeartRateZoneMethod,
    HeartRateZoneSet,
    PowerZoneSet,
    estimate_max_hr_from_age,
    calculate_hr_zones_karvonen,
    calculate_hr_zones_max_hr,
    calculate_power_zones,
    get_power_zone_names,
    get_zone_for_hr,
)

__all__ = [
    # VO2max estimation
    "estimate_vo2max_from_cooper_test",
    "estimate_vo2max_from_cooper_test_imperial",
    "estimate_vo2max_from_race",
    "estimate_vo2max_from_heart_rate_reserve",
    "estimate_vo2max_from_race_and_heart_rate",
    # Training paces
    "TrainingPaceType",
    "PACE_INTENSITIES",
    "convert_vo2_to_speed",
    "calculate_paces_from_vo2max",
    "calculate_paces_from_cooper_test",
    "calculate_paces_from_race",
    "calculate_paces_from_heart_rate_reserve",
    # Zones
    "HeartRateZoneMethod",
    "HeartRateZoneSet",
    "PowerZoneSet",
    "estimate_max_hr_from_age",
    "calculate_hr_zones_karvonen",
    "calculate_hr_zones_max_hr",
    "calculate_power_zones",
    "get_power_zone_names",
    "get_zone_for_hr",
]
