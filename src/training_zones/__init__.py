"""Personalized heart rate zones, power zones, and running training paces."""

from .calculator import (
    PaceMethod,
    TrainingPaceTable,
    ZoneCalculator,
    compute_heart_rate_zones,
    compute_power_zones,
    compute_training_paces,
)
from .exceptions import (
    TrainingZonesError,
    InvalidInputError,
    MissingInputError,
    DataSourceError,
    DataSourceTimeoutError,
)
from .metrics import (
    HeartRateZoneMethod,
    HeartRateZoneSet,
    PowerZoneSet,
    TrainingPaceType,
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
)
from .models import PhysiologicalInputs
from .sources import HealthDataSource, StaticHealthDataSource, gather_physiological_inputs

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Inputs
    "PhysiologicalInputs",
    # Calculator
    "ZoneCalculator",
    "PaceMethod",
    "TrainingPaceTable",
    "compute_heart_rate_zones",
    "compute_power_zones",
    "compute_training_paces",
    # Metrics
    "HeartRateZoneMethod",
    "HeartRateZoneSet",
    "PowerZoneSet",
    "TrainingPaceType",
    "estimate_vo2max_from_cooper_test",
    "estimate_vo2max_from_heart_rate_reserve",
    "estimate_vo2max_from_race",
    # Data sources
    "HealthDataSource",
    "StaticHealthDataSource",
    "gather_physiological_inputs",
    # Errors
    "TrainingZonesError",
    "InvalidInputError",
    "MissingInputError",
    "DataSourceError",
    "DataSourceTimeoutError",
]
