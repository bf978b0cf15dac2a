"""
Training pace calculations from VO2max.

Each training pace is run at a fixed share of VO2max. The scaled oxygen
uptake is converted into a running speed (meters per minute) with a
quadratic fit of speed against VO2:

    speed = 29.54 + 5.000663 * vo2 - 0.007546 * vo2^2

Intensities (share of VO2max), after the USATF coaches education material:
- Long Run: 60%
- Easy Run: 70%
- Marathon: 82%
- Tempo Run: 88%
- Functional Threshold: 90%
- Speed Session: 110%
- Short Interval: 115%
"""

from enum import Enum
from typing import Dict

from .vo2max import (
    estimate_vo2max_from_cooper_test,
    estimate_vo2max_from_heart_rate_reserve,
    estimate_vo2max_from_race,
)


class TrainingPaceType(str, Enum):
    """Named training paces, slowest first."""
    LONG_RUN = "long_run"
    EASY_RUN = "easy_run"
    MARATHON = "marathon"
    TEMPO_RUN = "tempo_run"
    FUNCTIONAL_THRESHOLD = "functional_threshold"
    SPEED_SESSION = "speed_session"
    SHORT_INTERVAL = "short_interval"

    @property
    def display_name(self) -> str:
        """Get human-readable name."""
        return PACE_DISPLAY_NAMES[self]


PACE_DISPLAY_NAMES: Dict[TrainingPaceType, str] = {
    TrainingPaceType.LONG_RUN: "Long Run Pace",
    TrainingPaceType.EASY_RUN: "Easy Run Pace",
    TrainingPaceType.MARATHON: "Marathon Pace",
    TrainingPaceType.TEMPO_RUN: "Tempo Run Pace",
    TrainingPaceType.FUNCTIONAL_THRESHOLD: "Functional Threshold Pace",
    TrainingPaceType.SPEED_SESSION: "Speed Session Pace",
    TrainingPaceType.SHORT_INTERVAL: "Short Interval Run Pace",
}

# Share of VO2max for each pace
PACE_INTENSITIES: Dict[TrainingPaceType, float] = {
    TrainingPaceType.LONG_RUN: 0.60,
    TrainingPaceType.EASY_RUN: 0.70,
    TrainingPaceType.MARATHON: 0.82,
    TrainingPaceType.TEMPO_RUN: 0.88,
    TrainingPaceType.FUNCTIONAL_THRESHOLD: 0.90,
    TrainingPaceType.SPEED_SESSION: 1.10,
    TrainingPaceType.SHORT_INTERVAL: 1.15,
}


def convert_vo2_to_speed(vo2: float) -> float:
    """
    Convert an oxygen uptake value to running speed.

    Args:
        vo2: Oxygen uptake in ml/kg/min

    Returns:
        Speed in meters per minute
    """
    return 29.54 + 5.000663 * vo2 - 0.007546 * vo2 * vo2


def calculate_paces_from_vo2max(vo2max: float) -> Dict[TrainingPaceType, float]:
    """
    Calculate the seven training paces for a VO2max value.

    Args:
        vo2max: VO2max in ml/kg/min

    Returns:
        Dictionary mapping each TrainingPaceType to a speed in m/min,
        ordered from slowest to fastest pace

    Example:
        >>> paces = calculate_paces_from_vo2max(50.0)
        >>> round(paces[TrainingPaceType.EASY_RUN], 1)
        195.3
    """
    return {
        pace_type: convert_vo2_to_speed(vo2max * intensity)
        for pace_type, intensity in PACE_INTENSITIES.items()
    }


def calculate_paces_from_cooper_test(distance_m: float) -> Dict[TrainingPaceType, float]:
    """Calculate training paces from a Cooper test distance in meters."""
    vo2max = estimate_vo2max_from_cooper_test(distance_m)
    return calculate_paces_from_vo2max(vo2max)


def calculate_paces_from_race(duration_sec: float, distance_m: float) -> Dict[TrainingPaceType, float]:
    """Calculate training paces from a race result (duration first, then distance)."""
    vo2max = estimate_vo2max_from_race(distance_m, duration_sec)
    return calculate_paces_from_vo2max(vo2max)


def calculate_paces_from_heart_rate_reserve(resting_hr: float, max_hr: float) -> Dict[TrainingPaceType, float]:
    """Calculate training paces from resting and maximum heart rate."""
    vo2max = estimate_vo2max_from_heart_rate_reserve(max_hr, resting_hr)
    return calculate_paces_from_vo2max(vo2max)
