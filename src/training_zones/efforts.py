"""
Reduce raw health records to the scalar inputs used by the calculators.

The functions here pick out the best recent efforts from a workout history,
the highest recent heart rate, the athlete's age, and an FTP estimate from
power data. They are pure: callers pass in "now" explicitly.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Sequence

from .metrics.vo2max import estimate_vo2max_from_cooper_test

logger = logging.getLogger(__name__)

SECONDS_PER_YEAR = 365.25 * 24.0 * 60.0 * 60.0

BEST_EFFORT_MIN_DISTANCE_M = 5000.0
COOPER_TEST_MIN_DURATION_SEC = 12 * 60
COOPER_TEST_MAX_DURATION_SEC = (12 * 60) + 10

FTP_LONG_WINDOW_SEC = 20 * 60
FTP_LONG_WINDOW_FACTOR = 0.95
FTP_SHORT_WINDOW_SEC = 8 * 60
FTP_SHORT_WINDOW_FACTOR = 0.90


@dataclass(frozen=True)
class WorkoutRecord:
    """A completed workout as read from a health data store."""
    start_time: datetime
    duration_sec: float
    distance_m: Optional[float] = None
    activity_type: str = "running"


@dataclass(frozen=True)
class HeartRateSample:
    """A single heart rate reading."""
    timestamp: datetime
    bpm: float


@dataclass(frozen=True)
class BestEfforts:
    """
    Best recent running efforts.

    Attributes:
        best_5k_duration_sec: Duration of the fastest-paced run of 5K or longer
        best_5k_pace_sec_per_m: Pace of that run in seconds per meter
        best_12min_distance_m: Longest distance of a 12:00-12:10 run
    """
    best_5k_duration_sec: Optional[float] = None
    best_5k_pace_sec_per_m: Optional[float] = None
    best_12min_distance_m: Optional[float] = None

    @property
    def cooper_test_vo2max(self) -> Optional[float]:
        """VO2max implied by the best 12 minute effort, if there is one."""
        if self.best_12min_distance_m is None:
            return None
        return estimate_vo2max_from_cooper_test(self.best_12min_distance_m)


def find_best_recent_efforts(
    workouts: Iterable[WorkoutRecord],
    now: datetime,
    lookback_weeks: int = 26,
) -> BestEfforts:
    """
    Find the best 5K-or-longer run and the best 12 minute run.

    Only running workouts with a distance that started within the lookback
    window are considered.

    - Best 5K: among runs of at least 5000 m, the one with the lowest pace
      (seconds per meter). Its full duration is reported, so a faster 10K
      counts as a "5K" effort.
    - Best 12 minute effort: among runs lasting 12:00 to 12:10, the one
      covering the most distance. This is where Cooper test efforts are
      validated.

    Args:
        workouts: Workout history, in any order
        now: Reference time for the lookback window
        lookback_weeks: Size of the window in weeks

    Returns:
        BestEfforts with None for efforts that were not found
    """
    window_start = now - timedelta(weeks=lookback_weeks)

    best_5k_duration: Optional[float] = None
    best_5k_pace: Optional[float] = None
    best_12min_distance: Optional[float] = None

    for workout in workouts:
        if workout.activity_type != "running":
            continue
        if workout.start_time < window_start:
            continue
        if not workout.distance_m or workout.distance_m <= 0:
            continue

        distance = workout.distance_m
        duration = workout.duration_sec
        pace = duration / distance

        if distance >= BEST_EFFORT_MIN_DISTANCE_M:
            if best_5k_pace is None or pace <= best_5k_pace:
                best_5k_pace = pace
                best_5k_duration = duration

        if COOPER_TEST_MIN_DURATION_SEC <= duration <= COOPER_TEST_MAX_DURATION_SEC:
            if best_12min_distance is None or distance >= best_12min_distance:
                best_12min_distance = distance

    logger.debug(
        "Best recent efforts: 5K=%s s, 12min=%s m",
        best_5k_duration,
        best_12min_distance,
    )
    return BestEfforts(
        best_5k_duration_sec=best_5k_duration,
        best_5k_pace_sec_per_m=best_5k_pace,
        best_12min_distance_m=best_12min_distance,
    )


def estimate_max_hr_from_samples(
    samples: Iterable[HeartRateSample],
    now: datetime,
    lookback_days: int = 365,
) -> Optional[float]:
    """Return the highest heart rate recorded within the lookback window."""
    window_start = now - timedelta(days=lookback_days)
    recent = [s.bpm for s in samples if s.timestamp >= window_start]
    if not recent:
        return None
    return max(recent)


def age_in_years(birth_date: date, today: date) -> float:
    """Fractional age in years, using 365.25 day years."""
    elapsed = datetime.combine(today, datetime.min.time()) - datetime.combine(birth_date, datetime.min.time())
    return elapsed.total_seconds() / SECONDS_PER_YEAR


def _best_average(power_samples: Sequence[float], window_size: int) -> Optional[float]:
    """Highest rolling average over window_size samples, or None if too short."""
    if window_size <= 0 or len(power_samples) < window_size:
        return None

    window_sum = sum(power_samples[:window_size])
    best = window_sum
    for i in range(window_size, len(power_samples)):
        window_sum += power_samples[i] - power_samples[i - window_size]
        best = max(best, window_sum)
    return best / window_size


def estimate_ftp_from_power_samples(
    power_samples: List[float],
    sample_rate_hz: int = 1,
) -> Optional[float]:
    """
    Estimate FTP from a stream of power samples.

    FTP is the better of:
    - 95% of the best 20 minute average power
    - 90% of the best 8 minute average power

    Args:
        power_samples: Power values in watts, one per sample
        sample_rate_hz: Samples per second

    Returns:
        Estimated FTP in watts, or None with less than 8 minutes of data
    """
    if sample_rate_hz <= 0:
        return None

    candidates = []

    best_20min = _best_average(power_samples, FTP_LONG_WINDOW_SEC * sample_rate_hz)
    if best_20min is not None:
        candidates.append(best_20min * FTP_LONG_WINDOW_FACTOR)

    best_8min = _best_average(power_samples, FTP_SHORT_WINDOW_SEC * sample_rate_hz)
    if best_8min is not None:
        candidates.append(best_8min * FTP_SHORT_WINDOW_FACTOR)

    if not candidates:
        return None
    return max(candidates)
