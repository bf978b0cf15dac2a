"""
Health data sources.

A HealthDataSource reads individual physiological values from wherever they
live (a platform health store, a file export, a test fixture). Reads are
asynchronous and independent; gather_physiological_inputs runs them all at
once and joins the results into a PhysiologicalInputs before any calculation
happens.
"""

import asyncio
import logging
import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from .config import get_settings
from .efforts import (
    BestEfforts,
    HeartRateSample,
    WorkoutRecord,
    age_in_years,
    estimate_ftp_from_power_samples,
    estimate_max_hr_from_samples,
    find_best_recent_efforts,
)
from .exceptions import DataSourceTimeoutError
from .models import PhysiologicalInputs

logger = logging.getLogger(__name__)


class HealthDataSource(ABC):
    """
    Abstract base class for physiological data providers.

    Each reader returns None when the value is not available and raises when
    the read itself fails.
    """

    name: str = "base"

    @abstractmethod
    async def read_age(self) -> Optional[float]:
        """Age in years."""

    @abstractmethod
    async def read_resting_hr(self) -> Optional[float]:
        """Most recent resting heart rate in bpm."""

    @abstractmethod
    async def read_max_hr(self) -> Optional[float]:
        """Maximum heart rate in bpm (measured or observed)."""

    @abstractmethod
    async def read_vo2max(self) -> Optional[float]:
        """Most recent VO2max in ml/kg/min."""

    @abstractmethod
    async def read_ftp(self) -> Optional[float]:
        """Cycling Functional Threshold Power in watts."""

    @abstractmethod
    async def read_best_efforts(self) -> Optional[BestEfforts]:
        """Best recent running efforts."""


class StaticHealthDataSource(HealthDataSource):
    """In-memory data source holding already-known values."""

    name = "static"

    def __init__(
        self,
        age_years: Optional[float] = None,
        resting_hr: Optional[float] = None,
        max_hr: Optional[float] = None,
        vo2max: Optional[float] = None,
        ftp: Optional[float] = None,
        best_efforts: Optional[BestEfforts] = None,
    ):
        self.age_years = age_years
        self.resting_hr = resting_hr
        self.max_hr = max_hr
        self.vo2max = vo2max
        self.ftp = ftp
        self.best_efforts = best_efforts

    @classmethod
    def from_records(
        cls,
        now: datetime,
        birth_date: Optional[date] = None,
        resting_hr: Optional[float] = None,
        hr_samples: Iterable[HeartRateSample] = (),
        vo2max: Optional[float] = None,
        ftp: Optional[float] = None,
        workouts: Iterable[WorkoutRecord] = (),
        power_samples: Optional[List[float]] = None,
    ) -> "StaticHealthDataSource":
        """
        Build a source from raw records.

        Max HR is the highest sample within the configured lookback window,
        best efforts come from the workout history, and FTP falls back to an
        estimate from power samples when it was not set explicitly.
        """
        settings = get_settings()

        age = age_in_years(birth_date, now.date()) if birth_date else None
        max_hr = estimate_max_hr_from_samples(
            hr_samples, now, lookback_days=settings.max_hr_lookback_days
        )
        efforts = find_best_recent_efforts(
            workouts, now, lookback_weeks=settings.effort_lookback_weeks
        )
        if ftp is None and power_samples:
            ftp = estimate_ftp_from_power_samples(power_samples)

        return cls(
            age_years=age,
            resting_hr=resting_hr,
            max_hr=max_hr,
            vo2max=vo2max,
            ftp=ftp,
            best_efforts=efforts,
        )

    async def read_age(self) -> Optional[float]:
        return self.age_years

    async def read_resting_hr(self) -> Optional[float]:
        return self.resting_hr

    async def read_max_hr(self) -> Optional[float]:
        return self.max_hr

    async def read_vo2max(self) -> Optional[float]:
        return self.vo2max

    async def read_ftp(self) -> Optional[float]:
        return self.ftp

    async def read_best_efforts(self) -> Optional[BestEfforts]:
        return self.best_efforts


def _clean_value(field_name: str, value: Any, source_name: str) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        logger.warning(
            "Ignoring non-finite %s (%s) from %s", field_name, value, source_name
        )
        return None
    if value < 0:
        logger.warning(
            "Ignoring negative %s (%s) from %s", field_name, value, source_name
        )
        return None
    return value


async def gather_physiological_inputs(
    source: HealthDataSource,
    timeout_sec: Optional[float] = None,
) -> PhysiologicalInputs:
    """
    Read every input from a source concurrently and join the results.

    A reader that raises is logged and its fields are left unset, so one
    broken reading does not hide the others.

    Args:
        source: Data source to read from
        timeout_sec: Overall timeout; defaults to the configured value

    Returns:
        PhysiologicalInputs with whatever could be read

    Raises:
        DataSourceTimeoutError: If the reads do not finish in time
    """
    if timeout_sec is None:
        timeout_sec = get_settings().gather_timeout_sec

    readers = {
        "age_years": source.read_age,
        "resting_hr": source.read_resting_hr,
        "max_hr": source.read_max_hr,
        "vo2max": source.read_vo2max,
        "ftp": source.read_ftp,
        "best_efforts": source.read_best_efforts,
    }

    try:
        results = await asyncio.wait_for(
            asyncio.gather(*(reader() for reader in readers.values()), return_exceptions=True),
            timeout=timeout_sec,
        )
    except asyncio.TimeoutError as e:
        logger.error("Timed out reading inputs from %s after %ss", source.name, timeout_sec)
        raise DataSourceTimeoutError(source.name, timeout_sec) from e

    values: Dict[str, Optional[float]] = {}
    for field_name, result in zip(readers, results):
        if isinstance(result, Exception):
            logger.warning("Failed to read %s from %s: %s", field_name, source.name, result)
            continue

        if field_name == "best_efforts":
            if result is not None:
                values["best_5k_duration_sec"] = _clean_value(
                    "best_5k_duration_sec", result.best_5k_duration_sec, source.name
                )
                values["best_12min_distance_m"] = _clean_value(
                    "best_12min_distance_m", result.best_12min_distance_m, source.name
                )
            continue

        values[field_name] = _clean_value(field_name, result, source.name)

    return PhysiologicalInputs(**values)
