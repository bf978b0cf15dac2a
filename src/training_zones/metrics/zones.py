"""Heart rate and power zone calculations."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..exceptions import InvalidInputError


NUM_HR_ZONES = 5
NUM_POWER_ZONES = 6

# Upper boundaries of zones 1-4 as a share of max HR (or of HR reserve).
# Zone 5 tops out at max HR.
HR_ZONE_PERCENTAGES: Tuple[float, ...] = (0.60, 0.70, 0.80, 0.90)

# Coggan 6-zone model as multiples of FTP; the last zone is open-ended
POWER_ZONE_MULTIPLIERS: Tuple[float, ...] = (0.55, 0.75, 0.90, 1.05, 1.20, 1.50)

HR_ZONE_DESCRIPTIONS: Tuple[str, ...] = (
    "Very Light (Recovery)",
    "Light (Endurance)",
    "Moderate",
    "Hard (Speed Endurance)",
    "Maximum",
)

POWER_ZONE_NAMES: Tuple[str, ...] = (
    "Active Recovery",
    "Endurance",
    "Tempo",
    "Lactate Threshold",
    "VO2 Max",
    "Anaerobic Capacity",
)


class HeartRateZoneMethod(str, Enum):
    """Algorithm used to compute heart rate zones."""
    HEART_RATE_RESERVE = "Heart Rate Reserve (Karvonen Formula)"
    ACTUAL_MAX_HR = "Actual Maximum Heart Rate"
    ESTIMATED_MAX_HR = "Estimated Maximum Heart Rate"


@dataclass(frozen=True)
class HeartRateZoneSet:
    """
    Five ascending heart rate zone boundaries.

    Attributes:
        boundaries: Upper boundaries of zones 1-5 in bpm; the last one is max HR
        method: Algorithm used to compute the boundaries
        max_hr: Maximum heart rate the zones were built on (actual or estimated)
    """
    boundaries: Tuple[float, ...]
    method: HeartRateZoneMethod
    max_hr: float

    def get_zone_ranges(self) -> List[Tuple[int, float, float, str]]:
        """Get all zones as list of (zone_num, low_bpm, high_bpm, description)."""
        ranges = []
        low = 0.0
        for i, high in enumerate(self.boundaries):
            ranges.append((i + 1, low, high, HR_ZONE_DESCRIPTIONS[i]))
            low = high
        return ranges

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "method": self.method.value,
            "max_hr": round(self.max_hr, 1),
            "zones": [
                {"zone": num, "min": round(low, 1), "max": round(high, 1), "name": name}
                for num, low, high, name in self.get_zone_ranges()
            ],
        }


@dataclass(frozen=True)
class PowerZoneSet:
    """
    Six ascending power zone boundaries derived from FTP.

    Zones: Active Recovery, Endurance, Tempo, Lactate Threshold, VO2 Max,
    Anaerobic Capacity (open-ended above the last boundary).
    """
    ftp: float
    boundaries: Tuple[float, ...]

    def get_zone_for_power(self, power: float) -> int:
        """Return zone number (1-6) for a given power value, 0 if negative."""
        if power < 0:
            return 0
        for i, boundary in enumerate(self.boundaries, 1):
            if power <= boundary:
                return i
        return NUM_POWER_ZONES

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "ftp": self.ftp,
            "zones": [
                {"zone": i, "name": name, "max": round(boundary, 1)}
                for i, (name, boundary) in enumerate(zip(POWER_ZONE_NAMES, self.boundaries), 1)
            ],
        }


def estimate_max_hr_from_age(age_years: float) -> float:
    """
    Estimate maximum heart rate from age using the Oakland nonlinear formula.

    Formula: 192.0 - 0.007 * age^2

    Args:
        age_years: Age in years (fractional ages are fine)

    Returns:
        Estimated maximum heart rate in bpm
    """
    return 192.0 - (0.007 * (age_years * age_years))


def calculate_hr_zones_karvonen(max_hr: float, resting_hr: float) -> Tuple[float, ...]:
    """
    Calculate HR zone boundaries using the Karvonen (heart rate reserve) method.

    Boundary i = (max_hr - resting_hr) * pct[i] + resting_hr for
    pct = 60%, 70%, 80%, 90%, and zone 5 ends at max_hr.

    Args:
        max_hr: Maximum heart rate
        resting_hr: Resting heart rate

    Returns:
        Tuple of five boundaries in bpm
    """
    hr_reserve = max_hr - resting_hr
    zones = [hr_reserve * pct + resting_hr for pct in HR_ZONE_PERCENTAGES]
    zones.append(max_hr)
    return tuple(zones)


def calculate_hr_zones_max_hr(max_hr: float) -> Tuple[float, ...]:
    """
    Calculate HR zone boundaries as percentages of maximum heart rate.

    Used when resting HR is unknown, with either a measured or an
    age-estimated max HR.
    """
    zones = [max_hr * pct for pct in HR_ZONE_PERCENTAGES]
    zones.append(max_hr)
    return tuple(zones)


def calculate_power_zones(ftp: float) -> Tuple[float, ...]:
    """
    Calculate the six power zone boundaries from FTP.

    Args:
        ftp: Functional Threshold Power in watts

    Returns:
        Tuple of six boundaries in watts

    Raises:
        InvalidInputError: If FTP is zero or negative
    """
    if ftp <= 0:
        raise InvalidInputError("FTP must be positive", field="ftp", value=ftp)
    return tuple(ftp * multiplier for multiplier in POWER_ZONE_MULTIPLIERS)


def get_power_zone_names() -> Dict[int, str]:
    """Get descriptive names for each power zone, keyed by zone number."""
    return {i: name for i, name in enumerate(POWER_ZONE_NAMES, 1)}


def get_zone_for_hr(hr: float, zone_set: Optional[HeartRateZoneSet]) -> int:
    """
    Return zone number (1-5) for a given heart rate.

    Heart rates above max HR are reported as zone 5; 0 means no zones.
    """
    if zone_set is None:
        return 0
    for i, boundary in enumerate(zone_set.boundaries, 1):
        if hr <= boundary:
            return i
    return NUM_HR_ZONES
