"""Display helpers: pace strings, durations, and zone bars."""

from dataclasses import dataclass
from typing import List

from .config import UnitSystem
from .metrics.zones import HR_ZONE_DESCRIPTIONS, POWER_ZONE_NAMES, HeartRateZoneSet, PowerZoneSet


METERS_PER_KM = 1000.0
METERS_PER_MILE = 1609.34

SECS_PER_DAY = 86400
SECS_PER_HOUR = 3600
SECS_PER_MIN = 60

NOT_SET = "Not Set"
NOT_CALCULATED = "Not Calculated"


@dataclass(frozen=True)
class ZoneBar:
    """One bar of a zone chart."""
    value: float
    label: str
    description: str


def format_duration(seconds: float) -> str:
    """
    Format a number of seconds as MM:SS, HH:MM:SS or DD:HH:MM:SS.

    Fractional seconds are truncated.

    Example:
        >>> format_duration(3725)
        '01:02:05'
    """
    remaining = int(seconds)
    days = remaining // SECS_PER_DAY
    remaining -= days * SECS_PER_DAY
    hours = remaining // SECS_PER_HOUR
    remaining -= hours * SECS_PER_HOUR
    minutes = remaining // SECS_PER_MIN
    secs = remaining % SECS_PER_MIN

    if days > 0:
        return f"{days:02d}:{hours:02d}:{minutes:02d}:{secs:02d}"
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_speed_as_pace(speed_m_per_min: float, units: UnitSystem = UnitSystem.METRIC) -> str:
    """
    Convert a speed in m/min to a pace string in the requested units.

    Args:
        speed_m_per_min: Speed in meters per minute
        units: Metric (min/km) or imperial (min/mile)

    Returns:
        Pace such as "04:30 min/km", or "--" for non-positive speeds
    """
    if speed_m_per_min <= 0:
        return "--"

    if units == UnitSystem.IMPERIAL:
        pace_sec = 60.0 / (speed_m_per_min / METERS_PER_MILE)
        return f"{format_duration(pace_sec)} min/mile"

    pace_sec = 60.0 / (speed_m_per_min / METERS_PER_KM)
    return f"{format_duration(pace_sec)} min/km"


def parse_duration(time_str: str) -> int:
    """
    Parse a duration string to seconds.

    Accepts formats: H:MM:SS, MM:SS, or just seconds

    Raises:
        ValueError: If the format is invalid
    """
    time_str = time_str.strip()

    try:
        return int(float(time_str))
    except ValueError:
        pass

    parts = time_str.split(":")

    try:
        if len(parts) == 3:
            hours, minutes, seconds = parts
            return int(hours) * 3600 + int(minutes) * 60 + int(float(seconds))
        elif len(parts) == 2:
            minutes, seconds = parts
            return int(minutes) * 60 + int(float(seconds))
        else:
            raise ValueError(f"Invalid time format: {time_str}")
    except (ValueError, TypeError) as e:
        raise ValueError(f"Invalid time format: {time_str}") from e


def heart_rate_zone_bars(zone_set: HeartRateZoneSet) -> List[ZoneBar]:
    """One bar per heart rate zone, labelled with the whole bpm value."""
    return [
        ZoneBar(value=value, label=str(int(value)), description=description)
        for value, description in zip(zone_set.boundaries, HR_ZONE_DESCRIPTIONS)
    ]


def power_zone_bars(zone_set: PowerZoneSet) -> List[ZoneBar]:
    """One bar per power zone, labelled with the whole watt value."""
    return [
        ZoneBar(value=value, label=str(int(value)), description=name)
        for value, name in zip(zone_set.boundaries, POWER_ZONE_NAMES)
    ]
