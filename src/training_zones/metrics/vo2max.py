"""
VO2max estimation.

Estimates maximal oxygen uptake (ml/kg/min) from whichever effort data is
available:
- Cooper test: distance covered in a ~12 minute maximal run
- Race performance: Daniels and Gilbert oxygen cost / drop-off equations
- Heart rate reserve ratio: max HR over resting HR (Uth et al.)
- Race performance with the average (load) heart rate of the effort

The constants below are the published regression coefficients and are not
meant to be tuned.

References:
- Cooper, K.H. (1968). A means of assessing maximal oxygen intake. JAMA.
- Daniels, J. & Gilbert, J. (1979). Oxygen Power.
- Uth, N. et al. (2004). Estimation of VO2max from the ratio between HRmax
  and HRrest. Eur J Appl Physiol.
"""

import math

from ..exceptions import InvalidInputError


METERS_PER_KM = 1000.0


def estimate_vo2max_from_cooper_test(distance_m: float) -> float:
    """
    Estimate VO2max from a Cooper test distance.

    Formula: VO2max = 22.351 * km - 11.288

    The effort is assumed to have lasted 12 minutes. Checking that a workout
    actually qualifies (12:00 to 12:10) is done by whoever selects the effort,
    see ``efforts.find_best_recent_efforts``.

    Args:
        distance_m: Distance covered in meters

    Returns:
        Estimated VO2max in ml/kg/min

    Example:
        >>> round(estimate_vo2max_from_cooper_test(2800), 1)
        51.3
    """
    if distance_m < 0:
        raise InvalidInputError(
            "Cooper test distance cannot be negative",
            field="distance_m",
            value=distance_m,
        )

    km = distance_m / METERS_PER_KM
    return (22.351 * km) - 11.288


def estimate_vo2max_from_cooper_test_imperial(distance_miles: float) -> float:
    """
    Estimate VO2max from a Cooper test distance given in miles.

    Formula: VO2max = 35.97 * miles - 11.29

    35.97 is Cooper's published coefficient and agrees with the metric
    formula (22.351 per km). A coefficient of 25.97 sometimes seen in
    ports is a typo and is about 17 ml/kg/min low at 1.75 miles.
    """
    if distance_miles < 0:
        raise InvalidInputError(
            "Cooper test distance cannot be negative",
            field="distance_miles",
            value=distance_miles,
        )
    return (35.97 * distance_miles) - 11.29


def _oxygen_cost(velocity_m_per_min: float) -> float:
    # Daniels' oxygen cost of running at a given velocity (ml/kg/min)
    return -4.60 + 0.182258 * velocity_m_per_min + 0.000104 * velocity_m_per_min ** 2


def _fraction_sustained(time_min: float) -> float:
    # Daniels' drop-off curve: share of VO2max sustainable for time_min minutes
    return (
        0.8 +
        0.1894393 * math.exp(-0.012778 * time_min) +
        0.2989558 * math.exp(-0.1932605 * time_min)
    )


def estimate_vo2max_from_race(distance_m: float, duration_sec: float) -> float:
    """
    Estimate VO2max from a race performance (Daniels and Gilbert formula).

    Let t be the duration in minutes and v the velocity in m/min:

        VO2max = (-4.60 + 0.182258 v + 0.000104 v^2)
                 / (0.8 + 0.1894393 e^(-0.012778 t) + 0.2989558 e^(-0.1932605 t))

    Unlike the VDOT tables, the result is not clamped or rounded.

    Args:
        distance_m: Race distance in meters
        duration_sec: Finishing time in seconds

    Returns:
        Estimated VO2max in ml/kg/min

    Raises:
        InvalidInputError: If the distance or duration is not positive
    """
    if duration_sec <= 0:
        raise InvalidInputError(
            "Race duration must be positive",
            field="duration_sec",
            value=duration_sec,
        )
    if distance_m <= 0:
        raise InvalidInputError(
            "Race distance must be positive",
            field="distance_m",
            value=distance_m,
        )

    time_min = duration_sec / 60.0
    velocity = distance_m / time_min

    return _oxygen_cost(velocity) / _fraction_sustained(time_min)


def estimate_vo2max_from_heart_rate_reserve(max_hr: float, resting_hr: float) -> float:
    """
    Estimate VO2max from the ratio of maximum to resting heart rate.

    Formula: VO2max = 15.3 * (max_hr / resting_hr)

    Args:
        max_hr: Maximum heart rate (bpm)
        resting_hr: Resting heart rate (bpm)

    Returns:
        Estimated VO2max in ml/kg/min

    Raises:
        InvalidInputError: If the resting heart rate is zero or negative
    """
    if resting_hr <= 0:
        raise InvalidInputError(
            "Resting heart rate must be positive",
            field="resting_hr",
            value=resting_hr,
        )
    return 15.3 * (max_hr / resting_hr)


def estimate_vo2max_from_race_and_heart_rate(
    distance_m: float,
    duration_min: float,
    load_hr: float,
    resting_hr: float,
    max_hr: float,
) -> float:
    """
    Estimate VO2max from a sub-maximal effort and the heart rate it took.

    The oxygen cost of the effort (0.2 ml/kg per meter) is scaled by the
    fraction of heart rate reserve used, then resting uptake (3.5) is added.

    Args:
        distance_m: Distance of the effort in meters
        duration_min: Duration of the effort in minutes
        load_hr: Average heart rate during the effort
        resting_hr: Resting heart rate
        max_hr: Maximum heart rate

    Returns:
        Estimated VO2max in ml/kg/min
    """
    if duration_min <= 0:
        raise InvalidInputError(
            "Effort duration must be positive",
            field="duration_min",
            value=duration_min,
        )
    if max_hr <= resting_hr:
        raise InvalidInputError(
            "Maximum heart rate must be above resting heart rate",
            field="max_hr",
            value=max_hr,
        )
    if load_hr <= resting_hr:
        raise InvalidInputError(
            "Load heart rate must be above resting heart rate",
            field="load_hr",
            value=load_hr,
        )

    reserve_fraction = (load_hr - resting_hr) / (max_hr - resting_hr)
    return (distance_m / duration_min * 0.2) / reserve_fraction + 3.5
