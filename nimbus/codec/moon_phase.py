"""Moon phase from a calendar date.

Low precision lunar ephemeris (epoch 1980 January 0.0), after John Walker's
moontool as ported in py-moon-phase. Good to a few hours, which is plenty to
pick one of eight named phases for a day.
"""

import math
from bisect import bisect_right
from datetime import date

from nimbus.errors import InvalidArgument
from nimbus.models.forecast import MoonPhase

# 1980 January 0.0 in JDN
EPOCH = 2444238.5

# Sun's orbit, epoch 1980.0
ECLIPTIC_LONGITUDE_EPOCH = 278.833540
ECLIPTIC_LONGITUDE_PERIGEE = 282.596403
ECCENTRICITY = 0.016718

# Moon's orbit, epoch 1980.0
MOON_MEAN_LONGITUDE_EPOCH = 64.975464
MOON_MEAN_PERIGEE_EPOCH = 349.383063

KEPLER_EPSILON = 1e-6
KEPLER_MAX_ITERATIONS = 100

# Lower bound of each phase after NEW_MOON; not evenly spaced, keep as is.
PHASE_BOUNDARIES = (0.0625, 0.1876, 0.3126, 0.4376, 0.5626, 0.6876, 0.8126, 0.9376)


def to_jdn(day: date) -> int:
    """Gregorian calendar date to Julian Day Number."""
    y, m, d = day.year, day.month, day.day
    a = _div(m - 14, 12)
    return (
        _div(1461 * (y + 4800 + a), 4)
        + _div(367 * (m - 2 - 12 * a), 12)
        - _div(3 * _div(y + 4900 + a, 100), 4)
        + d
        - 32075
    )


def fix_angle(angle: float) -> float:
    return angle - 360.0 * math.floor(angle / 360.0)


def kepler(m: float, ecc: float) -> float:
    """Solve Kepler's equation for mean anomaly ``m`` (degrees).

    Returns the eccentric anomaly in radians.
    """
    m_rad = math.radians(m)
    e = m_rad
    for _ in range(KEPLER_MAX_ITERATIONS):
        delta = e - ecc * math.sin(e) - m_rad
        e -= delta / (1.0 - ecc * math.cos(e))
        if abs(delta) <= KEPLER_EPSILON:
            break
    return e


def phase_fraction(day: date) -> float:
    """Fraction of the synodic month elapsed on ``day``, in [0, 1)."""
    days = to_jdn(day) - EPOCH

    # Sun
    n = fix_angle((360 / 365.2422) * days)
    m = fix_angle(n + ECLIPTIC_LONGITUDE_EPOCH - ECLIPTIC_LONGITUDE_PERIGEE)
    ec = kepler(m, ECCENTRICITY)
    ec = math.sqrt((1 + ECCENTRICITY) / (1 - ECCENTRICITY)) * math.tan(ec / 2.0)
    ec = 2 * math.degrees(math.atan(ec))
    lambda_sun = fix_angle(ec + ECLIPTIC_LONGITUDE_PERIGEE)

    # Moon
    moon_longitude = fix_angle(13.1763966 * days + MOON_MEAN_LONGITUDE_EPOCH)
    mm = fix_angle(moon_longitude - 0.1114041 * days - MOON_MEAN_PERIGEE_EPOCH)

    evection = 1.2739 * math.sin(math.radians(2 * (moon_longitude - lambda_sun) - mm))
    annual_eq = 0.1858 * math.sin(math.radians(m))
    a3 = 0.37 * math.sin(math.radians(m))
    mmp = mm + evection - annual_eq - a3

    mec = 6.2886 * math.sin(math.radians(mmp))
    a4 = 0.214 * math.sin(math.radians(2 * mmp))
    lp = moon_longitude + evection + mec - annual_eq + a4
    variation = 0.6583 * math.sin(math.radians(2 * (lp - lambda_sun)))
    lpp = lp + variation

    return fix_angle(lpp - lambda_sun) / 360.0


def phase_from_fraction(fraction: float) -> MoonPhase:
    """Map a phase fraction to a named phase.

    Buckets are half open, ``[low, high)``; below 0.0625 and at or above
    0.9376 is NEW_MOON. A provider reporting 1.0 also means new moon.
    """
    if not 0.0 <= fraction <= 1.0:
        raise InvalidArgument(f"phase fraction must be in [0, 1], got {fraction}")
    return MoonPhase(bisect_right(PHASE_BOUNDARIES, fraction) % len(MoonPhase))


def moon_phase(day: date) -> MoonPhase:
    return phase_from_fraction(phase_fraction(day))


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero, as the JDN formula expects."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q
