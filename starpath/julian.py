"""
julian.py
Time conversion utilities.

Observation times are plain datetime objects. Timezone-aware datetimes are
absolute instants; naive datetimes are taken to be UTC, which is also how
astropy.time.Time reads them. Strings and astropy Time objects are accepted
wherever an instant is expected and converted with as_instant().
"""

from datetime import datetime, timedelta, timezone

from astropy.time import Time

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
JD_UNIX_EPOCH = 2440587.5      # Julian Date of 1970-01-01T00:00:00Z
JD_J2000 = 2451545             # Julian Date of the J2000.0 epoch
MS_PER_DAY = 86400000
DAYS_PER_CENTURY = 36525

_ONE_MS = timedelta(milliseconds=1)


def as_instant(value):
    """
    Coerce an observation time into a timezone-aware datetime.

    Args:
        value (datetime, str or astropy.time.Time): Observation time.
            Naive datetimes and strings are read as UTC.

    Returns:
        datetime: Timezone-aware datetime. Aware inputs keep their tzinfo.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    t = Time(value, scale="utc")
    return t.to_datetime(timezone=timezone.utc)


def epoch_milliseconds(instant):
    """Whole milliseconds since 1970-01-01T00:00:00Z (floored)."""
    return (as_instant(instant) - UNIX_EPOCH) // _ONE_MS


def to_julian_date(instant):
    """
    Convert an instant to a Julian Date.

    JD = epoch_ms / 86400000 + 2440587.5. There is no range check; instants
    before 1970 simply give a negative millisecond count.

    Args:
        instant (datetime, str or astropy.time.Time): Observation time.

    Returns:
        float: Julian Date.
    """
    return epoch_milliseconds(instant) / MS_PER_DAY + JD_UNIX_EPOCH


def julian_centuries(jd):
    """Julian centuries elapsed since J2000.0 for a Julian Date."""
    return (jd - JD_J2000) / DAYS_PER_CENTURY
