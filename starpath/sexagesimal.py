"""
sexagesimal.py
Hours/degrees-minutes-seconds to decimal degree conversions.

hms_to_deg and dms_to_deg are plain arithmetic: no range checks, and the
sign lives in the leading component only. Inputs such as "-10 59 55.2"
therefore need the sign applied to the whole value, which is what
signed_dms_to_deg and the string parsers do.
"""

import numpy as np
import astropy.units as u
from astropy.coordinates import Angle

from starpath.models import EquatorialCoordinate, GeodeticLocation

DEGREES_PER_HOUR = 15

_POSITIVE_DIRECTIONS = {"N", "E"}
_NEGATIVE_DIRECTIONS = {"S", "W"}


def hms_to_deg(h, m, s):
    """
    Convert Right Ascension hours/minutes/seconds to degrees (1h = 15°).

    Example: hms_to_deg(20, 35, 25) -> 308.854166...
    """
    return (h + m / 60 + s / 3600) * DEGREES_PER_HOUR


def dms_to_deg(d, m, s):
    """
    Convert degrees/arcminutes/arcseconds to decimal degrees.

    Example: dms_to_deg(60, 14, 47) -> 60.246388...
    """
    return d + m / 60 + s / 3600


def signed_dms_to_deg(d, m, s, direction=None):
    """
    Convert D/M/S to degrees, applying the sign to the whole value.

    The result is negative when the degrees component is negative or when
    direction is "S" or "W". Minutes and seconds are taken as magnitudes.

    Args:
        d (float): Degrees, optionally negative.
        m (float): Arcminutes.
        s (float): Arcseconds.
        direction (str, optional): One of N, S, E, W (case-insensitive).

    Returns:
        float: Signed decimal degrees.

    Raises:
        ValueError: If direction is not a compass letter.
    """
    negative = d < 0
    if direction is not None:
        direction = direction.strip().upper()
        if direction in _NEGATIVE_DIRECTIONS:
            negative = True
        elif direction not in _POSITIVE_DIRECTIONS:
            raise ValueError(f"Unknown compass direction: {direction!r}")

    value = dms_to_deg(abs(d), m, s)
    return -value if negative else value


# -----------------------------------------------------------------------------
# STRING PARSING
# -----------------------------------------------------------------------------

def parse_ra(ra_str):
    """
    Parse Right Ascension from a sexagesimal string to degrees.

    Accepts "20:35:25", "20 35 25" or "20h35m25s". Returns NaN on parse failure.
    """
    try:
        return float(Angle(ra_str, unit="hourangle").degree)
    except (ValueError, TypeError, u.UnitsError):
        return np.nan


def parse_dec(dec_str):
    """
    Parse Declination (or latitude/longitude) from a sexagesimal string to degrees.

    A leading minus applies to the whole value ("-00:30:00" -> -0.5).
    Returns NaN on parse failure.
    """
    try:
        return float(Angle(dec_str, unit="deg").degree)
    except (ValueError, TypeError, u.UnitsError):
        return np.nan


# -----------------------------------------------------------------------------
# MODEL BUILDERS
# -----------------------------------------------------------------------------

def coordinate_from_sexagesimal(ra_hms, dec_dms, dec_direction=None):
    """
    Build an EquatorialCoordinate from (h, m, s) and (d, m, s) tuples.

    Args:
        ra_hms (tuple): Right Ascension hours, minutes, seconds.
        dec_dms (tuple): Declination degrees, arcminutes, arcseconds.
        dec_direction (str, optional): "N" or "S".

    Returns:
        EquatorialCoordinate
    """
    return EquatorialCoordinate(
        ra=hms_to_deg(*ra_hms),
        dec=signed_dms_to_deg(*dec_dms, direction=dec_direction),
    )


def location_from_dms(lat_dms, lat_direction, lon_dms, lon_direction):
    """
    Build a GeodeticLocation from D/M/S tuples and compass directions.

    Example: location_from_dms((42, 41, 1), "N", (71, 28, 16), "W")
    """
    return GeodeticLocation(
        latitude=signed_dms_to_deg(*lat_dms, direction=lat_direction),
        longitude=signed_dms_to_deg(*lon_dms, direction=lon_direction),
    )
