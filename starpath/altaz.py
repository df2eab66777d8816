"""
altaz.py
Alt/Az coordinate utilities.

This module converts equatorial coordinates (RA/Dec) to horizontal
coordinates (Azimuth/Elevation) for an observer on Earth, going through
Julian Date, Greenwich and Local Sidereal Time and the Local Hour Angle.

All angles are in degrees unless otherwise stated.

Conventions:
- Longitude: positive East of Greenwich
- Latitude: positive North
- Azimuth: 0° = North, increasing eastward (astronomical convention)
- Time: UTC (any timezone-aware datetime is accepted)

Reference formula: MathWorks File Exchange #26458 (RaDec2AzEl), GMST from the
IAU 1982 polynomial. No refraction, precession, nutation or parallax.
Azimuths quoted on geoastro.de for the same example are 180° away from
the ones produced here; the two sources measure azimuth from different
origins.
"""

import numpy as np

from starpath.julian import julian_centuries, to_julian_date
from starpath.models import HorizontalCoordinate
from starpath.trig import asind, atan2d, cosd, mod, sind, wrap_angle_deg

SECONDS_PER_DAY = 86400
SECONDS_PER_DEGREE = 240       # 86400 s of sidereal time = 360°

# -----------------------------------------------------------------------------
# SIDEREAL TIME
# -----------------------------------------------------------------------------

def gmst_seconds(T):
    """
    Raw IAU 1982 Greenwich Mean Sidereal Time polynomial.

    Args:
        T (float): Julian centuries since J2000.0.

    Returns:
        float: GMST in seconds of time, not reduced to one day.
    """
    return (
        67310.54841 +
        (876600 * 3600 + 8640184.812866) * T +
        0.093104 * T**2 -
        6.2e-6 * T**3
    )


def greenwich_sidereal_time(instant):
    """
    Greenwich Mean Sidereal Time in degrees.

    The raw seconds are first reduced by a day whose sign follows the raw
    value, then converted to degrees and reduced by 360. Both reductions
    keep the sign of the dividend, so instants before the zero crossing of
    the polynomial (1999-12-31 ~17:21 UTC) give a value in (-360, 0].
    A raw value of exactly zero gives NaN.

    Args:
        instant (datetime, str or astropy.time.Time): Observation time.

    Returns:
        float: GMST in degrees.
    """
    T = julian_centuries(to_julian_date(instant))
    theta = np.float64(gmst_seconds(T))

    with np.errstate(invalid="ignore"):
        sign = theta / np.abs(theta)

    return mod(mod(theta, SECONDS_PER_DAY * sign) / SECONDS_PER_DEGREE, 360)


def local_sidereal_time(instant, longitude_deg):
    """
    Local Sidereal Time in degrees (GMST + East longitude, not re-wrapped).
    """
    return greenwich_sidereal_time(instant) + longitude_deg


def local_hour_angle(ra_deg, instant, longitude_deg):
    """
    Local Hour Angle in degrees.

    Reduced with the native remainder only, so the result lies in
    (-360, 360) and is negative whenever LST - RA is.

    Args:
        ra_deg (float): Right Ascension in degrees.
        instant (datetime, str or astropy.time.Time): Observation time.
        longitude_deg (float): Observer longitude in degrees (+East).

    Returns:
        float: Hour angle in degrees.
    """
    return mod(local_sidereal_time(instant, longitude_deg) - ra_deg, 360)


# -----------------------------------------------------------------------------
# ALT/AZ CORE
# -----------------------------------------------------------------------------

def radec_to_azel(ra_deg, dec_deg, lat_deg, lon_deg, instant):
    """
    Convert equatorial coordinates (RA/Dec) to horizontal coordinates (Az/El).

    Nothing is clamped and nothing raises: an observer at a pole or an
    object in the zenith can drive the azimuth divisions towards zero and
    the result may contain inf/NaN, which is returned as is.

    Args:
        ra_deg (float): Right Ascension in degrees.
        dec_deg (float): Declination in degrees.
        lat_deg (float): Observer latitude in degrees (+North).
        lon_deg (float): Observer longitude in degrees (+East).
        instant (datetime, str or astropy.time.Time): Observation time.

    Returns:
        HorizontalCoordinate:
            azimuth (float): degrees in [0, 360), 0° = North, increasing East.
            elevation (float): degrees above the horizon.
    """
    lha = local_hour_angle(ra_deg, instant, lon_deg)

    # Elevation
    el = asind(sind(lat_deg) * sind(dec_deg) + cosd(lat_deg) * cosd(dec_deg) * cosd(lha))

    # Azimuth (measured from North, increasing Eastward)
    with np.errstate(divide="ignore", invalid="ignore"):
        y = np.float64(-sind(lha)) * cosd(dec_deg) / cosd(el)
        x = (np.float64(sind(dec_deg)) - sind(el) * sind(lat_deg)) / (np.float64(cosd(el)) * cosd(lat_deg))
    az = mod(atan2d(y, x), 360)

    return HorizontalCoordinate(azimuth=wrap_angle_deg(az), elevation=el)


def position_at(coordinate, location, instant):
    """
    Horizontal position of an EquatorialCoordinate seen from a GeodeticLocation.
    """
    return radec_to_azel(
        coordinate.ra,
        coordinate.dec,
        location.latitude,
        location.longitude,
        instant,
    )


if __name__ == "__main__":
    # Quick smoke test: the 1991-05-19 13:00 UTC example (lat 50, lon 10)
    from datetime import datetime, timezone

    when = datetime(1991, 5, 19, 13, 0, tzinfo=timezone.utc)
    pos = radec_to_azel(55.8, 19.7, 50, 10, when)
    print("GMST:", greenwich_sidereal_time(when))
    print("LHA :", local_hour_angle(55.8, when, 10))
    print("AZ  :", pos.azimuth)
    print("EL  :", pos.elevation)
