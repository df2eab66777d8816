"""
starpath
Paths of celestial objects across the local sky.

Equatorial (RA/Dec) to horizontal (Azimuth/Elevation) conversion for an
observer on Earth, and hourly position series over an observation window.
"""

from starpath.altaz import position_at, radec_to_azel
from starpath.julian import to_julian_date
from starpath.models import (
    EquatorialCoordinate,
    GeodeticLocation,
    HorizontalCoordinate,
    PositionSample,
)
from starpath.series import (
    generate_custom_range_series,
    generate_full_day_series,
    generate_nighttime_series,
)
from starpath.sexagesimal import dms_to_deg, hms_to_deg

__version__ = "0.1.0"

__all__ = [
    "EquatorialCoordinate",
    "GeodeticLocation",
    "HorizontalCoordinate",
    "PositionSample",
    "dms_to_deg",
    "generate_custom_range_series",
    "generate_full_day_series",
    "generate_nighttime_series",
    "hms_to_deg",
    "position_at",
    "radec_to_azel",
    "to_julian_date",
]
