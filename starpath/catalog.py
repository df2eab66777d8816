"""
catalog.py
Built-in reference objects and the default observing site.

These are fixed coordinates; there is no catalog service behind them.
Use get_reference_object() for case-insensitive lookup by name.
"""

from starpath.models import EquatorialCoordinate
from starpath.series import generate_full_day_series
from starpath.sexagesimal import coordinate_from_sexagesimal, location_from_dms

# The Sun at one particular time; it moves about 1° per day, so this is
# only meaningful near the date it was taken.
SUN_SAMPLE = coordinate_from_sexagesimal((13, 42, 32.13), (-10, 59, 55.2))

# Fireworks (NGC 6946) field, the default target
FIREWORKS_NEBULA = coordinate_from_sexagesimal((20, 35, 25), (60, 14, 47))

POLARIS = EquatorialCoordinate(ra=37.9544, dec=89.2641)

# Dunstable, Massachusetts, USA
DUNSTABLE_MA = location_from_dms((42, 41, 1), "N", (71, 28, 16), "W")

REFERENCE_OBJECTS = {
    "sun": SUN_SAMPLE,
    "fireworks nebula": FIREWORKS_NEBULA,
    "polaris": POLARIS,
}


def get_reference_object(name):
    """
    Return the EquatorialCoordinate of a built-in object.

    Args:
        name (str): Object name, case-insensitive ("Polaris", "sun", ...).

    Raises:
        ValueError: If the name is not a built-in object.
    """
    key = " ".join(str(name).lower().split())
    if key in REFERENCE_OBJECTS:
        return REFERENCE_OBJECTS[key]

    raise ValueError(
        f"Unknown reference object: {name!r} "
        f"(known: {', '.join(sorted(REFERENCE_OBJECTS))})"
    )


def reference_position_vectors(location, start):
    """
    Full-day paths of the Fireworks nebula and the sample Sun.

    Returns:
        dict: {"fireworks": [...], "sun": [...]} lists of HorizontalCoordinate.
    """
    return {
        "fireworks": generate_full_day_series(FIREWORKS_NEBULA, location, start),
        "sun": generate_full_day_series(SUN_SAMPLE, location, start),
    }
