"""
config_loader.py
Configuration loading utilities.

This module provides a lightweight TOML configuration loader for the
observer site, the default target and the observation window. Missing
sections are filled in with defaults (Dunstable MA, the Fireworks field,
18:00 to 06:00) so a partial file, or no file at all, still gives a
usable setup.
"""

import logging
from datetime import datetime, time
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tomli

from starpath.catalog import DUNSTABLE_MA, get_reference_object
from starpath.models import EquatorialCoordinate, GeodeticLocation

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.toml"


def default_config():
    """Return a fresh configuration dictionary with every default applied."""
    return {
        "location": {
            "latitude": DUNSTABLE_MA.latitude,
            "longitude": DUNSTABLE_MA.longitude,
            "timezone": "America/New_York",
        },
        "target": {"name": "Fireworks Nebula"},
        "window": {"start_hour": 18, "end_hour": 6},
    }


def load_config(path=DEFAULT_CONFIG_PATH):
    """
    Load the application configuration from a TOML file.

    The file is parsed into a plain dictionary. Sections that are missing
    are taken from default_config(); keys missing inside a section are
    filled from the matching default section. A [target] section given
    only as ra_deg/dec_deg does not inherit the default name.

    Args:
        path (str or Path): Path to the TOML configuration file.

    Returns:
        dict: Configuration dictionary with defaults applied.

    Raises:
        FileNotFoundError: If path does not exist.
        tomli.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        cfg = tomli.load(f)
    logger.info("Loaded configuration from %s", Path(path))

    defaults = default_config()
    for section, values in defaults.items():
        if section not in cfg:
            logger.debug("Config section [%s] missing, using defaults", section)
            cfg[section] = values
        elif section != "target":
            cfg[section] = {**values, **cfg[section]}
    return cfg


def location_from_config(cfg):
    """
    Observer location from the [location] section.

    Raises:
        ValueError: If latitude/longitude are not numbers or out of range.
    """
    loc = cfg["location"]
    try:
        lat = float(loc["latitude"])
        lon = float(loc["longitude"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid [location] section: {loc!r}") from e

    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"latitude out of range [-90, 90]: {lat}")
    if not -180.0 <= lon <= 180.0:
        raise ValueError(f"longitude out of range [-180, 180]: {lon}")
    return GeodeticLocation(latitude=lat, longitude=lon)


def target_from_config(cfg):
    """
    Target coordinates from the [target] section.

    Explicit ra_deg/dec_deg take precedence over a reference object name.

    Raises:
        ValueError: If neither usable coordinates nor a known name are given.
    """
    target = cfg.get("target", {})
    if "ra_deg" in target and "dec_deg" in target:
        try:
            return EquatorialCoordinate(ra=float(target["ra_deg"]), dec=float(target["dec_deg"]))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid [target] coordinates: {target!r}") from e

    if "name" in target:
        return get_reference_object(target["name"])

    raise ValueError("[target] needs either ra_deg and dec_deg or a name")


def window_from_config(cfg):
    """
    (start_hour, end_hour) from the [window] section.

    Raises:
        ValueError: If an hour is not an integer in 0..23.
    """
    window = cfg["window"]
    hours = []
    for key in ("start_hour", "end_hour"):
        value = window.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 23:
            raise ValueError(f"[window] {key} must be an integer hour 0-23, got {value!r}")
        hours.append(value)
    return tuple(hours)


def timezone_from_config(cfg):
    """
    ZoneInfo for the configured observer timezone.

    Falls back to UTC (with a warning) when the name is unknown.
    """
    name = cfg["location"].get("timezone", "UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r in config, using UTC", name)
        return ZoneInfo("UTC")


def observation_start(cfg, day):
    """
    Midnight of the given date in the configured timezone.

    Args:
        cfg (dict): Loaded configuration.
        day (datetime.date): Observation date.

    Returns:
        datetime: Timezone-aware start instant for the series generators.
    """
    return datetime.combine(day, time(0, 0), tzinfo=timezone_from_config(cfg))
