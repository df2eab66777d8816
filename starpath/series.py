"""
series.py
Sky path sampling over an observation window.

Every generator builds its sample times from the calendar fields of the start
instant (year, month, day, timezone) plus an explicit hour. The start instant
is never modified and no "current time" is ever read, so the same arguments
always give the same series.

Hours are wall-clock fields: for a zone with daylight saving the samples
are on the local hour marks, not a fixed 3600 s apart.
"""

import logging
from datetime import datetime, time, timedelta

import pandas as pd

from starpath.altaz import position_at
from starpath.julian import as_instant
from starpath.models import PositionSample

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
NIGHT_START_HOUR = 18   # 6 PM on the start date
NIGHT_END_HOUR = 5      # last sample at 5 AM on the following date


def _at_hour(start, hour, minute=0, second=0, microsecond=0):
    """
    New datetime on start's calendar date with the given wall-clock hour.

    Hours of 24 and above roll over into the following days.
    """
    carry, hour = divmod(hour, HOURS_PER_DAY)
    day = start.date() + timedelta(days=carry)
    return datetime.combine(day, time(hour, minute, second, microsecond), tzinfo=start.tzinfo)


# -----------------------------------------------------------------------------
# SAMPLE TIMES
# -----------------------------------------------------------------------------

def full_day_instants(start):
    """
    24 hourly instants beginning at start.

    The hour field is start.hour + k for k = 0..23 (rolling into the next
    date past 23h); minutes, seconds and microseconds are kept from start.
    """
    start = as_instant(start)
    return [
        _at_hour(start, start.hour + offset, start.minute, start.second, start.microsecond)
        for offset in range(HOURS_PER_DAY)
    ]


def nighttime_instants(start):
    """
    Instants for the 6 PM - 6 AM window: 18..23h on the start date,
    then 0..5h on the next date. Always 12 values on the hour.
    """
    return custom_range_instants(start, NIGHT_START_HOUR, NIGHT_END_HOUR)


def custom_range_instants(start, start_hour, end_hour):
    """
    Hourly instants for an inclusive [start_hour, end_hour] window.

    If start_hour > end_hour the window crosses midnight: start_hour..23 on
    the start date followed by 0..end_hour on the next date. Minutes and
    seconds are zeroed. Hours are not validated.

    Args:
        start (datetime, str or astropy.time.Time): Any time on the start date.
        start_hour (int): First hour of the window.
        end_hour (int): Last hour of the window (inclusive).

    Returns:
        list[datetime]: Sample times in chronological order.
    """
    start = as_instant(start)
    if start_hour <= end_hour:
        hours = list(range(start_hour, end_hour + 1))
    else:
        hours = list(range(start_hour, HOURS_PER_DAY)) + [
            HOURS_PER_DAY + h for h in range(0, end_hour + 1)
        ]
    return [_at_hour(start, h) for h in hours]


# -----------------------------------------------------------------------------
# POSITION SERIES
# -----------------------------------------------------------------------------

def positions_for_instants(coordinate, location, instants):
    """Horizontal coordinates of one object at each of the given instants."""
    return [position_at(coordinate, location, t) for t in instants]


def samples_for_instants(coordinate, location, instants):
    """Like positions_for_instants, each result labelled with its hour of day."""
    return [
        PositionSample(horizontal=position_at(coordinate, location, t), hour=t.hour)
        for t in instants
    ]


def generate_full_day_series(coordinate, location, start):
    """
    Sky path over 24 hours starting at start.

    Returns:
        list[HorizontalCoordinate]: 24 positions, one per hour offset.
    """
    positions = positions_for_instants(coordinate, location, full_day_instants(start))
    logger.debug("Full-day series for %s: %d positions", coordinate, len(positions))
    return positions


def generate_nighttime_series(coordinate, location, start):
    """
    Sky path from 6 PM on the start date to 5 AM on the next date.

    Returns:
        list[PositionSample]: 12 samples labelled 18..23, 0..5.
    """
    samples = samples_for_instants(coordinate, location, nighttime_instants(start))
    logger.debug("Nighttime series for %s: %d samples", coordinate, len(samples))
    return samples


def generate_custom_range_series(coordinate, location, start, start_hour, end_hour):
    """
    Sky path over an hour window, possibly crossing midnight.

    Args:
        coordinate (EquatorialCoordinate): Object to follow.
        location (GeodeticLocation): Observer.
        start (datetime, str or astropy.time.Time): Any time on the start date.
        start_hour (int): First hour (0-23).
        end_hour (int): Last hour (0-23), inclusive.

    Returns:
        list[PositionSample]: One sample per hour in the window.
    """
    samples = samples_for_instants(
        coordinate, location, custom_range_instants(start, start_hour, end_hour)
    )
    logger.debug(
        "Custom series for %s, %02d:00-%02d:00: %d samples",
        coordinate, start_hour, end_hour, len(samples),
    )
    return samples


# -----------------------------------------------------------------------------
# EXPORT
# -----------------------------------------------------------------------------

def series_to_dataframe(samples):
    """
    Tabulate a position series for plotting.

    Args:
        samples (list): PositionSample or HorizontalCoordinate values.

    Returns:
        pandas.DataFrame: Columns hour, az_deg, alt_deg for PositionSample
        input; az_deg, alt_deg for bare HorizontalCoordinate input.
    """
    labelled = bool(samples) and isinstance(samples[0], PositionSample)
    columns = ["hour", "az_deg", "alt_deg"] if labelled else ["az_deg", "alt_deg"]

    rows = []
    for s in samples:
        row = {"az_deg": s.azimuth, "alt_deg": s.elevation}
        if labelled:
            row["hour"] = s.hour
        rows.append(row)

    return pd.DataFrame(rows, columns=columns)
