"""Value types passed between the angle, transform and series layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EquatorialCoordinate:
    """Fixed position on the celestial sphere."""

    ra: float  # Right ascension (degrees, 0-360)
    dec: float  # Declination (degrees, -90..90)


@dataclass(frozen=True)
class GeodeticLocation:
    """Observer position on Earth. Positive = North / East."""

    latitude: float  # degrees, -90..90
    longitude: float  # degrees, -180..180


@dataclass(frozen=True)
class HorizontalCoordinate:
    """Apparent position in the local sky."""

    azimuth: float  # degrees clockwise from North (0=N, 90=E, 180=S, 270=W)
    elevation: float  # degrees above the horizon (90 = zenith)


@dataclass(frozen=True)
class PositionSample:
    """One point of a sky path, labelled with the hour it was sampled at."""

    horizontal: HorizontalCoordinate
    hour: int  # hour of day (0-23) used to build the sample time

    @property
    def azimuth(self) -> float:
        return self.horizontal.azimuth

    @property
    def elevation(self) -> float:
        return self.horizontal.elevation
