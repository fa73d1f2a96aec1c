"""Canonical forecast models shared by every provider."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from nimbus.errors import InvalidArgument

INCOMPLETE_HOURLY_THRESHOLD = 35


class MoonPhase(IntEnum):
    """Moon phases; the value is the phase index stored in DayForecast."""

    NEW_MOON = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL_MOON = 4
    WANING_GIBBOUS = 5
    THIRD_QUARTER = 6
    WANING_CRESCENT = 7


class PrecipitationForm(StrEnum):
    RAIN = "rain"
    SNOW = "snow"
    RAIN_AND_SNOW = "rain_and_snow"


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    timezone: str  # IANA identifier, e.g. "Europe/Oslo"
    last_updated: int = 0  # Unix seconds

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidArgument(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidArgument(f"longitude out of range: {self.longitude}")

    @property
    def is_southern_hemisphere(self) -> bool:
        return self.latitude < 0


@dataclass(frozen=True)
class HourForecast:
    datetime: int  # Unix seconds, UTC instant
    temperature: float  # Celsius
    feels_like: float
    pressure: float  # hPa
    humidity: float  # %
    uvi: float
    clouds: float  # %
    visibility: int  # meters
    wind_speed: float  # m/s
    wind_degrees: float  # meteorological
    weather_id: int
    pop: float  # [0, 1]
    precipitation: float  # mm


@dataclass(frozen=True)
class DayForecast:
    datetime: int  # local midnight, Unix seconds
    pressure: float
    humidity: float
    uvi: float
    sunrise: int
    sunset: int
    clouds: float
    wind_speed: float
    wind_degrees: float  # mean of the day's readings
    min_temperature: float
    max_temperature: float
    precipitation: float
    weather_id: int
    moon_phase: int  # phase index or before/after sunrise composite


@dataclass(frozen=True)
class Forecast:
    location: Location
    hourly: tuple[HourForecast, ...]
    daily: tuple[DayForecast, ...]

    def is_incomplete(self, threshold: int = INCOMPLETE_HOURLY_THRESHOLD) -> bool:
        """A forecast with fewer hourly entries than the threshold needs a refresh."""
        return len(self.hourly) < threshold
