"""Sub-daily provider records consumed by the daily aggregator."""

from dataclasses import dataclass
from datetime import date, datetime

ConditionCode = str | int


@dataclass(frozen=True)
class InstantValues:
    temperature: float = 0.0
    pressure: float = 0.0
    humidity: float = 0.0
    clouds: float = 0.0
    wind_speed: float = 0.0
    wind_degrees: float = 0.0
    uvi: float = 0.0
    fog: float = 0.0  # fog area fraction, %
    code: ConditionCode | None = None


@dataclass(frozen=True)
class ForecastWindow:
    """Summary valid for the next N hours after the record's instant."""

    hours: int  # 1, 6 or 12
    code: ConditionCode | None = None
    pop: float | None = None
    precipitation: float | None = None
    temperature_min: float | None = None
    temperature_max: float | None = None
    uvi: float | None = None


@dataclass(frozen=True)
class TimedRecord:
    time: datetime  # aware, UTC
    instant: InstantValues
    next_1h: ForecastWindow | None = None
    next_6h: ForecastWindow | None = None
    next_12h: ForecastWindow | None = None

    @property
    def windows(self) -> tuple[ForecastWindow, ...]:
        """Shortest window first."""
        return tuple(w for w in (self.next_1h, self.next_6h, self.next_12h) if w is not None)


@dataclass(frozen=True)
class AstronomicalDay:
    day: date
    sunrise: int | None  # Unix seconds; None in polar day/night
    sunset: int | None
    moon_phase_fraction: float | None = None  # [0, 1]; computed when missing
