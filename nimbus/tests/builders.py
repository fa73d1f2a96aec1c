"""Record builders shared by aggregation and assembly tests."""

from datetime import UTC, date, datetime, timedelta

from nimbus.models.records import (
    AstronomicalDay,
    ForecastWindow,
    InstantValues,
    TimedRecord,
)

DAY = date(2026, 3, 10)


def at(hour: int, day: date = DAY) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=UTC) + timedelta(hours=hour)


def window(hours: int, code: str | None = None, **details) -> ForecastWindow:
    return ForecastWindow(hours=hours, code=code, **details)


def record(
    hour: int,
    day: date = DAY,
    *,
    next_1h: ForecastWindow | None = None,
    next_6h: ForecastWindow | None = None,
    next_12h: ForecastWindow | None = None,
    **instant,
) -> TimedRecord:
    values = {
        "temperature": 10.0,
        "pressure": 1013.0,
        "humidity": 70.0,
        "clouds": 50.0,
        "wind_speed": 3.0,
        "wind_degrees": 180.0,
        "uvi": 1.0,
    }
    values.update(instant)
    return TimedRecord(
        time=at(hour, day),
        instant=InstantValues(**values),
        next_1h=next_1h,
        next_6h=next_6h,
        next_12h=next_12h,
    )


def astro(day: date = DAY, moon_phase_fraction: float | None = 0.25) -> AstronomicalDay:
    return AstronomicalDay(
        day=day,
        sunrise=int(at(6, day).timestamp()),
        sunset=int(at(18, day).timestamp()),
        moon_phase_fraction=moon_phase_fraction,
    )
