"""MET Norway locationforecast/sunrise payload parsing."""

import logging
from datetime import UTC, date, datetime

from nimbus.models.records import (
    AstronomicalDay,
    ForecastWindow,
    InstantValues,
    TimedRecord,
)

logger = logging.getLogger(__name__)

_WINDOW_KEYS = {1: "next_1_hours", 6: "next_6_hours", 12: "next_12_hours"}


def parse_timeseries(raw: dict) -> list[TimedRecord]:
    """Extract time-ordered records from a locationforecast/2.0/complete body."""
    series = raw.get("properties", {}).get("timeseries", [])
    records = [_parse_record(entry) for entry in series]
    records.sort(key=lambda r: r.time)
    logger.debug("Parsed %d MET Norway time series entries", len(records))
    return records


def parse_sun_moon(raw: dict) -> dict[date, AstronomicalDay]:
    """Index a sunrise/2.0 body by local calendar date.

    MET reports the moon phase in degrees of a full cycle scaled to 0-100.
    """
    days: dict[date, AstronomicalDay] = {}
    for entry in raw.get("location", {}).get("time", []):
        day = date.fromisoformat(entry["date"])
        phase = entry.get("moonposition", {}).get("phase")
        days[day] = AstronomicalDay(
            day=day,
            sunrise=_event_epoch(entry.get("sunrise")),
            sunset=_event_epoch(entry.get("sunset")),
            moon_phase_fraction=float(phase) / 100.0 if phase is not None else None,
        )
    return days


def _parse_record(entry: dict) -> TimedRecord:
    data = entry.get("data", {})
    details = data.get("instant", {}).get("details", {})
    instant = InstantValues(
        temperature=float(details.get("air_temperature", 0.0)),
        pressure=float(details.get("air_pressure_at_sea_level", 0.0)),
        humidity=float(details.get("relative_humidity", 0.0)),
        clouds=float(details.get("cloud_area_fraction", 0.0)),
        wind_speed=float(details.get("wind_speed", 0.0)),
        wind_degrees=float(details.get("wind_from_direction", 0.0)),
        uvi=float(details.get("ultraviolet_index_clear_sky", 0.0)),
        fog=float(details.get("fog_area_fraction", 0.0)),
    )
    windows = {
        hours: _parse_window(hours, data[key])
        for hours, key in _WINDOW_KEYS.items()
        if data.get(key) is not None
    }
    return TimedRecord(
        time=_parse_time(entry["time"]),
        instant=instant,
        next_1h=windows.get(1),
        next_6h=windows.get(6),
        next_12h=windows.get(12),
    )


def _parse_window(hours: int, raw: dict) -> ForecastWindow:
    details = raw.get("details", {})
    return ForecastWindow(
        hours=hours,
        code=raw.get("summary", {}).get("symbol_code"),
        pop=_optional_float(details, "probability_of_precipitation"),
        precipitation=_optional_float(details, "precipitation_amount"),
        temperature_min=_optional_float(details, "air_temperature_min"),
        temperature_max=_optional_float(details, "air_temperature_max"),
        uvi=_optional_float(details, "ultraviolet_index_clear_sky"),
    )


def _optional_float(details: dict, key: str) -> float | None:
    value = details.get(key)
    return float(value) if value is not None else None


def _event_epoch(event: dict | None) -> int | None:
    if not event or "time" not in event:
        return None
    return int(_parse_time(event["time"]).timestamp())


def _parse_time(iso_str: str) -> datetime:
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
