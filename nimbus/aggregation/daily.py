"""Collapse sub-daily provider records into one DayForecast per local day.

Records carry an instant reading plus optional "next 1/6/12 hours" windows.
A 6 or 12 hour window only counts toward a day while it still ends before
local midnight (``hour + 6 < 24``, ``hour + 12 < 24``).

The condition code uses a longer-lasting value policy: a valid 12 hour
outlook wins, then a valid 6 hour one, otherwise the max of the current
value and the instant / 1 hour codes. That max is a deterministic tie-break
over packed ids, not a severity ranking.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from functools import reduce
from itertools import groupby
from zoneinfo import ZoneInfo

from nimbus.codec import phase_transition
from nimbus.codec.moon_phase import moon_phase, phase_from_fraction
from nimbus.errors import InvalidArgument, MissingAstronomicalData, MissingConditionData
from nimbus.models.forecast import DayForecast, MoonPhase
from nimbus.models.records import (
    AstronomicalDay,
    ConditionCode,
    ForecastWindow,
    TimedRecord,
)

logger = logging.getLogger(__name__)

HOURS_IN_DAY = 24

Translate = Callable[[ConditionCode], int]


@dataclass(frozen=True)
class DayAccumulator:
    count: int = 0
    pressure: float | None = None
    humidity: float | None = None
    clouds: float | None = None
    wind_speed: float | None = None
    uvi: float | None = None
    wind_degrees_sum: float = 0.0
    min_temperature: float | None = None
    max_temperature: float | None = None
    precipitation: float | None = None
    weather_id: int | None = None


def window_is_valid(window: ForecastWindow | None, hour: int) -> bool:
    """True if the window still ends inside the record's calendar day."""
    if window is None:
        return False
    return window.hours == 1 or hour + window.hours < HOURS_IN_DAY


def accumulate(
    acc: DayAccumulator, record: TimedRecord, hour: int, translate: Translate
) -> DayAccumulator:
    """Fold one record, observed at local ``hour``, into the accumulator."""
    instant = record.instant
    windows = [w for w in record.windows if window_is_valid(w, hour)]

    return replace(
        acc,
        count=acc.count + 1,
        pressure=_max(acc.pressure, instant.pressure),
        humidity=_max(acc.humidity, instant.humidity),
        clouds=_max(acc.clouds, instant.clouds),
        wind_speed=_max(acc.wind_speed, instant.wind_speed),
        uvi=_max(acc.uvi, instant.uvi, *(w.uvi for w in windows)),
        wind_degrees_sum=acc.wind_degrees_sum + instant.wind_degrees,
        min_temperature=_min(
            acc.min_temperature, instant.temperature, *(w.temperature_min for w in windows)
        ),
        max_temperature=_max(
            acc.max_temperature, instant.temperature, *(w.temperature_max for w in windows)
        ),
        precipitation=_max(acc.precipitation, *(w.precipitation for w in windows)),
        weather_id=longer_lasting_weather_id(acc.weather_id, record, hour, translate),
    )


def longer_lasting_weather_id(
    current: int | None, record: TimedRecord, hour: int, translate: Translate
) -> int | None:
    # Translate every code the record carries so unknown codes fail the
    # fetch even when their window is not used.
    instant_id = _translate(record.instant.code, translate)
    ids = {w.hours: _translate(w.code, translate) for w in record.windows}

    if window_is_valid(record.next_12h, hour) and ids.get(12) is not None:
        return ids[12]
    if window_is_valid(record.next_6h, hour) and ids.get(6) is not None:
        return ids[6]

    candidate = _max(current, instant_id, ids.get(1))
    if candidate is not None:
        return candidate
    # Nothing inside the day describes this instant yet; an outlook that
    # runs past midnight still describes the start of it.
    return _first_present(ids.get(6), ids.get(12))


def finish(
    acc: DayAccumulator,
    day: date,
    midnight: int,
    astronomy: AstronomicalDay | None,
    previous_phase: int = phase_transition.NO_PREVIOUS_PHASE,
) -> tuple[DayForecast, MoonPhase]:
    """Build the DayForecast for ``day`` and return it with its moon phase."""
    if acc.count == 0:
        raise InvalidArgument(f"No records to aggregate for {day.isoformat()}")
    if acc.weather_id is None:
        raise MissingConditionData(day.isoformat())
    if astronomy is None or astronomy.sunrise is None or astronomy.sunset is None:
        raise MissingAstronomicalData(day.isoformat())

    if astronomy.moon_phase_fraction is not None:
        phase = phase_from_fraction(astronomy.moon_phase_fraction)
    else:
        phase = moon_phase(day)

    forecast = DayForecast(
        datetime=midnight,
        pressure=acc.pressure,
        humidity=acc.humidity,
        uvi=acc.uvi,
        sunrise=astronomy.sunrise,
        sunset=astronomy.sunset,
        clouds=acc.clouds,
        wind_speed=acc.wind_speed,
        wind_degrees=acc.wind_degrees_sum / acc.count,
        min_temperature=acc.min_temperature,
        max_temperature=acc.max_temperature,
        precipitation=acc.precipitation if acc.precipitation is not None else 0.0,
        weather_id=acc.weather_id,
        moon_phase=phase_transition.encode(phase, previous_phase),
    )
    return forecast, phase


def aggregate_days(
    records: Iterable[TimedRecord],
    astronomy: Mapping[date, AstronomicalDay],
    translate: Translate,
    timezone: str,
) -> list[DayForecast]:
    """Partition records by local calendar day and aggregate each day.

    Raises:
        UnknownConditionCode: a record carries a code the provider table lacks.
        MissingAstronomicalData: a day has no sunrise/sunset record.
    """
    tz = ZoneInfo(timezone)
    ordered = sorted(records, key=lambda r: r.time)
    days: list[DayForecast] = []
    previous_phase = phase_transition.NO_PREVIOUS_PHASE

    for day, day_records in groupby(ordered, key=lambda r: local_date(r.time, tz)):
        acc = reduce(
            lambda a, r: accumulate(a, r, r.time.astimezone(tz).hour, translate),
            day_records,
            DayAccumulator(),
        )
        forecast, phase = finish(
            acc, day, local_midnight(day, tz), astronomy.get(day), previous_phase
        )
        logger.debug(
            "Aggregated %s from %d records: weather_id=%d moon_phase=%d",
            day.isoformat(), acc.count, forecast.weather_id, forecast.moon_phase,
        )
        days.append(forecast)
        previous_phase = phase

    return days


def local_date(instant: datetime, tz: ZoneInfo) -> date:
    return instant.astimezone(tz).date()


def local_midnight(day: date, tz: ZoneInfo) -> int:
    return int(datetime.combine(day, time(0), tzinfo=tz).timestamp())


def _translate(code: ConditionCode | None, translate: Translate) -> int | None:
    return translate(code) if code is not None else None


def _max(*values: float | None) -> float | None:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _min(*values: float | None) -> float | None:
    present = [v for v in values if v is not None]
    return min(present) if present else None


def _first_present(*values: int | None) -> int | None:
    return next((v for v in values if v is not None), None)
