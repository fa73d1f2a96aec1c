"""Forecast assembler: provider payload -> canonical Forecast.

Any translation or astronomy failure fails the whole assembly. A forecast
where some hours render a storm and others a default clear sky is worse
than no forecast.
"""

import dataclasses
import logging
from collections.abc import Mapping
from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from nimbus.aggregation.daily import aggregate_days, local_date, local_midnight
from nimbus.aggregation.hourly import hour_from_record
from nimbus.codec import phase_transition
from nimbus.codec.moon_phase import phase_from_fraction
from nimbus.models.common import utc_now_epoch
from nimbus.models.forecast import DayForecast, Forecast, HourForecast, Location
from nimbus.models.open_weather import OpenWeatherDay, OpenWeatherForecast, OpenWeatherHour
from nimbus.models.records import AstronomicalDay, TimedRecord
from nimbus.providers import met_no, open_weather

logger = logging.getLogger(__name__)


def assemble_met_no(
    records: list[TimedRecord],
    astronomy: Mapping[date, AstronomicalDay],
    location: Location,
    now: int | None = None,
) -> Forecast:
    """Assemble a Forecast from parsed MET Norway records.

    Only records with a "next 1 hour" window become hourly entries; every
    record contributes to its local day.
    """
    hourly = tuple(
        hour_from_record(r, met_no.translate) for r in records if r.next_1h is not None
    )
    daily = tuple(aggregate_days(records, astronomy, met_no.translate, location.timezone))
    return _stamp(location, hourly, daily, now)


def assemble_open_weather(
    payload: OpenWeatherForecast, location: Location, now: int | None = None
) -> Forecast:
    """Assemble a Forecast from a parsed One Call payload.

    One Call already reports one entry per day, so days are translated
    directly using the supplied moon phase fraction. Day timestamps are
    moved to local midnight.
    """
    tz = ZoneInfo(location.timezone)
    hourly = tuple(_open_weather_hour(h) for h in payload.hourly)

    daily: list[DayForecast] = []
    previous_phase = phase_transition.NO_PREVIOUS_PHASE
    for day in payload.daily:
        phase = phase_from_fraction(day.moon_phase)
        midnight = local_midnight(local_date(datetime.fromtimestamp(day.datetime, UTC), tz), tz)
        daily.append(
            _open_weather_day(day, midnight, phase_transition.encode(phase, previous_phase))
        )
        previous_phase = phase

    return _stamp(location, hourly, tuple(daily), now)


def _open_weather_hour(hour: OpenWeatherHour) -> HourForecast:
    return HourForecast(
        datetime=hour.datetime,
        temperature=hour.temperature,
        feels_like=hour.feels_like,
        pressure=hour.pressure,
        humidity=hour.humidity,
        uvi=hour.uvi,
        clouds=hour.clouds,
        visibility=hour.visibility,
        wind_speed=hour.wind_speed,
        wind_degrees=hour.wind_degrees,
        weather_id=open_weather.translate(hour.weather_code),
        pop=hour.pop,
        precipitation=max(hour.rain_1h, hour.snow_1h),
    )


def _open_weather_day(day: OpenWeatherDay, midnight: int, moon_phase: int) -> DayForecast:
    return DayForecast(
        datetime=midnight,
        pressure=day.pressure,
        humidity=day.humidity,
        uvi=day.uvi,
        sunrise=day.sunrise,
        sunset=day.sunset,
        clouds=day.clouds,
        wind_speed=day.wind_speed,
        wind_degrees=day.wind_degrees,
        min_temperature=day.min_temperature,
        max_temperature=day.max_temperature,
        precipitation=max(day.rain, day.snow),
        weather_id=open_weather.translate(day.weather_code),
        moon_phase=moon_phase,
    )


def _stamp(
    location: Location,
    hourly: tuple[HourForecast, ...],
    daily: tuple[DayForecast, ...],
    now: int | None,
) -> Forecast:
    stamped = dataclasses.replace(
        location, last_updated=now if now is not None else utc_now_epoch()
    )
    logger.info(
        "Assembled forecast for %s: %d hours, %d days",
        location.name, len(hourly), len(daily),
    )
    return Forecast(location=stamped, hourly=hourly, daily=daily)
