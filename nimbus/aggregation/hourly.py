"""Hourly pass for providers that report instants plus forecast windows."""

import math

from nimbus.aggregation.daily import Translate
from nimbus.errors import MissingConditionData
from nimbus.models.forecast import HourForecast
from nimbus.models.records import TimedRecord

MAX_VISIBILITY_M = 10000


def apparent_temperature(temp_c: float, humidity: float, wind_speed_ms: float) -> float:
    """Australian Bureau of Meteorology apparent temperature.

    AT = Ta + 0.33*e - 0.70*ws - 4.0, e = water vapour pressure (hPa).
    """
    vp = (humidity / 100.0) * 6.105 * math.exp((17.27 * temp_c) / (237.7 + temp_c))
    return temp_c + (0.33 * vp) - (0.70 * wind_speed_ms) - 4.0


def visibility_from_fog(fog_area_percent: float) -> int:
    """Rough visibility in meters: full visibility scaled down by fog cover."""
    fog = min(max(fog_area_percent, 0.0), 100.0)
    return int(MAX_VISIBILITY_M * (1.0 - fog / 100.0))


def hour_from_record(record: TimedRecord, translate: Translate) -> HourForecast:
    """Build an HourForecast, preferring the shortest window for each value.

    Raises:
        MissingConditionData: no window of the record carries a symbol code.
    """
    instant = record.instant
    windows = record.windows

    code = next((w.code for w in windows if w.code is not None), None)
    if code is None:
        raise MissingConditionData(record.time.isoformat())
    pop = next((w.pop for w in windows if w.pop is not None), 0.0)
    amount = next((w.precipitation for w in windows if w.precipitation is not None), 0.0)

    return HourForecast(
        datetime=int(record.time.timestamp()),
        temperature=instant.temperature,
        feels_like=apparent_temperature(
            instant.temperature, instant.humidity, instant.wind_speed
        ),
        pressure=instant.pressure,
        humidity=instant.humidity,
        uvi=instant.uvi,
        clouds=instant.clouds,
        visibility=visibility_from_fog(instant.fog),
        wind_speed=instant.wind_speed,
        wind_degrees=instant.wind_degrees,
        weather_id=translate(code),
        pop=pop / 100.0,  # MET reports a percentage
        precipitation=amount,
    )
