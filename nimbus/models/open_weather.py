"""OpenWeather One Call payload models."""

from dataclasses import dataclass

from nimbus.errors import MissingConditionData


@dataclass(frozen=True)
class OpenWeatherHour:
    datetime: int
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    uvi: float
    clouds: float
    visibility: int
    wind_speed: float
    wind_degrees: float
    weather_code: int
    pop: float
    rain_1h: float = 0.0
    snow_1h: float = 0.0


@dataclass(frozen=True)
class OpenWeatherDay:
    datetime: int
    sunrise: int
    sunset: int
    moon_phase: float  # 0 and 1 are new moon, 0.5 full moon
    pressure: float
    humidity: float
    uvi: float
    clouds: float
    wind_speed: float
    wind_degrees: float
    min_temperature: float
    max_temperature: float
    weather_code: int
    pop: float = 0.0
    rain: float = 0.0
    snow: float = 0.0


@dataclass(frozen=True)
class OpenWeatherForecast:
    latitude: float
    longitude: float
    timezone: str
    hourly: list[OpenWeatherHour]
    daily: list[OpenWeatherDay]


def parse_one_call(raw: dict) -> OpenWeatherForecast:
    """Build an OpenWeatherForecast from a /onecall response body (metric units)."""
    return OpenWeatherForecast(
        latitude=float(raw["lat"]),
        longitude=float(raw["lon"]),
        timezone=raw.get("timezone", "UTC"),
        hourly=[_parse_hour(h) for h in raw.get("hourly", [])],
        daily=[_parse_day(d) for d in raw.get("daily", [])],
    )


def _parse_hour(h: dict) -> OpenWeatherHour:
    return OpenWeatherHour(
        datetime=int(h["dt"]),
        temperature=float(h["temp"]),
        feels_like=float(h["feels_like"]),
        pressure=float(h.get("pressure", 0.0)),
        humidity=float(h.get("humidity", 0.0)),
        uvi=float(h.get("uvi", 0.0)),
        clouds=float(h.get("clouds", 0.0)),
        visibility=int(h.get("visibility", 10000)),
        wind_speed=float(h.get("wind_speed", 0.0)),
        wind_degrees=float(h.get("wind_deg", 0.0)),
        weather_code=_first_weather_code(h),
        pop=float(h.get("pop", 0.0)),
        rain_1h=float(h.get("rain", {}).get("1h", 0.0)),
        snow_1h=float(h.get("snow", {}).get("1h", 0.0)),
    )


def _parse_day(d: dict) -> OpenWeatherDay:
    temp = d["temp"]
    return OpenWeatherDay(
        datetime=int(d["dt"]),
        sunrise=int(d["sunrise"]),
        sunset=int(d["sunset"]),
        moon_phase=float(d["moon_phase"]),
        pressure=float(d.get("pressure", 0.0)),
        humidity=float(d.get("humidity", 0.0)),
        uvi=float(d.get("uvi", 0.0)),
        clouds=float(d.get("clouds", 0.0)),
        wind_speed=float(d.get("wind_speed", 0.0)),
        wind_degrees=float(d.get("wind_deg", 0.0)),
        min_temperature=float(temp["min"]),
        max_temperature=float(temp["max"]),
        weather_code=_first_weather_code(d),
        pop=float(d.get("pop", 0.0)),
        rain=float(d.get("rain", 0.0)),
        snow=float(d.get("snow", 0.0)),
    )


def _first_weather_code(entry: dict) -> int:
    weather = entry.get("weather") or []
    if not weather:
        raise MissingConditionData(str(entry.get("dt")))
    return int(weather[0]["id"])
