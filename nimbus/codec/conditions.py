"""Condition name table and intensity ladders shared by every provider."""

from enum import IntEnum
from types import MappingProxyType


class WeatherCondition(IntEnum):
    """Base condition stored in the two lowest digits of a weather id."""

    CLEAR = 0
    CLOUDS = 1
    DRIZZLE = 2
    RAIN = 3
    FREEZING_RAIN = 4
    SLEET = 5
    SNOW = 6
    RAIN_AND_SNOW = 7
    FOG = 8
    MIST = 9
    SMOKE = 10
    HAZE = 11
    SAND_DUST_WHIRLS = 12
    SAND = 13
    DUST = 14
    VOLCANIC_ASH = 15
    SQUALLS = 16
    TORNADO = 17
    THUNDERSTORM = 19


class ScaleId(IntEnum):
    NONE = 0
    CLOUDS = 1
    PRECIPITATION = 2


# Bit flags for the fifth digit
SHOWER = 1
THUNDER = 2

PRECIPITATION_BASES = range(WeatherCondition.DRIZZLE, WeatherCondition.RAIN_AND_SNOW + 1)

CONDITION_NAMES = MappingProxyType({
    WeatherCondition.CLEAR: "clear sky",
    WeatherCondition.CLOUDS: "clouds",
    WeatherCondition.DRIZZLE: "drizzle",
    WeatherCondition.RAIN: "rain",
    WeatherCondition.FREEZING_RAIN: "freezing rain",
    WeatherCondition.SLEET: "sleet",
    WeatherCondition.SNOW: "snow",
    WeatherCondition.RAIN_AND_SNOW: "rain and snow",
    WeatherCondition.FOG: "fog",
    WeatherCondition.MIST: "mist",
    WeatherCondition.SMOKE: "smoke",
    WeatherCondition.HAZE: "haze",
    WeatherCondition.SAND_DUST_WHIRLS: "sand and dust whirls",
    WeatherCondition.SAND: "sand",
    WeatherCondition.DUST: "dust",
    WeatherCondition.VOLCANIC_ASH: "volcanic ash",
    WeatherCondition.SQUALLS: "squalls",
    WeatherCondition.TORNADO: "tornado",
    WeatherCondition.THUNDERSTORM: "thunderstorm",
})

# Ladders indexed by scale position (0 = lightest)
SCALES = MappingProxyType({
    ScaleId.CLOUDS: ("few", "scattered", "broken", "overcast"),
    ScaleId.PRECIPITATION: ("very light", "light", "heavy", "very heavy"),
})
