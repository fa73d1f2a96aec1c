"""MET Norway symbol code translation table.

Symbol codes with a daylight variant are listed by MET with ``_day``,
``_night`` and ``_polartwilight`` suffixes; all three translate to the same
weather id. The "lightssleet..." and "lightssnow..." spellings are MET's own.
"""

from types import MappingProxyType

from nimbus.codec.conditions import SHOWER, THUNDER, ScaleId, WeatherCondition
from nimbus.codec.weather_id import encode
from nimbus.errors import UnknownConditionCode

PROVIDER = "met_no"

_VARIANTS = ("day", "night", "polartwilight")

_C = WeatherCondition
_CLOUDS = ScaleId.CLOUDS
_PRECIP = ScaleId.PRECIPITATION

# Precipitation scale positions
_LIGHT = 1
_HEAVY = 2

_CODES_WITH_VARIANTS: dict[str, int] = {
    "clearsky": encode(_C.CLEAR),
    "fair": encode(_C.CLEAR),
    "partlycloudy": encode(_C.CLOUDS, 1, _CLOUDS),
    "lightrainshowers": encode(_C.RAIN, _LIGHT, _PRECIP, SHOWER),
    "rainshowers": encode(_C.RAIN, 0, 0, SHOWER),
    "heavyrainshowers": encode(_C.RAIN, _HEAVY, _PRECIP, SHOWER),
    "lightrainshowersandthunder": encode(_C.RAIN, _LIGHT, _PRECIP, SHOWER | THUNDER),
    "rainshowersandthunder": encode(_C.RAIN, 0, 0, SHOWER | THUNDER),
    "heavyrainshowersandthunder": encode(_C.RAIN, _HEAVY, _PRECIP, SHOWER | THUNDER),
    "lightsleetshowers": encode(_C.SLEET, _LIGHT, _PRECIP, SHOWER),
    "sleetshowers": encode(_C.SLEET, 0, 0, SHOWER),
    "heavysleetshowers": encode(_C.SLEET, _HEAVY, _PRECIP, SHOWER),
    "lightssleetshowersandthunder": encode(_C.SLEET, _LIGHT, _PRECIP, SHOWER | THUNDER),
    "sleetshowersandthunder": encode(_C.SLEET, 0, 0, SHOWER | THUNDER),
    "heavysleetshowersandthunder": encode(_C.SLEET, _HEAVY, _PRECIP, SHOWER | THUNDER),
    "lightsnowshowers": encode(_C.SNOW, _LIGHT, _PRECIP, SHOWER),
    "snowshowers": encode(_C.SNOW, 0, 0, SHOWER),
    "heavysnowshowers": encode(_C.SNOW, _HEAVY, _PRECIP, SHOWER),
    "lightssnowshowersandthunder": encode(_C.SNOW, _LIGHT, _PRECIP, SHOWER | THUNDER),
    "snowshowersandthunder": encode(_C.SNOW, 0, 0, SHOWER | THUNDER),
    "heavysnowshowersandthunder": encode(_C.SNOW, _HEAVY, _PRECIP, SHOWER | THUNDER),
}

_CODES_WITHOUT_VARIANTS: dict[str, int] = {
    "cloudy": encode(_C.CLOUDS, 3, _CLOUDS),
    "fog": encode(_C.FOG),
    "lightrain": encode(_C.RAIN, _LIGHT, _PRECIP),
    "rain": encode(_C.RAIN),
    "heavyrain": encode(_C.RAIN, _HEAVY, _PRECIP),
    "lightrainandthunder": encode(_C.RAIN, _LIGHT, _PRECIP, THUNDER),
    "rainandthunder": encode(_C.RAIN, 0, 0, THUNDER),
    "heavyrainandthunder": encode(_C.RAIN, _HEAVY, _PRECIP, THUNDER),
    "lightsleet": encode(_C.SLEET, _LIGHT, _PRECIP),
    "sleet": encode(_C.SLEET),
    "heavysleet": encode(_C.SLEET, _HEAVY, _PRECIP),
    "lightsleetandthunder": encode(_C.SLEET, _LIGHT, _PRECIP, THUNDER),
    "sleetandthunder": encode(_C.SLEET, 0, 0, THUNDER),
    "heavysleetandthunder": encode(_C.SLEET, _HEAVY, _PRECIP, THUNDER),
    "lightsnow": encode(_C.SNOW, _LIGHT, _PRECIP),
    "snow": encode(_C.SNOW),
    "heavysnow": encode(_C.SNOW, _HEAVY, _PRECIP),
    "lightsnowandthunder": encode(_C.SNOW, _LIGHT, _PRECIP, THUNDER),
    "snowandthunder": encode(_C.SNOW, 0, 0, THUNDER),
    "heavysnowandthunder": encode(_C.SNOW, _HEAVY, _PRECIP, THUNDER),
}

SYMBOL_CODES = MappingProxyType({
    **{
        f"{code}_{variant}": weather_id
        for code, weather_id in _CODES_WITH_VARIANTS.items()
        for variant in _VARIANTS
    },
    **_CODES_WITHOUT_VARIANTS,
})


def translate(code: str) -> int:
    """Translate a MET Norway symbol code into a weather id.

    Raises:
        UnknownConditionCode: the code is not one MET documents.
    """
    try:
        return SYMBOL_CODES[code]
    except (KeyError, TypeError):
        raise UnknownConditionCode(PROVIDER, code) from None
