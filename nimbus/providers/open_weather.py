"""OpenWeather condition id translation table.

https://openweathermap.org/weather-conditions
"""

from types import MappingProxyType

from nimbus.codec.conditions import SHOWER, THUNDER, ScaleId, WeatherCondition
from nimbus.codec.weather_id import encode
from nimbus.errors import UnknownConditionCode

PROVIDER = "open_weather"

_C = WeatherCondition
_CLOUDS = ScaleId.CLOUDS
_PRECIP = ScaleId.PRECIPITATION

CONDITION_IDS = MappingProxyType({
    # Clear and clouds
    800: encode(_C.CLEAR),
    801: encode(_C.CLOUDS, 0, _CLOUDS),
    802: encode(_C.CLOUDS, 1, _CLOUDS),
    803: encode(_C.CLOUDS, 2, _CLOUDS),
    804: encode(_C.CLOUDS, 3, _CLOUDS),
    # Atmosphere
    701: encode(_C.MIST),
    711: encode(_C.SMOKE),
    721: encode(_C.HAZE),
    731: encode(_C.SAND_DUST_WHIRLS),
    741: encode(_C.FOG),
    751: encode(_C.SAND),
    761: encode(_C.DUST),
    762: encode(_C.VOLCANIC_ASH),
    771: encode(_C.SQUALLS),
    781: encode(_C.TORNADO),
    # Drizzle
    300: encode(_C.DRIZZLE, 1, _PRECIP),
    310: encode(_C.DRIZZLE, 1, _PRECIP),
    301: encode(_C.DRIZZLE),
    311: encode(_C.DRIZZLE),
    302: encode(_C.DRIZZLE, 2, _PRECIP),
    312: encode(_C.DRIZZLE, 2, _PRECIP),
    313: encode(_C.DRIZZLE, 0, 0, SHOWER),
    321: encode(_C.DRIZZLE, 0, 0, SHOWER),
    314: encode(_C.DRIZZLE, 2, _PRECIP, SHOWER),
    230: encode(_C.DRIZZLE, 1, _PRECIP, THUNDER),
    231: encode(_C.DRIZZLE, 0, 0, THUNDER),
    232: encode(_C.DRIZZLE, 2, _PRECIP, THUNDER),
    # Rain
    500: encode(_C.RAIN, 1, _PRECIP),
    501: encode(_C.RAIN),
    502: encode(_C.RAIN, 2, _PRECIP),
    503: encode(_C.RAIN, 3, _PRECIP),
    504: encode(_C.RAIN, 3, _PRECIP),  # extreme; top of the ladder
    520: encode(_C.RAIN, 1, _PRECIP, SHOWER),
    521: encode(_C.RAIN, 0, 0, SHOWER),
    522: encode(_C.RAIN, 2, _PRECIP, SHOWER),
    531: encode(_C.RAIN, 0, _PRECIP, SHOWER),
    200: encode(_C.RAIN, 1, _PRECIP, THUNDER),
    201: encode(_C.RAIN, 0, 0, THUNDER),
    202: encode(_C.RAIN, 2, _PRECIP, THUNDER),
    511: encode(_C.FREEZING_RAIN),
    # Sleet
    611: encode(_C.SLEET),
    612: encode(_C.SLEET, 1, _PRECIP, SHOWER),
    613: encode(_C.SLEET, 0, 0, SHOWER),
    # Snow
    600: encode(_C.SNOW, 1, _PRECIP),
    601: encode(_C.SNOW),
    602: encode(_C.SNOW, 2, _PRECIP),
    620: encode(_C.SNOW, 1, _PRECIP, SHOWER),
    621: encode(_C.SNOW, 0, 0, SHOWER),
    622: encode(_C.SNOW, 2, _PRECIP, SHOWER),
    615: encode(_C.RAIN_AND_SNOW, 1, _PRECIP),
    616: encode(_C.RAIN_AND_SNOW),
    # Thunderstorm without precipitation
    210: encode(_C.THUNDERSTORM, 1, _PRECIP),
    211: encode(_C.THUNDERSTORM),
    212: encode(_C.THUNDERSTORM, 2, _PRECIP),
    221: encode(_C.THUNDERSTORM, 0, _PRECIP),
})


def translate(code: int) -> int:
    """Translate an OpenWeather condition id into a weather id.

    Raises:
        UnknownConditionCode: the id is not in OpenWeather's condition list.
    """
    try:
        return CONDITION_IDS[code]
    except (KeyError, TypeError):
        raise UnknownConditionCode(PROVIDER, code) from None
