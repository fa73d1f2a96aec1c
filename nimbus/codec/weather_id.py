"""Packed weather id codec.

A weather id packs five independent facts into one decimal integer, read
right to left:

    digits 1-2  base condition (index into ``WeatherCondition``)
    digit 3     position inside the applicable intensity scale (0-3)
    digit 4     scale id: 0 none, 1 cloud cover, 2 precipitation
    digit 5     flags: bit0 shower variant, bit1 has thunder

e.g. ``22203`` is rain (03), position 2 of the precipitation scale, with
thunder: "heavy rain and thunder". Decoding is digit arithmetic only.
"""

from typing import NamedTuple

from nimbus.codec.conditions import (
    CONDITION_NAMES,
    PRECIPITATION_BASES,
    SCALES,
    SHOWER,
    THUNDER,
    ScaleId,
    WeatherCondition,
)
from nimbus.errors import InvalidArgument
from nimbus.models.forecast import PrecipitationForm


class WeatherIdParts(NamedTuple):
    base: int
    scale_position: int
    scale_id: int
    shower_thunder: int


def encode(
    base: int, scale_position: int = 0, scale_id: int = 0, shower_thunder: int = 0
) -> int:
    """Pack the four fields into a weather id.

    Raises:
        InvalidArgument: if any field is outside its documented range.
    """
    _check_range("base", base, 0, 99)
    _check_range("scale_position", scale_position, 0, 3)
    _check_range("scale_id", scale_id, 0, 2)
    _check_range("shower_thunder", shower_thunder, 0, 3)
    return shower_thunder * 10000 + scale_id * 1000 + scale_position * 100 + base


def decode(weather_id: int) -> WeatherIdParts:
    _check_id(weather_id)
    return WeatherIdParts(
        base=base_of(weather_id),
        scale_position=weather_id // 100 % 10,
        scale_id=weather_id // 1000 % 10,
        shower_thunder=weather_id // 10000 % 10,
    )


def base_of(weather_id: int) -> int:
    return weather_id % 100


def is_precipitation(weather_id: int) -> bool:
    return base_of(weather_id) in PRECIPITATION_BASES


def get_intensity(weather_id: int) -> float:
    """Precipitation intensity in [0, 1].

    Consumers threshold on these exact steps (>= 0.5 is a strong overlay).
    """
    if not is_precipitation(weather_id):
        return 0.0
    parts = decode(weather_id)
    if parts.scale_id == ScaleId.NONE:
        return 0.5
    if parts.scale_position == 0:
        return 0.1
    if parts.scale_position == 1:
        return 0.3
    if parts.scale_position == 2:
        return 0.8
    return 1.0


def get_form(weather_id: int) -> PrecipitationForm:
    if not is_precipitation(weather_id):
        raise InvalidArgument(f"{weather_id} is not a precipitation id")
    base = base_of(weather_id)
    if base == WeatherCondition.SNOW:
        return PrecipitationForm.SNOW
    if base == WeatherCondition.RAIN_AND_SNOW:
        return PrecipitationForm.RAIN_AND_SNOW
    return PrecipitationForm.RAIN


def has_thunder(weather_id: int) -> bool:
    return bool(decode(weather_id).shower_thunder & THUNDER)


def is_shower_variant(weather_id: int) -> bool:
    return bool(decode(weather_id).shower_thunder & SHOWER)


def describe(weather_id: int) -> str:
    """Render a weather id as English text, e.g. "heavy rain and thunder"."""
    parts = decode(weather_id)
    try:
        condition = WeatherCondition(parts.base)
    except ValueError:
        raise InvalidArgument(f"{weather_id} has no known base condition") from None

    ladder = SCALES.get(parts.scale_id, ())
    scale = ladder[parts.scale_position] if parts.scale_position < len(ladder) else ""
    text = f"{scale} {CONDITION_NAMES[condition]}".strip()
    if parts.shower_thunder & THUNDER:
        text += " and thunder"
    if parts.shower_thunder & SHOWER:
        text += " showers"
    return text


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidArgument(f"{name} must be in [{low}, {high}], got {value}")


def _check_id(weather_id: int) -> None:
    if weather_id < 0:
        raise InvalidArgument(f"weather id out of range: {weather_id}")
