"""Encode a day's moon phase when it differs before and after sunrise.

A day stores one integer. If the phase changed since the previous day the
value becomes ``previous * 10 + today``: before sunrise the sky still shows
the previous phase. Indices are 0-7, so a composite (>= 10) never collides
with a plain index. Leaving NEW_MOON (index 0) encodes as the plain new
index, so that transition is not recoverable before sunrise.
"""

from nimbus.errors import InvalidArgument
from nimbus.models.forecast import MoonPhase

NO_PREVIOUS_PHASE = -1


def encode(today: int, previous: int = NO_PREVIOUS_PHASE) -> int:
    _check_phase("today", today)
    if previous != NO_PREVIOUS_PHASE:
        _check_phase("previous", previous)
    if previous == NO_PREVIOUS_PHASE or previous == today:
        return int(today)
    return previous * 10 + today


def decode(encoded: int, is_before_sunrise: bool) -> MoonPhase:
    if 0 <= encoded < len(MoonPhase):
        return MoonPhase(encoded)
    if not 10 <= encoded <= 77 or encoded % 10 >= len(MoonPhase):
        raise InvalidArgument(f"not a moon phase composite: {encoded}")
    if is_before_sunrise:
        return MoonPhase(encoded // 10)
    return MoonPhase(encoded % 10)


def _check_phase(name: str, value: int) -> None:
    if not 0 <= value < len(MoonPhase):
        raise InvalidArgument(f"{name} phase index must be in [0, 7], got {value}")
