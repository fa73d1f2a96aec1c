"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class ProviderId(StrEnum):
    MET_NO = "met_no"
    OPEN_WEATHER = "open_weather"


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_epoch() -> int:
    return int(utc_now().timestamp())
