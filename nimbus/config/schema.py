"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from nimbus.ingest.met_no_client import DEFAULT_USER_AGENT, MET_NO_BASE_URL
from nimbus.ingest.open_weather_client import OPEN_WEATHER_BASE_URL
from nimbus.models.common import ProviderId
from nimbus.models.forecast import INCOMPLETE_HOURLY_THRESHOLD


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    timezone: str


class MetNoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = MET_NO_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)
    sun_moon_days: int = Field(default=15, ge=1, le=30)


class OpenWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPEN_WEATHER_BASE_URL
    api_key: str = ""  # falls back to OPENWEATHER_API_KEY
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    active: ProviderId = ProviderId.MET_NO
    met_no: MetNoConfig = MetNoConfig()
    open_weather: OpenWeatherConfig = OpenWeatherConfig()


class AssemblyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    incomplete_hourly_threshold: int = Field(default=INCOMPLETE_HOURLY_THRESHOLD, ge=0)


class NimbusConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    assembly: AssemblyConfig = AssemblyConfig()
    locations: list[LocationConfig] = []
