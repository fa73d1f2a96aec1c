"""Forecast fetcher: active provider -> parsed payload -> assembled Forecast."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from nimbus.config.schema import LocationConfig, NimbusConfig
from nimbus.ingest.forecast_assembler import assemble_met_no, assemble_open_weather
from nimbus.ingest.met_no_client import MetNoClient
from nimbus.ingest.open_weather_client import OpenWeatherClient
from nimbus.models.common import ProviderId, utc_now
from nimbus.models.forecast import Forecast, Location
from nimbus.models.met_no import parse_sun_moon, parse_timeseries
from nimbus.models.open_weather import parse_one_call

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(
        self,
        config: NimbusConfig,
        met_no_client: MetNoClient | None = None,
        open_weather_client: OpenWeatherClient | None = None,
    ):
        self.config = config
        self._met_no = met_no_client
        self._open_weather = open_weather_client
        self._cache: dict[tuple[float, float], Forecast] = {}

    @property
    def provider(self) -> ProviderId:
        return self.config.provider.active

    def fetch(self, location: Location, now: datetime | None = None) -> Forecast:
        """Fetch and assemble a forecast for a location.

        Uses an in-memory cache keyed by coordinates until clear_cache().
        Provider and translation errors propagate; the caller owns retries.
        """
        cache_key = (location.latitude, location.longitude)
        if cache_key in self._cache:
            return self._cache[cache_key]

        try:
            if self.provider == ProviderId.OPEN_WEATHER:
                forecast = self._fetch_open_weather(location, now)
            else:
                forecast = self._fetch_met_no(location, now)
        except Exception:
            logger.exception(
                "Failed to fetch %s forecast for %s", self.provider, location.name
            )
            raise

        if forecast.is_incomplete(self.config.assembly.incomplete_hourly_threshold):
            logger.warning(
                "Forecast for %s has only %d hourly entries",
                location.name, len(forecast.hourly),
            )
        self._cache[cache_key] = forecast
        return forecast

    def clear_cache(self) -> None:
        self._cache.clear()

    def _fetch_met_no(self, location: Location, now: datetime | None) -> Forecast:
        client = self._met_no_client()
        tz = ZoneInfo(location.timezone)

        records = parse_timeseries(
            client.get_forecast(location.latitude, location.longitude)
        )
        # The series can start before now; astronomy must cover its first local day
        start = records[0].time if records else (now or utc_now())
        local_start = start.astimezone(tz)
        raw_sun_moon = client.get_sun_moon(
            location.latitude,
            location.longitude,
            date=local_start.date().isoformat(),
            offset=local_start.isoformat()[-6:],
            days=self.config.provider.met_no.sun_moon_days,
        )
        return assemble_met_no(
            records,
            parse_sun_moon(raw_sun_moon),
            location,
            now=int(now.timestamp()) if now is not None else None,
        )

    def _fetch_open_weather(self, location: Location, now: datetime | None) -> Forecast:
        client = self._open_weather_client()
        raw = client.get_one_call(location.latitude, location.longitude)
        return assemble_open_weather(
            parse_one_call(raw),
            location,
            now=int(now.timestamp()) if now is not None else None,
        )

    def _met_no_client(self) -> MetNoClient:
        if self._met_no is None:
            cfg = self.config.provider.met_no
            self._met_no = MetNoClient(
                base_url=cfg.base_url,
                user_agent=cfg.user_agent,
                timeout=cfg.timeout,
                max_retries=cfg.max_retries,
                retry_base_delay=cfg.retry_base_delay,
            )
        return self._met_no

    def _open_weather_client(self) -> OpenWeatherClient:
        if self._open_weather is None:
            cfg = self.config.provider.open_weather
            self._open_weather = OpenWeatherClient(
                api_key=cfg.api_key or None,
                base_url=cfg.base_url,
                timeout=cfg.timeout,
                max_retries=cfg.max_retries,
                retry_base_delay=cfg.retry_base_delay,
            )
        return self._open_weather


def location_from_config(loc: LocationConfig) -> Location:
    return Location(
        name=loc.name,
        latitude=loc.latitude,
        longitude=loc.longitude,
        timezone=loc.timezone,
    )
