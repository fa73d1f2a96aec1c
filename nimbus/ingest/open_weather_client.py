"""OpenWeather One Call API client."""

import logging
import os
import time

import httpx

logger = logging.getLogger(__name__)

OPEN_WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherClientError(Exception):
    """Raised when the client is misconfigured or OpenWeather rejects a call."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OPEN_WEATHER_BASE_URL,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.api_key = api_key or os.environ.get("OPENWEATHER_API_KEY", "")
        if not self.api_key:
            raise OpenWeatherClientError("OPENWEATHER_API_KEY not set")
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_one_call(self, latitude: float, longitude: float) -> dict:
        """Fetch hourly and daily forecasts in metric units."""
        return self._get(
            "/onecall",
            {
                "lat": latitude,
                "lon": longitude,
                "exclude": "minutely,current,alerts",
                "units": "metric",
                "appid": self.api_key,
            },
        )

    def _get(self, endpoint: str, params: dict) -> dict:
        """GET with retries on 503/429 and exponential backoff."""
        url = f"{self.base_url}{endpoint}"

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, timeout=self.timeout)
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OpenWeather %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        endpoint, resp.status_code, delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                if resp.status_code == 401:
                    raise OpenWeatherClientError("OpenWeather rejected the API key", 401)
                resp.raise_for_status()
                return resp.json()
            except httpx.RequestError as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OpenWeather request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error
