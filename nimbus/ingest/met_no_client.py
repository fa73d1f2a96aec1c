"""MET Norway API client with retry and rate limit handling."""

import logging
import time

import httpx

logger = logging.getLogger(__name__)

MET_NO_BASE_URL = "https://api.met.no/weatherapi"
# MET Norway's terms require an identifying User-Agent
DEFAULT_USER_AGENT = "nimbus-forecast/0.1.0"


class MetNoClient:
    def __init__(
        self,
        base_url: str = MET_NO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch the complete locationforecast time series."""
        return self._get(
            "/locationforecast/2.0/complete",
            {"lat": _coordinate(latitude), "lon": _coordinate(longitude)},
        )

    def get_sun_moon(
        self,
        latitude: float,
        longitude: float,
        date: str,
        offset: str,
        days: int = 15,
    ) -> dict:
        """Fetch sunrise, sunset and moon phase for ``days`` days from ``date``.

        ``offset`` is the location's UTC offset, e.g. "+01:00".
        """
        return self._get(
            "/sunrise/2.0/.json",
            {
                "lat": _coordinate(latitude),
                "lon": _coordinate(longitude),
                "date": date,
                "offset": offset,
                "days": days,
            },
        )

    def _get(self, endpoint: str, params: dict) -> dict:
        """GET with retries on 503/429 and exponential backoff."""
        url = f"{self.base_url}{endpoint}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "MET Norway %s returned %d, retrying in %.1fs (attempt %d/%d)",
                        url, resp.status_code, delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp.json()
            except httpx.RequestError as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "MET Norway request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error


def _coordinate(value: float) -> str:
    # MET asks for at most four decimals to keep its cache effective
    return f"{value:.4f}"
