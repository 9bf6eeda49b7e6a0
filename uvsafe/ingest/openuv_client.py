"""OpenUV API client with retry and rate limit handling."""

import logging
import time
from typing import Any

import httpx

logger = logging.getLogger(__name__)

OPENUV_BASE_URL = "https://api.openuv.io/api/v1"
RETRYABLE_STATUSES = (429, 503)


class OpenUvError(RuntimeError):
    """Non-2xx response from OpenUV."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenUvAuthError(OpenUvError):
    """OpenUV rejected the API key or the daily quota is spent (HTTP 403)."""


class OpenUvClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = OPENUV_BASE_URL,
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_base_delay: float = 1.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_uv(
        self, lat: float, lng: float, alt: float = 0, dt: str | None = None
    ) -> dict:
        """Fetch current UV conditions for a coordinate."""
        params: dict[str, Any] = {"lat": lat, "lng": lng, "alt": alt}
        if dt:
            params["dt"] = dt
        return self._get("/uv", params)

    def get_forecast(self, lat: float, lng: float) -> dict:
        """Fetch the hourly UV forecast for a coordinate."""
        return self._get("/forecast", {"lat": lat, "lng": lng})

    def _get(self, path: str, params: dict[str, Any]) -> dict:
        """GET with exponential backoff on 429/503 and transport errors."""
        url = f"{self.base_url}{path}"
        headers = {"x-access-token": self.api_key, "Content-Type": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OpenUV request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

            if resp.status_code in RETRYABLE_STATUSES and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "OpenUV %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    path, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            return _check_response(resp)

        raise AssertionError("unreachable")


def _check_response(resp: httpx.Response) -> dict:
    if resp.status_code == 403:
        logger.error("OpenUV API error: %d %s", resp.status_code, resp.text)
        raise OpenUvAuthError("API key invalid or rate limit exceeded", status_code=403)
    if not resp.is_success:
        logger.error("OpenUV API error: %d %s", resp.status_code, resp.text)
        raise OpenUvError(f"OpenUV API error: {resp.status_code}", status_code=resp.status_code)
    try:
        return resp.json()
    except ValueError as e:
        logger.error("OpenUV returned non-JSON body: %s", resp.text[:200])
        raise OpenUvError("OpenUV API returned a non-JSON response", status_code=502) from e
