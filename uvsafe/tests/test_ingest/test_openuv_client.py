"""Tests for the OpenUV API client with mocked httpx."""

from unittest.mock import patch

import httpx
import pytest
import respx

from uvsafe.ingest.openuv_client import OpenUvAuthError, OpenUvClient, OpenUvError

BASE = "https://test-openuv.example.com/api/v1"
SYDNEY = {"lat": "-33.8688", "lng": "151.2093"}


@pytest.fixture
def openuv() -> OpenUvClient:
    return OpenUvClient(
        api_key="test-key",
        base_url=BASE,
        max_retries=1,
        retry_base_delay=0.01,  # Fast retries in tests
    )


class TestGetUv:
    @respx.mock
    def test_success(self, openuv: OpenUvClient, uv_payload: dict):
        respx.get(f"{BASE}/uv", params=SYDNEY).mock(
            return_value=httpx.Response(200, json=uv_payload)
        )
        result = openuv.get_uv(-33.8688, 151.2093)
        assert result["result"]["uv"] == 8.2

    @respx.mock
    def test_access_token_header(self, openuv: OpenUvClient, uv_payload: dict):
        route = respx.get(f"{BASE}/uv").mock(
            return_value=httpx.Response(200, json=uv_payload)
        )
        openuv.get_uv(-33.8688, 151.2093)
        request = route.calls[0].request
        assert request.headers["x-access-token"] == "test-key"

    @respx.mock
    def test_optional_params(self, openuv: OpenUvClient, uv_payload: dict):
        route = respx.get(f"{BASE}/uv").mock(
            return_value=httpx.Response(200, json=uv_payload)
        )
        openuv.get_uv(-33.8688, 151.2093, alt=100, dt="2026-02-11T02:00:00Z")
        params = route.calls[0].request.url.params
        assert params["alt"] == "100"
        assert params["dt"] == "2026-02-11T02:00:00Z"

    @respx.mock
    def test_dt_omitted_when_empty(self, openuv: OpenUvClient, uv_payload: dict):
        route = respx.get(f"{BASE}/uv").mock(
            return_value=httpx.Response(200, json=uv_payload)
        )
        openuv.get_uv(-33.8688, 151.2093)
        assert "dt" not in route.calls[0].request.url.params

    @respx.mock
    def test_forbidden(self, openuv: OpenUvClient):
        respx.get(f"{BASE}/uv").mock(return_value=httpx.Response(403, text="quota"))
        with pytest.raises(OpenUvAuthError) as exc_info:
            openuv.get_uv(-33.8688, 151.2093)
        assert exc_info.value.status_code == 403
        assert "rate limit" in str(exc_info.value)

    @respx.mock
    def test_server_error_not_retried(self, openuv: OpenUvClient):
        route = respx.get(f"{BASE}/uv").mock(return_value=httpx.Response(500))
        with pytest.raises(OpenUvError) as exc_info:
            openuv.get_uv(-33.8688, 151.2093)
        assert exc_info.value.status_code == 500
        assert route.call_count == 1


    @respx.mock
    def test_non_json_body(self, openuv: OpenUvClient):
        respx.get(f"{BASE}/uv").mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )
        with pytest.raises(OpenUvError) as exc_info:
            openuv.get_uv(-33.8688, 151.2093)
        assert exc_info.value.status_code == 502
        assert "non-JSON" in str(exc_info.value)


class TestRetries:
    @respx.mock
    def test_retry_on_503(self, openuv: OpenUvClient, forecast_payload: dict):
        route = respx.get(f"{BASE}/forecast").mock(
            side_effect=[
                httpx.Response(503),
                httpx.Response(200, json=forecast_payload),
            ]
        )
        with patch("uvsafe.ingest.openuv_client.time.sleep"):
            result = openuv.get_forecast(-33.8688, 151.2093)
        assert len(result["result"]) == 14
        assert route.call_count == 2

    @respx.mock
    def test_retry_on_connect_error(self, openuv: OpenUvClient, forecast_payload: dict):
        route = respx.get(f"{BASE}/forecast").mock(
            side_effect=[
                httpx.ConnectError("boom"),
                httpx.Response(200, json=forecast_payload),
            ]
        )
        with patch("uvsafe.ingest.openuv_client.time.sleep"):
            openuv.get_forecast(-33.8688, 151.2093)
        assert route.call_count == 2

    @respx.mock
    def test_exhausted_retries(self, openuv: OpenUvClient):
        respx.get(f"{BASE}/forecast").mock(return_value=httpx.Response(429))
        with patch("uvsafe.ingest.openuv_client.time.sleep"), pytest.raises(OpenUvError) as exc_info:
            openuv.get_forecast(-33.8688, 151.2093)
        assert exc_info.value.status_code == 429

    @respx.mock
    def test_exhausted_connect_errors(self, openuv: OpenUvClient):
        respx.get(f"{BASE}/forecast").mock(side_effect=httpx.ConnectError("down"))
        with patch("uvsafe.ingest.openuv_client.time.sleep"), pytest.raises(httpx.ConnectError):
            openuv.get_forecast(-33.8688, 151.2093)
