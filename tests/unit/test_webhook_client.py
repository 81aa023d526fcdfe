import asyncio
import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from letter_enhancer.domain.models import ErrorKind
from letter_enhancer.enhancement.webhook_client import WebhookSubmissionClient, iso_timestamp

ENDPOINT = "https://hooks.example.com/webhook/letter"
FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)


def _enhanced_body(improved_text: str) -> dict[str, str]:
    return {"enhancedText": json.dumps({"improved_text": improved_text})}


def _make_client(handler) -> WebhookSubmissionClient:  # type: ignore[no-untyped-def]
    return WebhookSubmissionClient(
        transport=httpx.MockTransport(handler),
        clock=lambda: FIXED_NOW,
    )


class TestIsoTimestamp:
    def test_utc_with_milliseconds(self) -> None:
        assert iso_timestamp(FIXED_NOW) == "2025-03-14T09:26:53.589Z"

    def test_converts_to_utc(self) -> None:
        local = FIXED_NOW.astimezone(timezone(timedelta(hours=2)))
        assert iso_timestamp(local) == "2025-03-14T09:26:53.589Z"


class TestSubmitSuccess:
    @pytest.mark.asyncio
    async def test_returns_improved_text(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json=_enhanced_body("E")))

        outcome = await client.submit("T", ENDPOINT, 1000)

        assert outcome.ok
        assert outcome.enhanced_text == "E"

    @pytest.mark.asyncio
    async def test_posts_json_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=_enhanced_body("E"))

        client = _make_client(handler)
        await client.submit("My letter\n", ENDPOINT, 1000)

        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == ENDPOINT
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {
            "text": "My letter\n",
            "timestamp": "2025-03-14T09:26:53.589Z",
        }


class TestSubmitFailures:
    @pytest.mark.asyncio
    async def test_blank_text_is_caller_error(self) -> None:
        client = _make_client(lambda request: httpx.Response(200))
        with pytest.raises(ValueError, match="blank"):
            await client.submit("   ", ENDPOINT, 1000)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_non_2xx_is_service_error(self, status: int) -> None:
        client = _make_client(lambda request: httpx.Response(status, text="nope"))

        outcome = await client.submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.SERVICE_ERROR
        assert outcome.status_code == status

    @pytest.mark.asyncio
    async def test_missing_nested_field_is_malformed(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, json={"enhancedText": "{}"}))

        outcome = await client.submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.MALFORMED_RESPONSE

    @pytest.mark.asyncio
    async def test_deeply_nested_body_is_malformed(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, content=b"[" * 200000))

        outcome = await client.submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.MALFORMED_RESPONSE

    @pytest.mark.asyncio
    async def test_non_json_body_is_malformed(self) -> None:
        client = _make_client(lambda request: httpx.Response(200, text="<html></html>"))

        outcome = await client.submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.MALFORMED_RESPONSE

    @pytest.mark.asyncio
    async def test_connection_error_is_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        outcome = await _make_client(handler).submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.NETWORK_ERROR

    @pytest.mark.asyncio
    async def test_transport_timeout_is_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("read timed out", request=request)

        outcome = await _make_client(handler).submit("T", ENDPOINT, 1000)

        assert outcome.reason is ErrorKind.TIMEOUT

    @pytest.mark.asyncio
    async def test_slow_service_is_timeout(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200, json=_enhanced_body("late"))

        outcome = await _make_client(handler).submit("T", ENDPOINT, 50)

        assert outcome.reason is ErrorKind.TIMEOUT

    @pytest.mark.asyncio
    async def test_invalid_endpoint_is_network_error(self) -> None:
        client = WebhookSubmissionClient()

        outcome = await client.submit("T", "ftp://example.invalid/hook", 1000)

        assert outcome.reason is ErrorKind.NETWORK_ERROR
