import asyncio
from collections.abc import Callable
from datetime import datetime, timezone

import httpx

from letter_enhancer.domain.models import ErrorKind, SubmissionOutcome
from letter_enhancer.enhancement.client_base import BaseSubmissionClient
from letter_enhancer.enhancement.exceptions import MalformedResponseError
from letter_enhancer.enhancement.response_decoder import decode_envelope, decode_improved_text
from letter_enhancer.logging.logger import Log


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WebhookSubmissionClient(BaseSubmissionClient):
    """Posts text to an enhancement webhook over HTTP using httpx."""

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._transport = transport
        self._clock = clock

    async def submit(self, text: str, endpoint: str, timeout_ms: int) -> SubmissionOutcome:
        if not text.strip():
            raise ValueError("Cannot submit blank text")

        payload = {"text": text, "timestamp": iso_timestamp(self._clock())}
        timeout_seconds = timeout_ms / 1000
        Log.info(f"Submitting {len(text)} chars to enhancement endpoint")

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=timeout_seconds,
            ) as client:
                response = await asyncio.wait_for(
                    client.post(
                        endpoint,
                        json=payload,
                        headers={"Content-Type": "application/json"},
                    ),
                    timeout=timeout_seconds,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            Log.error(f"Enhancement request timed out after {timeout_ms} ms")
            return SubmissionOutcome.failure(ErrorKind.TIMEOUT, str(exc))
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            Log.error(f"Enhancement request network error: {exc}")
            return SubmissionOutcome.failure(ErrorKind.NETWORK_ERROR, str(exc))

        if not response.is_success:
            Log.error(f"Enhancement service returned HTTP {response.status_code}")
            return SubmissionOutcome.failure(
                ErrorKind.SERVICE_ERROR,
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            embedded = decode_envelope(response.content)
            improved_text = decode_improved_text(embedded)
        except MalformedResponseError as exc:
            Log.error(f"Malformed enhancement response: {exc}")
            return SubmissionOutcome.failure(ErrorKind.MALFORMED_RESPONSE, str(exc))

        Log.info(f"Received {len(improved_text)} chars of enhanced text")
        return SubmissionOutcome.success(improved_text)
