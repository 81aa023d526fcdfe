"""Two-step decoding of the enhancement webhook response.

The service wraps its result twice: the HTTP body is a JSON object whose
``enhancedText`` field is itself a JSON-encoded string holding
``{"improved_text": ...}``.
"""

import json
from typing import Any

from letter_enhancer.enhancement.exceptions import MalformedResponseError

ENVELOPE_FIELD = "enhancedText"
PAYLOAD_FIELD = "improved_text"


def decode_envelope(body: str | bytes) -> str:
    """Return the embedded JSON string from the response body.

    Raises:
        MalformedResponseError: if the body is not an object with a string
            ``enhancedText`` field.
    """
    data = _loads(body, "response body")
    embedded = data.get(ENVELOPE_FIELD)
    if not isinstance(embedded, str):
        raise MalformedResponseError(f"'{ENVELOPE_FIELD}' must be a string")
    return embedded


def decode_improved_text(embedded: str) -> str:
    """Return ``improved_text`` from the embedded JSON string.

    Raises:
        MalformedResponseError: if the string is not an object with a string
            ``improved_text`` field.
    """
    data = _loads(embedded, f"'{ENVELOPE_FIELD}'")
    improved = data.get(PAYLOAD_FIELD)
    if not isinstance(improved, str):
        raise MalformedResponseError(f"'{PAYLOAD_FIELD}' must be a string")
    return improved


def decode_response(body: str | bytes) -> str:
    return decode_improved_text(decode_envelope(body))


def _loads(raw: str | bytes, what: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise MalformedResponseError(f"Invalid JSON in {what}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedResponseError(f"{what} must be a JSON object")
    return parsed
