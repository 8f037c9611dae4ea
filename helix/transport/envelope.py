"""Response envelope hydration.

``hydrate`` is a pure function of an ``httpx.Response``: it copies the status,
the Ratelimit-* headers and the pagination cursor verbatim, and for non-2xx
statuses the API-reported error. Absent or malformed values map to zero/None,
never to an exception.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import httpx

from helix.models.responses import Envelope

RATELIMIT_LIMIT = "ratelimit-limit"
RATELIMIT_REMAINING = "ratelimit-remaining"
RATELIMIT_RESET = "ratelimit-reset"


def _header_int(headers: dict[str, str], name: str) -> int:
    try:
        return int(headers.get(name, 0))
    except (TypeError, ValueError):
        return 0


def _json_object(response: httpx.Response) -> dict[str, Any]:
    """Best-effort parse of the body as a JSON object."""
    if not response.content.strip():
        return {}
    try:
        body = json.loads(response.content)
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _reset_time(seconds: int) -> datetime | None:
    if not seconds:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _cursor(body: dict[str, Any]) -> str | None:
    pagination = body.get("pagination")
    if not isinstance(pagination, dict):
        return None
    cursor = pagination.get("cursor")
    return cursor if isinstance(cursor, str) else None


def hydrate(response: httpx.Response) -> Envelope:
    """Build the Envelope for a completed HTTP exchange."""
    headers = {key.lower(): value for key, value in response.headers.items()}
    body = _json_object(response)

    error = error_status = error_message = None
    if response.status_code >= 400:
        error = body.get("error") if isinstance(body.get("error"), str) else None
        status = body.get("status")
        error_status = status if isinstance(status, int) else None
        message = body.get("message") if isinstance(body.get("message"), str) else None
        error_message = message or error or response.reason_phrase or None

    return Envelope(
        status_code=response.status_code,
        headers=headers,
        error=error,
        error_status=error_status,
        error_message=error_message,
        ratelimit_limit=_header_int(headers, RATELIMIT_LIMIT),
        ratelimit_remaining=_header_int(headers, RATELIMIT_REMAINING),
        ratelimit_reset=_reset_time(_header_int(headers, RATELIMIT_RESET)),
        cursor=_cursor(body),
    )
