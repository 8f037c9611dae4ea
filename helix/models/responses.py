"""Response envelope and generic result models.

Every call result composes the same two parts:
{ envelope: Envelope, data: T | None }

The envelope carries transport metadata (status, rate limits, API error,
pagination cursor) and is always populated once an HTTP exchange completes,
even when ``data`` is None.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

PayloadT = TypeVar("PayloadT")


class Pagination(BaseModel):
    """Pagination block of list responses."""

    model_config = ConfigDict(frozen=True)

    cursor: str | None = None


class Envelope(BaseModel):
    """Common response metadata attached to every call result."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)

    # API-reported error (only for non-2xx statuses)
    error: str | None = None
    error_status: int | None = None
    error_message: str | None = None

    # Rate limiting (Ratelimit-* headers)
    ratelimit_limit: int = 0
    ratelimit_remaining: int = 0
    ratelimit_reset: datetime | None = None

    # None means no further pages
    cursor: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HelixResponse(BaseModel, Generic[PayloadT]):
    """Typed call result: envelope plus decoded payload."""

    model_config = ConfigDict(frozen=True)

    envelope: Envelope
    data: PayloadT | None = None
