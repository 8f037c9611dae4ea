"""Error hierarchy for the Helix client.

Three failure kinds are raised to the direct caller:

- ValidationError: a required identifier is missing, raised before any
  network call.
- TransportError: the HTTP exchange itself could not complete.
- DecodeError: a successful response body did not match the expected shape.

API-level failures (403, 429, ...) are NOT raised. They are reported through
the populated ``Envelope`` status code and error message.
"""

from __future__ import annotations


class HelixError(Exception):
    """Base error for all Helix client errors."""

    message: str = "Helix client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ValidationError(HelixError):
    """Request parameters failed local validation."""

    message = "Invalid request parameters"


class TransportError(HelixError):
    """The request could not be sent or the response could not be received."""

    message = "HTTP exchange failed"


class DecodeError(HelixError):
    """The response body could not be decoded into the expected shape."""

    message = "Response body does not match the expected shape"
