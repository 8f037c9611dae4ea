"""Generic Helix dispatcher on top of an authenticated httpx.AsyncClient.

One call to ``dispatch`` performs exactly one HTTP exchange and decodes the
body into the caller-supplied pydantic shape. The client keeps no mutable
state between calls, so it is safe to share across tasks as long as the
underlying ``httpx.AsyncClient`` is.

Outcome matrix:
- exchange failed (connect, timeout, protocol)  -> TransportError
- 2xx, body does not match the shape            -> DecodeError (details["envelope"])
- non-2xx                                       -> envelope carries the API error
- 2xx, empty body or no shape                   -> data is None
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from helix.config.settings import HelixSettings
from helix.errors import DecodeError, TransportError
from helix.logging_config import configure_logging
from helix.models.params import RequestParams
from helix.models.responses import Envelope, HelixResponse
from helix.transport.encoding import encode
from helix.transport.envelope import hydrate

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=BaseModel)
ParamsT = TypeVar("ParamsT", bound=RequestParams)
ResponseT = TypeVar("ResponseT", bound=HelixResponse)


class HelixClient:
    """Typed request/response core shared by every endpoint.

    Parameters
    ----------
    http:
        An ``httpx.AsyncClient`` already configured with the Helix base URL
        and authentication headers.
    owns_transport:
        Close ``http`` when this client is closed (default False).
    """

    def __init__(self, http: httpx.AsyncClient, owns_transport: bool = False) -> None:
        self._http = http
        self._owns_transport = owns_transport

    @classmethod
    def from_settings(
        cls,
        settings: HelixSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HelixClient:
        """Build a client owning an authenticated ``httpx.AsyncClient``.

        Also installs JSON logging on the ``helix`` logger at
        ``settings.log_level``.
        """
        configure_logging(settings.log_level)

        headers = {
            "Client-Id": settings.client_id,
            "Authorization": f"Bearer {settings.access_token}",
        }
        if settings.user_agent:
            headers["User-Agent"] = settings.user_agent

        http = httpx.AsyncClient(
            base_url=settings.base_url,
            headers=headers,
            timeout=settings.timeout_seconds,
            transport=transport,
        )
        return cls(http, owns_transport=True)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._http.aclose()

    async def __aenter__(self) -> HelixClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(
        self,
        method: str,
        path: str,
        shape: type[ShapeT] | None,
        params: RequestParams | None = None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> HelixResponse[ShapeT]:
        """Send one request and decode the response into ``shape``.

        ``timeout`` is handed to httpx unchanged.

        Raises
        ------
        TransportError
            If the HTTP exchange could not complete.
        DecodeError
            If a 2xx body cannot be decoded into ``shape``.
        """
        encoded = encode(params)
        started = time.monotonic()

        try:
            response = await self._http.request(
                method,
                path,
                params=encoded.query or None,
                json=encoded.body,
                timeout=timeout,
            )
        except httpx.RequestError as exc:
            logger.error(
                "Helix request %s %s failed: %s",
                method,
                path,
                exc,
                extra={"method": method, "path": path, "error_reason": type(exc).__name__},
            )
            raise TransportError(
                f"{method} {path} failed: {exc}", method=method, path=path
            ) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 2)
        envelope = hydrate(response)
        fields = {
            "method": method,
            "path": path,
            "status_code": envelope.status_code,
            "duration_ms": duration_ms,
            "ratelimit_remaining": envelope.ratelimit_remaining,
        }

        if not envelope.ok:
            logger.warning(
                "Helix %s %s returned %d: %s",
                method,
                path,
                envelope.status_code,
                envelope.error_message,
                extra={**fields, "error_reason": envelope.error_message},
            )
            return HelixResponse(envelope=envelope)

        data = self._decode(response, envelope, shape, method, path)
        logger.debug("Helix %s %s -> %d", method, path, envelope.status_code, extra=fields)
        return HelixResponse(envelope=envelope, data=data)

    @staticmethod
    def _decode(
        response: httpx.Response,
        envelope: Envelope,
        shape: type[ShapeT] | None,
        method: str,
        path: str,
    ) -> ShapeT | None:
        if shape is None or not response.content.strip():
            return None
        try:
            return shape.model_validate_json(response.content)
        except PydanticValidationError as exc:
            logger.error(
                "Helix %s %s body does not match %s",
                method,
                path,
                shape.__name__,
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "error_reason": f"{exc.error_count()} validation error(s)",
                },
            )
            raise DecodeError(
                f"{method} {path}: response body does not match {shape.__name__}",
                method=method,
                path=path,
                status_code=response.status_code,
                envelope=envelope,
            ) from exc

    async def get(
        self,
        path: str,
        shape: type[ShapeT] | None,
        params: RequestParams | None = None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> HelixResponse[ShapeT]:
        return await self.dispatch("GET", path, shape, params, timeout=timeout)

    async def post_json(
        self,
        path: str,
        shape: type[ShapeT] | None,
        params: RequestParams | None = None,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> HelixResponse[ShapeT]:
        return await self.dispatch("POST", path, shape, params, timeout=timeout)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    @staticmethod
    async def paginate(
        fetch: Callable[[ParamsT], Awaitable[ResponseT]],
        params: ParamsT,
        cursor_field: str = "after",
    ) -> AsyncIterator[ResponseT]:
        """Yield successive pages, feeding each cursor back as ``cursor_field``.

        Stops when the cursor is absent or repeats, or when a page reports an
        API error (that page is still yielded so the caller can inspect it).
        """
        seen: set[str] = set()
        while True:
            page = await fetch(params)
            yield page

            envelope = page.envelope
            if not envelope.ok:
                logger.warning(
                    "Pagination stopped on status %d: %s",
                    envelope.status_code,
                    envelope.error_message,
                )
                return

            cursor = envelope.cursor
            if not cursor or cursor in seen:
                return
            seen.add(cursor)
            params = params.model_copy(update={cursor_field: cursor})
