"""Shared test fixtures and hypothesis strategies for the Helix test suite."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import httpx
import pytest
from hypothesis import strategies as st

from helix.config.settings import HelixSettings
from helix.transport.client import HelixClient

BASE_URL = "https://api.twitch.tv/helix"

Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> HelixSettings:
    """Test settings with safe defaults."""
    return HelixSettings(
        client_id="test-client-id",
        access_token="test-access-token",
        base_url=BASE_URL,
        timeout_seconds=5.0,
    )


@pytest.fixture
def helix_logger() -> Iterator[logging.Logger]:
    """The ``helix`` logger, restored to its prior handlers and level afterwards."""
    logger = logging.getLogger("helix")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# Client fixtures
# ---------------------------------------------------------------------------

class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response | Exception) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def make_client(handler: Handler) -> HelixClient:
    http = httpx.AsyncClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
        headers={"Client-Id": "test-client-id", "Authorization": "Bearer test-access-token"},
    )
    return HelixClient(http, owns_transport=True)


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

user_ids = st.from_regex(r"[1-9][0-9]{2,9}", fullmatch=True)
logins = st.from_regex(r"[a-z][a-z0-9_]{3,24}", fullmatch=True)
cursors = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789=_-",
    min_size=1,
    max_size=64,
)
emote_set_ids = st.lists(user_ids, min_size=1, max_size=25)
