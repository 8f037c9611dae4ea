"""Typed async client for the Twitch Helix chat endpoints.

Organisation:
- transport/ : parameter encoder, envelope hydration, generic dispatcher
- models/    : declarative parameter schema, envelope, chat payload shapes
- endpoints/ : chat endpoint bindings built on the dispatcher
- config/    : environment-driven settings
"""

from helix.config.settings import HelixSettings
from helix.endpoints.chat import REQUIRED_SCOPES, ChatAPI
from helix.errors import DecodeError, HelixError, TransportError, ValidationError
from helix.models.responses import Envelope, HelixResponse, Pagination
from helix.transport.client import HelixClient

__all__ = [
    "ChatAPI",
    "DecodeError",
    "Envelope",
    "HelixClient",
    "HelixError",
    "HelixResponse",
    "HelixSettings",
    "Pagination",
    "REQUIRED_SCOPES",
    "TransportError",
    "ValidationError",
]
