"""Endpoint bindings."""

from helix.endpoints.chat import REQUIRED_SCOPES, ChatAPI

__all__ = ["ChatAPI", "REQUIRED_SCOPES"]
