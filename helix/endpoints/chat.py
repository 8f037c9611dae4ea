"""Chat endpoints: chatters, badges, emotes, announcements and settings.

Each method validates required identifiers locally, dispatches through
``HelixClient`` with its payload shape, and wraps the envelope and payload
into the endpoint's typed result.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx

from helix.errors import ValidationError
from helix.models.chat import (
    ChatChatter,
    GetChannelEmotesParams,
    GetChannelEmotesResponse,
    GetChatBadgeParams,
    GetChatBadgeResponse,
    GetChatChattersParams,
    GetChatChattersResponse,
    GetChatSettingsParams,
    GetChatSettingsResponse,
    GetEmoteSetsParams,
    GetEmoteSetsResponse,
    ManyChatBadge,
    ManyChatChatters,
    ManyChatSettings,
    ManyEmotes,
    ManyEmotesWithOwner,
    SendChatAnnouncementParams,
    SendChatAnnouncementResponse,
)
from helix.models.params import RequestParams
from helix.transport.client import HelixClient

logger = logging.getLogger(__name__)

MIN_EMOTE_SETS = 1
MAX_EMOTE_SETS = 25

# Token scopes required per endpoint (empty: any app or user token)
REQUIRED_SCOPES: dict[str, tuple[str, ...]] = {
    "get_chatters": ("moderator:read:chatters",),
    "get_channel_badges": (),
    "get_global_badges": (),
    "get_channel_emotes": (),
    "get_global_emotes": (),
    "get_emote_sets": (),
    "send_announcement": ("moderator:manage:announcements",),
    # moderator:read:chat_settings is optional, only for the delay fields
    "get_chat_settings": (),
}


def _require(params: RequestParams, *names: str) -> None:
    """Raise ValidationError if any of the named identifiers is empty."""
    missing = [name for name in names if not getattr(params, name)]
    if missing:
        raise ValidationError(
            f"{', '.join(missing)} must be provided", missing=missing
        )


class ChatAPI:
    """Typed bindings for the /chat endpoints."""

    def __init__(self, client: HelixClient) -> None:
        self._client = client

    async def get_chatters(
        self,
        params: GetChatChattersParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> GetChatChattersResponse:
        """List users connected to the broadcaster's chat.

        Required scope: moderator:read:chatters
        """
        _require(params, "broadcaster_id", "moderator_id")
        resp = await self._client.get(
            "/chat/chatters", ManyChatChatters, params, timeout=timeout
        )
        return GetChatChattersResponse(envelope=resp.envelope, data=resp.data)

    async def iter_chatters(
        self,
        params: GetChatChattersParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> AsyncIterator[ChatChatter]:
        """Yield every chatter, following the pagination cursor."""
        _require(params, "broadcaster_id", "moderator_id")

        async def fetch(page_params: GetChatChattersParams) -> GetChatChattersResponse:
            return await self.get_chatters(page_params, timeout=timeout)

        async for page in HelixClient.paginate(fetch, params):
            if page.data is None:
                continue
            for chatter in page.data.chatters:
                yield chatter

    async def get_channel_badges(
        self,
        params: GetChatBadgeParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> GetChatBadgeResponse:
        _require(params, "broadcaster_id")
        resp = await self._client.get(
            "/chat/badges", ManyChatBadge, params, timeout=timeout
        )
        return GetChatBadgeResponse(envelope=resp.envelope, data=resp.data)

    async def get_global_badges(
        self, *, timeout: Any = httpx.USE_CLIENT_DEFAULT
    ) -> GetChatBadgeResponse:
        resp = await self._client.get(
            "/chat/badges/global", ManyChatBadge, None, timeout=timeout
        )
        return GetChatBadgeResponse(envelope=resp.envelope, data=resp.data)

    async def get_channel_emotes(
        self,
        params: GetChannelEmotesParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> GetChannelEmotesResponse:
        _require(params, "broadcaster_id")
        resp = await self._client.get(
            "/chat/emotes", ManyEmotes, params, timeout=timeout
        )
        return GetChannelEmotesResponse(envelope=resp.envelope, data=resp.data)

    async def get_global_emotes(
        self, *, timeout: Any = httpx.USE_CLIENT_DEFAULT
    ) -> GetChannelEmotesResponse:
        resp = await self._client.get(
            "/chat/emotes/global", ManyEmotes, None, timeout=timeout
        )
        return GetChannelEmotesResponse(envelope=resp.envelope, data=resp.data)

    async def get_emote_sets(
        self,
        params: GetEmoteSetsParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> GetEmoteSetsResponse:
        """Get emotes for one or more emote sets (1 to 25 ids)."""
        # Blank ids are dropped by the encoder
        count = sum(1 for set_id in params.emote_set_ids if set_id)
        if not MIN_EMOTE_SETS <= count <= MAX_EMOTE_SETS:
            raise ValidationError(
                f"between {MIN_EMOTE_SETS} and {MAX_EMOTE_SETS} emote set ids "
                f"must be provided, got {count}",
                count=count,
            )
        resp = await self._client.get(
            "/chat/emotes/set", ManyEmotesWithOwner, params, timeout=timeout
        )
        return GetEmoteSetsResponse(envelope=resp.envelope, data=resp.data)

    async def send_announcement(
        self,
        params: SendChatAnnouncementParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> SendChatAnnouncementResponse:
        """Send an announcement to the broadcaster's chat room.

        Required scope: moderator:manage:announcements
        """
        _require(params, "broadcaster_id", "moderator_id")
        resp = await self._client.post_json(
            "/chat/announcements", None, params, timeout=timeout
        )
        return SendChatAnnouncementResponse(envelope=resp.envelope)

    async def get_chat_settings(
        self,
        params: GetChatSettingsParams,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> GetChatSettingsResponse:
        """Get the broadcaster's chat settings.

        Optional scope: moderator:read:chat_settings (with ``moderator_id``)
        """
        _require(params, "broadcaster_id")
        resp = await self._client.get(
            "/chat/settings", ManyChatSettings, params, timeout=timeout
        )
        return GetChatSettingsResponse(envelope=resp.envelope, data=resp.data)
