"""Chat endpoint models: parameters, payload shapes and typed results."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from helix.models.params import Body, Query, RequestParams
from helix.models.responses import HelixResponse, Pagination


class _Shape(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class NoContent(_Shape):
    """Placeholder shape for endpoints that answer 204 No Content."""


# ---------------------------------------------------------------------------
# Chatters
# ---------------------------------------------------------------------------


class GetChatChattersParams(RequestParams):
    broadcaster_id: Annotated[str, Query()] = ""
    moderator_id: Annotated[str, Query()] = ""
    after: Annotated[str, Query()] = ""
    first: Annotated[int, Query()] = 0  # 1-1000, server default 100


class ChatChatter(_Shape):
    user_id: str
    user_login: str
    user_name: str


class ManyChatChatters(_Shape):
    chatters: list[ChatChatter] = Field(default_factory=list, alias="data")
    pagination: Pagination = Field(default_factory=Pagination)
    total: int = 0


class GetChatChattersResponse(HelixResponse[ManyChatChatters]):
    pass


# ---------------------------------------------------------------------------
# Badges
# ---------------------------------------------------------------------------


class GetChatBadgeParams(RequestParams):
    broadcaster_id: Annotated[str, Query()] = ""


class BadgeVersion(_Shape):
    id: str
    image_url_1x: str = ""
    image_url_2x: str = ""
    image_url_4x: str = ""
    title: str = ""
    description: str = ""


class ChatBadge(_Shape):
    set_id: str
    versions: list[BadgeVersion] = Field(default_factory=list)


class ManyChatBadge(_Shape):
    badges: list[ChatBadge] = Field(default_factory=list, alias="data")


class GetChatBadgeResponse(HelixResponse[ManyChatBadge]):
    pass


# ---------------------------------------------------------------------------
# Emotes
# ---------------------------------------------------------------------------


class GetChannelEmotesParams(RequestParams):
    broadcaster_id: Annotated[str, Query()] = ""


class GetEmoteSetsParams(RequestParams):
    emote_set_ids: Annotated[list[str], Query("emote_set_id")] = []  # 1-25 ids


class EmoteImage(_Shape):
    url_1x: str = ""
    url_2x: str = ""
    url_4x: str = ""


class Emote(_Shape):
    id: str
    name: str
    images: EmoteImage = Field(default_factory=EmoteImage)
    tier: str = ""
    emote_type: str = ""
    emote_set_id: str = ""
    format: list[str] = Field(default_factory=list)
    scale: list[str] = Field(default_factory=list)
    theme_mode: list[str] = Field(default_factory=list)


class EmoteWithOwner(Emote):
    owner_id: str = ""


class ManyEmotes(_Shape):
    emotes: list[Emote] = Field(default_factory=list, alias="data")
    template: str = ""


class ManyEmotesWithOwner(_Shape):
    emotes: list[EmoteWithOwner] = Field(default_factory=list, alias="data")
    template: str = ""


class GetChannelEmotesResponse(HelixResponse[ManyEmotes]):
    pass


class GetEmoteSetsResponse(HelixResponse[ManyEmotesWithOwner]):
    pass


# ---------------------------------------------------------------------------
# Announcements
# ---------------------------------------------------------------------------


class SendChatAnnouncementParams(RequestParams):
    broadcaster_id: Annotated[str, Query()] = ""
    moderator_id: Annotated[str, Query()] = ""
    # Up to 500 characters, the API truncates longer messages
    message: Annotated[str, Body()] = ""
    # blue, green, orange, purple or primary (channel accent color)
    color: Annotated[str, Body()] = ""


class SendChatAnnouncementResponse(HelixResponse[NoContent]):
    pass


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class GetChatSettingsParams(RequestParams):
    broadcaster_id: Annotated[str, Query()] = ""
    # Needed for the non_moderator_chat_delay fields
    moderator_id: Annotated[str, Query()] = ""


class ChatSettings(_Shape):
    broadcaster_id: str
    emote_mode: bool = False
    follower_mode: bool = False
    follower_mode_duration: int | None = None  # minutes
    slow_mode: bool = False
    slow_mode_wait_time: int | None = None  # seconds
    subscriber_mode: bool = False
    unique_chat_mode: bool = False
    moderator_id: str | None = None
    non_moderator_chat_delay: bool | None = None
    non_moderator_chat_delay_duration: int | None = None  # seconds


class ManyChatSettings(_Shape):
    settings: list[ChatSettings] = Field(default_factory=list, alias="data")


class GetChatSettingsResponse(HelixResponse[ManyChatSettings]):
    pass
