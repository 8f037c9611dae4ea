"""Public models for the Helix client."""

from helix.models.chat import (
    BadgeVersion,
    ChatBadge,
    ChatChatter,
    ChatSettings,
    Emote,
    EmoteImage,
    EmoteWithOwner,
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
    NoContent,
    SendChatAnnouncementParams,
    SendChatAnnouncementResponse,
)
from helix.models.params import Body, Placement, Query, RequestParams, WireField
from helix.models.responses import Envelope, HelixResponse, Pagination

__all__ = [
    "BadgeVersion",
    "Body",
    "ChatBadge",
    "ChatChatter",
    "ChatSettings",
    "Emote",
    "EmoteImage",
    "EmoteWithOwner",
    "Envelope",
    "GetChannelEmotesParams",
    "GetChannelEmotesResponse",
    "GetChatBadgeParams",
    "GetChatBadgeResponse",
    "GetChatChattersParams",
    "GetChatChattersResponse",
    "GetChatSettingsParams",
    "GetChatSettingsResponse",
    "GetEmoteSetsParams",
    "GetEmoteSetsResponse",
    "HelixResponse",
    "ManyChatBadge",
    "ManyChatChatters",
    "ManyChatSettings",
    "ManyEmotes",
    "ManyEmotesWithOwner",
    "NoContent",
    "Pagination",
    "Placement",
    "Query",
    "RequestParams",
    "SendChatAnnouncementParams",
    "SendChatAnnouncementResponse",
    "WireField",
]
