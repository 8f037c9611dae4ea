"""Declarative wire schema for request parameter models.

Parameter models subclass ``RequestParams`` and mark every field with its
placement, in the same spirit as FastAPI's ``Query``/``Body``::

    class GetChatSettingsParams(RequestParams):
        broadcaster_id: Annotated[str, Query()] = ""
        moderator_id: Annotated[str, Query()] = ""

The per-class ``WireField`` tuple is computed once when the class is
defined, so encoding never has to inspect annotations at call time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo


class Placement(str, Enum):
    """Where a parameter travels on the wire."""

    QUERY = "query"
    BODY = "body"


@dataclass(frozen=True)
class Query:
    """Marks a field as a query-string parameter.

    ``default`` is emitted in place of an empty value (e.g. ``first=20``).
    """

    wire_name: str | None = None
    default: str | None = None


@dataclass(frozen=True)
class Body:
    """Marks a field as a JSON body member."""

    wire_name: str | None = None


@dataclass(frozen=True)
class WireField:
    """Resolved placement of a single model field."""

    name: str
    wire_name: str
    placement: Placement
    default: str | None = None


def _resolve(name: str, info: FieldInfo) -> WireField:
    for marker in info.metadata:
        if isinstance(marker, Query):
            return WireField(
                name=name,
                wire_name=marker.wire_name or name,
                placement=Placement.QUERY,
                default=marker.default,
            )
        if isinstance(marker, Body):
            return WireField(
                name=name,
                wire_name=marker.wire_name or name,
                placement=Placement.BODY,
            )
    raise TypeError(f"Field '{name}' has no Query() or Body() placement marker")


class RequestParams(BaseModel):
    """Base class for all endpoint parameter models."""

    model_config = ConfigDict(frozen=True)

    __wire_fields__: ClassVar[tuple[WireField, ...]] = ()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__wire_fields__ = tuple(
            _resolve(name, info) for name, info in cls.model_fields.items()
        )

    @classmethod
    def wire_fields(cls) -> tuple[WireField, ...]:
        return cls.__wire_fields__
