"""Parameter encoder: RequestParams -> query pairs and JSON body.

Pure transformation, no validation of values. Empty values (None, "", 0,
False, empty sequences) are skipped unless the field declares a wire default.
Sequences become repeated query pairs in element order; pair order follows
field declaration order, so the same value always encodes identically.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from helix.models.params import Placement, RequestParams


@dataclass(frozen=True)
class EncodedParams:
    """Wire-ready parameters for a single request."""

    query: list[tuple[str, str]] = field(default_factory=list)
    body: dict[str, Any] | None = None


def is_empty(value: Any) -> bool:
    """Return True for values that are never put on the wire."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple)):
        return len(value) == 0
    return False


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        # Naive datetimes are taken as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_query(params: RequestParams | None) -> list[tuple[str, str]]:
    """Render query-placed fields as ordered (name, value) pairs."""
    if params is None:
        return []

    pairs: list[tuple[str, str]] = []
    for wire_field in params.wire_fields():
        if wire_field.placement is not Placement.QUERY:
            continue

        value = getattr(params, wire_field.name)
        if is_empty(value):
            if wire_field.default is not None:
                pairs.append((wire_field.wire_name, wire_field.default))
            continue

        if isinstance(value, (list, tuple)):
            pairs.extend(
                (wire_field.wire_name, _render(item))
                for item in value
                if not is_empty(item)
            )
        else:
            pairs.append((wire_field.wire_name, _render(value)))
    return pairs


def encode_body(params: RequestParams | None) -> dict[str, Any] | None:
    """Render body-placed fields as a JSON-ready dict, or None if empty."""
    if params is None:
        return None

    body_fields = [
        wire_field
        for wire_field in params.wire_fields()
        if wire_field.placement is Placement.BODY
        and not is_empty(getattr(params, wire_field.name))
    ]
    if not body_fields:
        return None

    dumped = params.model_dump(mode="json")
    return {wire_field.wire_name: dumped[wire_field.name] for wire_field in body_fields}


def encode(params: RequestParams | None) -> EncodedParams:
    """Encode a parameter value; None encodes to no parameters at all."""
    return EncodedParams(query=encode_query(params), body=encode_body(params))
