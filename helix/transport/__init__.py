"""HTTP transport layer: encoder, envelope hydration and dispatcher."""

from helix.transport.client import HelixClient
from helix.transport.encoding import EncodedParams, encode, encode_body, encode_query
from helix.transport.envelope import hydrate

__all__ = [
    "EncodedParams",
    "HelixClient",
    "encode",
    "encode_body",
    "encode_query",
    "hydrate",
]
