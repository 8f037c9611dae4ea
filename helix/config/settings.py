"""Pydantic Settings for the Helix client.

All environment variables use the HELIX_ prefix.
Example: HELIX_CLIENT_ID=abc123, HELIX_ACCESS_TOKEN=xyz
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://api.twitch.tv/helix"


class HelixSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Credentials (token must already be issued, no refresh here)
    client_id: str
    access_token: str

    # Transport
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    user_agent: str | None = None

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "HELIX_"}
