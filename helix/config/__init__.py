"""Configuration module."""

from helix.config.settings import HelixSettings

__all__ = ["HelixSettings"]
