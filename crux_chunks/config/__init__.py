"""Configuration constants and environment driven settings."""

from .env import ChunkSettings, get_settings

__all__ = ["ChunkSettings", "get_settings"]
