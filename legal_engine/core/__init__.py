"""Core package - shared configuration."""

from .config import DEFAULT_PACK_DIR, Settings, get_settings

__all__ = [
    "DEFAULT_PACK_DIR",
    "Settings",
    "get_settings",
]
