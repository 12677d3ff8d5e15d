"""Common appearance definitions shared by the player template services."""

from .constants import (
    # Schema
    CURRENT_TEMPLATE_VERSION,
    DEFAULT_TEMPLATE_VERSION,
    # Templates
    PLAYER_NAME_MAX_LENGTH,
    # Character classes
    FALLBACK_CHARACTER_CLASS,
    # Files
    PLAYER_TEMPLATES_FILE,
)

__all__ = [
    "CURRENT_TEMPLATE_VERSION",
    "DEFAULT_TEMPLATE_VERSION",
    "PLAYER_NAME_MAX_LENGTH",
    "FALLBACK_CHARACTER_CLASS",
    "PLAYER_TEMPLATES_FILE",
]
