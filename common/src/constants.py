"""
Player template constants and configuration values.
This file centralizes the fixed numbers and identifiers shared by the
template loader, serializer and appearance bridge.
"""

# Schema Constants
CURRENT_TEMPLATE_VERSION = 4  # Version written by the serializer
DEFAULT_TEMPLATE_VERSION = 1  # Assumed when a file carries no "Version"

# Template Constants
PLAYER_NAME_MAX_LENGTH = 19  # Longer names are truncated, not rejected

# Character Class Constants
FALLBACK_CHARACTER_CLASS = "Jones"  # Used when a template's class is unknown

# File Constants
PLAYER_TEMPLATES_FILE = "players.json"  # Default file name inside the config dir
