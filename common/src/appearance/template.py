"""
PlayerTemplate - a reusable character appearance preset.

A template names a character class, the equipped head accessories and the
full set of body-part colors. Templates are immutable; changing one means
building a replacement.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from ..constants import PLAYER_NAME_MAX_LENGTH
from .colors import CharacterColors
from .head_parts import HeadParts


def truncate_player_name(name: str) -> str:
    """Clip a display name to PLAYER_NAME_MAX_LENGTH characters."""
    return name[:PLAYER_NAME_MAX_LENGTH]


@dataclass(frozen=True)
class PlayerTemplate:
    """
    Named appearance preset.

    Attributes:
        name: Player-visible name, truncated to PLAYER_NAME_MAX_LENGTH
        character_class_name: Class name, resolved against the class registry on use
        colors: Color for every body-part slot
        head_parts: Equipped accessories (empty slots are None)
    """
    name: str
    character_class_name: str
    colors: CharacterColors
    head_parts: HeadParts = field(default_factory=HeadParts)

    def __post_init__(self):
        object.__setattr__(self, "name", truncate_player_name(self.name))

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view, useful for logging and comparisons."""
        return {
            "name": self.name,
            "character_class_name": self.character_class_name,
            "head_parts": {part.value: value for part, value in self.head_parts.items()},
            "colors": self.colors.to_dict(),
        }
