"""
Live character appearance state.

These are the in-game counterparts of a PlayerTemplate: a character bound
to a resolved CharacterClass, and the player slot that owns it.
"""

from dataclasses import dataclass, field

from .colors import CharacterColors
from .head_parts import HeadParts


@dataclass(frozen=True)
class CharacterClass:
    """A character class known to the class registry."""
    name: str


@dataclass
class Character:
    """
    Appearance of a character currently in play.

    Attributes:
        character_class: Resolved class the character is drawn with
        colors: Current body-part colors
        head_parts: Currently equipped accessories
        player_template_name: Name used when this look is saved as a template
    """
    character_class: CharacterClass
    colors: CharacterColors = field(default_factory=CharacterColors.uniform)
    head_parts: HeadParts = field(default_factory=HeadParts)
    player_template_name: str = ""


@dataclass
class PlayerData:
    """A player slot: display name plus the character they control."""
    name: str
    character: Character
