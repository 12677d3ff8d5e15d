"""
Appearance Enums

Closed enumerations for the slots a player template carries.
Values are the labels used in the persisted player templates file.
"""

from enum import Enum


class HeadPart(str, Enum):
    """
    Optional accessory slots on a character's head.

    Each slot is either empty or set to a named variant string.
    """
    HAIR = "Hair"
    FACEHAIR = "Facehair"
    HAT = "Hat"
    GLASSES = "Glasses"

    @property
    def attribute(self) -> str:
        """Field name on HeadParts (e.g., "facehair")."""
        return self.name.lower()

    @property
    def type_label(self) -> str:
        """File label holding the variant string (e.g., "HairType")."""
        return f"{self.value}Type"


class ColorSlot(str, Enum):
    """
    Named body-part color slots.

    Every slot must hold a color once a template is normalized.
    """
    SKIN = "Skin"
    ARMS = "Arms"
    BODY = "Body"
    LEGS = "Legs"
    HAIR = "Hair"
    FACEHAIR = "Facehair"
    HAT = "Hat"
    GLASSES = "Glasses"
    FEET = "Feet"

    @property
    def attribute(self) -> str:
        """Field name on CharacterColors (e.g., "skin")."""
        return self.name.lower()


# Slots whose color was stored as a palette index in version 1 files
LEGACY_PALETTE_SLOTS = (
    ColorSlot.SKIN,
    ColorSlot.ARMS,
    ColorSlot.BODY,
    ColorSlot.LEGS,
    ColorSlot.HAIR,
)

# Slots that inherit the hair color before version 4
HAIR_DERIVED_SLOTS = (
    ColorSlot.FACEHAIR,
    ColorSlot.HAT,
    ColorSlot.GLASSES,
)
