"""
Head accessories for characters and player templates.

HeadParts holds the optional variant string for each HeadPart slot. The
legacy helpers split the combined descriptors used by old template files
into discrete accessories.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Optional, Tuple

from .enums import HeadPart


@dataclass(frozen=True)
class HeadParts:
    """
    Optional accessory per HeadPart slot.

    None means no accessory is equipped in that slot.
    """
    hair: Optional[str] = None
    facehair: Optional[str] = None
    hat: Optional[str] = None
    glasses: Optional[str] = None

    def get(self, part: HeadPart) -> Optional[str]:
        return getattr(self, part.attribute)

    def with_part(self, part: HeadPart, value: Optional[str]) -> "HeadParts":
        """Return a copy with one slot replaced."""
        return replace(self, **{part.attribute: value})

    def items(self) -> Iterator[Tuple[HeadPart, Optional[str]]]:
        """(part, value) pairs in HeadPart order, including empty slots."""
        for part in HeadPart:
            yield part, self.get(part)

    def equipped(self) -> Dict[HeadPart, str]:
        """Only the slots that hold an accessory."""
        return {part: value for part, value in self.items() if value is not None}

    @classmethod
    def from_parts(cls, parts: Dict[HeadPart, Optional[str]]) -> "HeadParts":
        return cls(**{part.attribute: parts.get(part) for part in HeadPart})


# =============================================================================
# Legacy conversions
# =============================================================================

# Version 3 hair styles that bundled other accessories.
# Each entry gives the full set of head parts the style becomes.
LEGACY_HAIR_PARTS: Dict[str, HeadParts] = {
    "beard": HeadParts(facehair="beard"),
    "goatee": HeadParts(facehair="goatee"),
    "moustache": HeadParts(facehair="moustache"),
    "stubble": HeadParts(facehair="stubble"),
    "shades": HeadParts(glasses="shades"),
    "glasses": HeadParts(glasses="glasses"),
    "monocle": HeadParts(glasses="monocle"),
    "beret": HeadParts(hat="beret"),
    "cap": HeadParts(hat="cap"),
    "hardhat": HeadParts(hat="hardhat"),
    "bandana": HeadParts(hair="bandana"),
    "biker": HeadParts(hair="flattop", glasses="shades"),
    "captain": HeadParts(hat="cap", facehair="beard"),
    "wizard": HeadParts(hair="long", hat="wizard", facehair="beard"),
}

# Version 1-2 faces that encoded class and hair in a single string.
# Faces not listed are plain class names with no hair.
LEGACY_FACES: Dict[str, Tuple[str, Optional[str]]] = {
    "Jones": ("Jones", "flattop"),
    "Ice": ("Jones", "shades"),
    "Smith": ("Jones", "cap"),
    "Bob": ("Jones", "beard"),
    "Professor": ("Jones", "wizard"),
    "Captain": ("Jones", "captain"),
    "Biker": ("Jones", "biker"),
    "WarBaby": ("WarBaby", "beret"),
    "Lady": ("Lady", "bob"),
    "Grunt": ("Grunt", "goatee"),
}


def legacy_hair_to_head_parts(hair: Optional[str]) -> HeadParts:
    """
    Split a version 3 hair style into discrete accessories.

    Hair styles without a mapping stay as plain hair.

    Args:
        hair: Hair style read from a version 3 template, or None

    Returns:
        HeadParts with Hair, Facehair, Hat and Glasses resolved
    """
    if hair is None:
        return HeadParts()
    return LEGACY_HAIR_PARTS.get(hair, HeadParts(hair=hair))


def decompose_legacy_face(face: str) -> Tuple[str, HeadParts]:
    """
    Split a version 1-2 face into a class name and head parts.

    Args:
        face: The old "Face" value, which named both class and hair

    Returns:
        (residual class name, head parts)
    """
    class_name, hair = LEGACY_FACES.get(face, (face, None))
    return class_name, legacy_hair_to_head_parts(hair)
