"""
Color values for character body parts.

Defines the RGBA Color type and the CharacterColors record holding one
color per ColorSlot. Both are immutable so they can be shared freely between
templates and live characters.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from .enums import ColorSlot


@dataclass(frozen=True)
class Color:
    """
    RGBA color with 0-255 channels.

    Attributes:
        r: Red channel
        g: Green channel
        b: Blue channel
        a: Alpha channel (255 = opaque)
    """
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Color channel '{f.name}' must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel '{f.name}' out of range: {value}")

    def to_hex(self) -> str:
        """
        Encode as a hex string.

        Returns:
            "#rrggbb" for opaque colors, "#rrggbbaa" otherwise.
        """
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """
        Decode "#rrggbb" or "#rrggbbaa" (leading "#" optional).

        Raises:
            ValueError: If the text is not a 6 or 8 digit hex color
        """
        digits = text.strip().lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"'{text}' is not a hex color")
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    @classmethod
    def parse(cls, value: Any) -> "Color":
        """
        Build a Color from any encoding found in player template files.

        Accepts hex strings, [r, g, b] / [r, g, b, a] sequences and
        {"R": .., "G": .., "B": .., "A": ..} objects (keys case-insensitive,
        alpha optional).

        Raises:
            ValueError: If the value is not a recognised color encoding
        """
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (list, tuple)):
            if len(value) not in (3, 4):
                raise ValueError(f"Color sequence must have 3 or 4 channels: {value!r}")
            try:
                return cls(*value)
            except TypeError as e:
                raise ValueError(str(e)) from e
        if isinstance(value, Mapping):
            channels = {str(k).lower(): v for k, v in value.items()}
            try:
                return cls(
                    r=channels["r"],
                    g=channels["g"],
                    b=channels["b"],
                    a=channels.get("a", 255),
                )
            except (KeyError, TypeError) as e:
                raise ValueError(f"Invalid color object {value!r}: {e}") from e
        raise ValueError(f"Unrecognised color value: {value!r}")


# Zero color used for slots a file leaves out
COLOR_UNSET = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class CharacterColors:
    """
    One color for every ColorSlot.

    All fields are required, so a CharacterColors can never be missing a slot.
    """
    skin: Color
    arms: Color
    body: Color
    legs: Color
    hair: Color
    facehair: Color
    hat: Color
    glasses: Color
    feet: Color

    def get(self, slot: ColorSlot) -> Color:
        return getattr(self, slot.attribute)

    def with_changes(self, **kwargs) -> "CharacterColors":
        """Return a copy with some slots replaced."""
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, str]:
        """Slot label -> hex color, in ColorSlot order."""
        return {slot.value: self.get(slot).to_hex() for slot in ColorSlot}

    @classmethod
    def from_slots(cls, colors: Mapping[ColorSlot, Color]) -> "CharacterColors":
        """
        Build from a ColorSlot -> Color mapping.

        Raises:
            KeyError: If any slot is missing
        """
        return cls(**{slot.attribute: colors[slot] for slot in ColorSlot})

    @classmethod
    def uniform(cls, color: Optional[Color] = None) -> "CharacterColors":
        """Every slot set to the same color (unset color by default)."""
        color = color if color is not None else COLOR_UNSET
        return cls(**{slot.attribute: color for slot in ColorSlot})
