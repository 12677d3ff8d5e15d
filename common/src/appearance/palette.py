"""
Legacy palette conversion.

Version 1 player templates stored body-part colors as integer indices into a
fixed table of shades. This module holds that table and converts the five
indexed slots into explicit colors.
"""

from enum import IntEnum
from typing import Dict

from .colors import Color
from .enums import ColorSlot


class LegacyShade(IntEnum):
    """Shade indices as written by version 1 template files."""
    BLUE = 0
    WHITE = 1
    RED = 2
    GREEN = 3
    BLUE_GREY = 4
    GREY = 5
    DARK_GREY = 6
    LIGHT_BROWN = 7
    PURPLE = 8
    LIGHT_GREEN = 9
    YELLOW = 10
    BROWN = 11
    ORANGE = 12
    GOLDEN = 13
    DARK_RED = 14
    BLACK = 15
    SKIN = 16
    DARK_SKIN = 17
    ASIAN_SKIN = 18


LEGACY_SHADE_COLORS: Dict[LegacyShade, Color] = {
    LegacyShade.BLUE: Color(0x00, 0x00, 0xBB),
    LegacyShade.WHITE: Color(0xFF, 0xFF, 0xFF),
    LegacyShade.RED: Color(0xC4, 0x00, 0x00),
    LegacyShade.GREEN: Color(0x00, 0x9C, 0x00),
    LegacyShade.BLUE_GREY: Color(0x6C, 0x7C, 0x94),
    LegacyShade.GREY: Color(0x88, 0x88, 0x88),
    LegacyShade.DARK_GREY: Color(0x44, 0x44, 0x44),
    LegacyShade.LIGHT_BROWN: Color(0xAC, 0x7C, 0x48),
    LegacyShade.PURPLE: Color(0x8C, 0x00, 0xAC),
    LegacyShade.LIGHT_GREEN: Color(0x6C, 0xE4, 0x44),
    LegacyShade.YELLOW: Color(0xE8, 0xE0, 0x00),
    LegacyShade.BROWN: Color(0x74, 0x48, 0x20),
    LegacyShade.ORANGE: Color(0xF0, 0x7C, 0x00),
    LegacyShade.GOLDEN: Color(0xD8, 0xAC, 0x38),
    LegacyShade.DARK_RED: Color(0x78, 0x00, 0x00),
    LegacyShade.BLACK: Color(0x10, 0x10, 0x10),
    LegacyShade.SKIN: Color(0xF4, 0xB4, 0x8C),
    LegacyShade.DARK_SKIN: Color(0x8C, 0x5C, 0x3C),
    LegacyShade.ASIAN_SKIN: Color(0xE0, 0xB8, 0x74),
}


def legacy_shade_color(index: int) -> Color:
    """
    Look up a version 1 shade index.

    Indices outside the table resolve to the first shade, so any stored
    integer still yields a color.
    """
    try:
        return LEGACY_SHADE_COLORS[LegacyShade(index)]
    except ValueError:
        return LEGACY_SHADE_COLORS[LegacyShade.BLUE]


def convert_legacy_colors(
    skin: int, arms: int, body: int, legs: int, hair: int
) -> Dict[ColorSlot, Color]:
    """
    Convert the five version 1 palette indices into colors.

    Pure function: the same indices always give the same colors.

    Returns:
        Mapping for SKIN, ARMS, BODY, LEGS and HAIR slots.
    """
    return {
        ColorSlot.SKIN: legacy_shade_color(skin),
        ColorSlot.ARMS: legacy_shade_color(arms),
        ColorSlot.BODY: legacy_shade_color(body),
        ColorSlot.LEGS: legacy_shade_color(legs),
        ColorSlot.HAIR: legacy_shade_color(hair),
    }
