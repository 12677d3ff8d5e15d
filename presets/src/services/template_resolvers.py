"""
Version rules for normalizing player template records.

Each field group (class, head parts, colors) is resolved by an ordered table
of VersionRule entries. Every rule whose version range contains the record's
version is applied, in table order, against a shared ResolutionContext. Later
rules see the values earlier rules produced, which is how defaults propagate:
Feet starts from the resolved Legs color, accessory colors start from the
resolved Hair color, and so on.

Usage:
    context = ResolutionContext(fields=record.present_fields(), version=2)
    CLASS_RESOLVER.resolve(context)
    HEAD_PART_RESOLVER.resolve(context)
    COLOR_RESOLVER.resolve(context)
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from common.src.appearance import (
    COLOR_UNSET,
    HAIR_DERIVED_SLOTS,
    LEGACY_PALETTE_SLOTS,
    CharacterColors,
    Color,
    ColorSlot,
    HeadPart,
    HeadParts,
    convert_legacy_colors,
    decompose_legacy_face,
    legacy_hair_to_head_parts,
)
from presets.src.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ResolutionContext:
    """
    Working state while one record is normalized.

    Attributes:
        fields: Label -> value for the keys present in the record
        version: Schema version the record was written under
        character_class_name: Class name resolved so far
        head_parts: Accessories resolved so far
        colors: Slot colors resolved so far, every slot starts unset
    """
    fields: Mapping[str, Any]
    version: int
    character_class_name: str = ""
    head_parts: HeadParts = field(default_factory=HeadParts)
    colors: Dict[ColorSlot, Color] = field(
        default_factory=lambda: {slot: COLOR_UNSET for slot in ColorSlot}
    )

    def resolved_colors(self) -> CharacterColors:
        return CharacterColors.from_slots(self.colors)


@dataclass(frozen=True)
class VersionRule:
    """
    One resolution step, applied to versions in [min_version, max_version].

    A max_version of None means the rule applies to every later version.
    """
    description: str
    min_version: int
    max_version: Optional[int]
    apply: Callable[[ResolutionContext], None]

    def applies_to(self, version: int) -> bool:
        if version < self.min_version:
            return False
        return self.max_version is None or version <= self.max_version


class RuleResolver:
    """Applies an ordered table of VersionRules to a context."""

    def __init__(self, name: str, rules: Sequence[VersionRule]):
        self.name = name
        self.rules = tuple(rules)

    def rules_for(self, version: int) -> Sequence[VersionRule]:
        """The rules that run for a version, in the order they run."""
        return tuple(rule for rule in self.rules if rule.applies_to(version))

    def resolve(self, context: ResolutionContext) -> ResolutionContext:
        for rule in self.rules_for(context.version):
            rule.apply(context)
        return context


# =============================================================================
# Field readers
# =============================================================================

def _read_color(context: ResolutionContext, slot: ColorSlot) -> None:
    """Override a slot with an explicit color, keeping the default if absent or invalid."""
    if slot.value not in context.fields:
        return
    value = context.fields[slot.value]
    try:
        context.colors[slot] = Color.parse(value)
    except ValueError as e:
        logger.warning(
            "Ignoring invalid template color",
            extra={"slot": slot.value, "value": repr(value), "error": str(e)},
        )


def _read_palette_index(context: ResolutionContext, slot: ColorSlot) -> int:
    """Read a version 1 palette index; absent or non-integer values count as 0."""
    value = context.fields.get(slot.value, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning(
            "Ignoring invalid palette index",
            extra={"slot": slot.value, "value": repr(value)},
        )
        return 0
    return value


# =============================================================================
# Class rules
# =============================================================================

def _read_face(context: ResolutionContext) -> None:
    context.character_class_name = context.fields.get("Face", "")


CLASS_RESOLVER = RuleResolver(
    "class",
    [
        VersionRule("class name from Face", 1, None, _read_face),
    ],
)


# =============================================================================
# Head part rules
# =============================================================================

def _decompose_face(context: ResolutionContext) -> None:
    # Old faces named both the class and the hair
    class_name, head_parts = decompose_legacy_face(context.character_class_name)
    context.character_class_name = class_name
    context.head_parts = head_parts


def _read_hair_type(context: ResolutionContext) -> None:
    context.head_parts = context.head_parts.with_part(
        HeadPart.HAIR, context.fields.get(HeadPart.HAIR.type_label)
    )


def _split_legacy_hair(context: ResolutionContext) -> None:
    context.head_parts = legacy_hair_to_head_parts(context.head_parts.hair)


def _read_accessory_types(context: ResolutionContext) -> None:
    head_parts = context.head_parts
    for part in (HeadPart.FACEHAIR, HeadPart.HAT, HeadPart.GLASSES):
        head_parts = head_parts.with_part(part, context.fields.get(part.type_label))
    context.head_parts = head_parts


HEAD_PART_RESOLVER = RuleResolver(
    "head parts",
    [
        VersionRule("decompose legacy face", 1, 2, _decompose_face),
        VersionRule("hair from HairType", 3, None, _read_hair_type),
        VersionRule("split legacy hair into accessories", 3, 3, _split_legacy_hair),
        VersionRule("accessories from *Type fields", 4, None, _read_accessory_types),
    ],
)


# =============================================================================
# Color rules
# =============================================================================

def _convert_palette_colors(context: ResolutionContext) -> None:
    indices = [_read_palette_index(context, slot) for slot in LEGACY_PALETTE_SLOTS]
    context.colors.update(convert_legacy_colors(*indices))


def _read_body_colors(context: ResolutionContext) -> None:
    for slot in LEGACY_PALETTE_SLOTS:
        _read_color(context, slot)


def _feet_from_legs(context: ResolutionContext) -> None:
    context.colors[ColorSlot.FEET] = context.colors[ColorSlot.LEGS]


def _read_feet(context: ResolutionContext) -> None:
    _read_color(context, ColorSlot.FEET)


def _accessories_from_hair(context: ResolutionContext) -> None:
    for slot in HAIR_DERIVED_SLOTS:
        context.colors[slot] = context.colors[ColorSlot.HAIR]


def _read_accessory_colors(context: ResolutionContext) -> None:
    for slot in HAIR_DERIVED_SLOTS:
        _read_color(context, slot)


COLOR_RESOLVER = RuleResolver(
    "colors",
    [
        VersionRule("body colors from palette indices", 1, 1, _convert_palette_colors),
        VersionRule("body colors", 2, None, _read_body_colors),
        VersionRule("feet default to legs", 1, 2, _feet_from_legs),
        # Explicit overrides apply at every version
        VersionRule("feet", 1, None, _read_feet),
        VersionRule("accessory colors default to hair", 1, 3, _accessories_from_hair),
        VersionRule("accessory colors", 1, None, _read_accessory_colors),
    ],
)
