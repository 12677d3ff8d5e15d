"""
Conversions between player templates and live characters.

Applying a template binds its class name to a registered CharacterClass,
falling back to the configured default class when the name is unknown.
Capturing goes the other way and records a character's current look.
"""

from typing import Optional

from common.src.appearance import (
    Character,
    CharacterClass,
    HeadParts,
    PlayerData,
    PlayerTemplate,
)
from presets.src.core.character_classes import CharacterClassRegistry
from presets.src.core.config import settings
from presets.src.core.logging_config import get_logger

logger = get_logger(__name__)


def resolve_character_class(
    class_name: str,
    registry: CharacterClassRegistry,
    fallback_class_name: Optional[str] = None,
) -> CharacterClass:
    """
    Find a template's class, never failing.

    Args:
        class_name: Class name stored on the template
        registry: Registry of known classes
        fallback_class_name: Class used for unknown names,
            defaults to settings.FALLBACK_CHARACTER_CLASS

    Returns:
        The named class, else the registered fallback class, else a bare
        CharacterClass carrying the fallback name
    """
    character_class = registry.get(class_name)
    if character_class is not None:
        return character_class

    fallback_class_name = fallback_class_name or settings.FALLBACK_CHARACTER_CLASS
    logger.info(
        "Unknown character class, using fallback",
        extra={"character_class": class_name, "fallback": fallback_class_name},
    )
    return registry.get(fallback_class_name) or CharacterClass(name=fallback_class_name)


def template_to_character(
    template: PlayerTemplate,
    registry: CharacterClassRegistry,
    fallback_class_name: Optional[str] = None,
) -> Character:
    """Build a character wearing a template's look."""
    return Character(
        character_class=resolve_character_class(
            template.character_class_name, registry, fallback_class_name
        ),
        colors=template.colors,
        head_parts=HeadParts(**{
            part.attribute: value for part, value in template.head_parts.items()
        }),
        player_template_name=template.name,
    )


def template_to_player_data(
    template: PlayerTemplate,
    registry: CharacterClassRegistry,
    fallback_class_name: Optional[str] = None,
) -> PlayerData:
    """Build a player slot named after a template and wearing its look."""
    return PlayerData(
        name=template.name,
        character=template_to_character(template, registry, fallback_class_name),
    )


def character_to_template(character: Character, name: Optional[str] = None) -> PlayerTemplate:
    """
    Capture a character's current look.

    Args:
        character: Character to capture
        name: Template name, defaults to character.player_template_name

    Returns:
        New PlayerTemplate with the character's class, equipped head parts and colors
    """
    return PlayerTemplate(
        name=name if name is not None else character.player_template_name,
        character_class_name=character.character_class.name,
        colors=character.colors,
        head_parts=HeadParts.from_parts(character.head_parts.equipped()),
    )


def player_data_to_template(player_data: PlayerData) -> PlayerTemplate:
    """Capture a player's look, named after the player."""
    return character_to_template(player_data.character, name=player_data.name)
