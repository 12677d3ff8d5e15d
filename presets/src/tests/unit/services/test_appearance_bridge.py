"""
Unit tests for template <-> character conversions.
"""

from common.src.appearance import (
    Character,
    CharacterClass,
    HeadPart,
    HeadParts,
    PlayerData,
    PlayerTemplate,
)
from common.src.constants import FALLBACK_CHARACTER_CLASS
from presets.src.core.character_classes import CharacterClassRegistry
from presets.src.services.appearance_bridge import (
    character_to_template,
    player_data_to_template,
    resolve_character_class,
    template_to_character,
    template_to_player_data,
)


class TestTemplateToCharacter:
    """Applying a template to a character."""

    def test_known_class_resolved(self, sample_template, registry):
        character = template_to_character(sample_template, registry)

        assert character.character_class is registry.get("Ogre")

    def test_unknown_class_uses_fallback(self, sample_colors, registry):
        """An unregistered class never fails, it binds the fallback class."""
        template = PlayerTemplate(
            name="Stranger", character_class_name="Nobody", colors=sample_colors
        )

        character = template_to_character(template, registry)

        assert character.character_class.name == FALLBACK_CHARACTER_CLASS
        assert character.character_class is registry.get(FALLBACK_CHARACTER_CLASS)

    def test_fallback_missing_from_registry(self, sample_template):
        """Even an empty registry yields a character."""
        character = template_to_character(sample_template, CharacterClassRegistry())

        assert character.character_class == CharacterClass(name=FALLBACK_CHARACTER_CLASS)

    def test_custom_fallback_class(self, sample_colors, registry):
        template = PlayerTemplate(
            name="Stranger", character_class_name="Nobody", colors=sample_colors
        )

        character = template_to_character(template, registry, fallback_class_name="Lady")

        assert character.character_class.name == "Lady"

    def test_head_parts_and_colors_copied(self, sample_template, registry):
        character = template_to_character(sample_template, registry)

        assert character.head_parts == sample_template.head_parts
        assert character.colors == sample_template.colors
        assert character.player_template_name == "Commando"

    def test_character_edits_do_not_touch_template(self, sample_template, registry):
        """The character owns its head parts once the template is applied."""
        character = template_to_character(sample_template, registry)

        character.head_parts = character.head_parts.with_part(HeadPart.HAIR, None)

        assert sample_template.head_parts.hair == "mohawk"

    def test_player_data(self, sample_template, registry):
        player = template_to_player_data(sample_template, registry)

        assert player.name == "Commando"
        assert player.character.character_class.name == "Ogre"


class TestCharacterToTemplate:
    """Capturing a character's look."""

    def test_capture(self, sample_colors):
        character = Character(
            character_class=CharacterClass(name="WarBaby"),
            colors=sample_colors,
            head_parts=HeadParts(hat="beret"),
            player_template_name="Baby",
        )

        template = character_to_template(character)

        assert template.name == "Baby"
        assert template.character_class_name == "WarBaby"
        assert template.head_parts == HeadParts(hat="beret")
        assert template.colors == sample_colors

    def test_capture_with_name(self):
        character = Character(character_class=CharacterClass(name="Jones"))

        assert character_to_template(character, name="Override").name == "Override"

    def test_player_data_capture_uses_player_name(self, sample_colors):
        player = PlayerData(
            name="Player One",
            character=Character(
                character_class=CharacterClass(name="Lady"),
                colors=sample_colors,
                player_template_name="ignored",
            ),
        )

        template = player_data_to_template(player)

        assert template.name == "Player One"
        assert template.character_class_name == "Lady"

    def test_round_trip_through_character(self, sample_template, registry):
        character = template_to_character(sample_template, registry)

        assert character_to_template(character) == sample_template


class TestResolveCharacterClass:

    def test_logs_fallback(self, registry, caplog):
        with caplog.at_level("INFO", logger="presets.services"):
            resolve_character_class("Nobody", registry)

        assert "Unknown character class, using fallback" in caplog.messages
