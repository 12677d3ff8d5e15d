"""
Test fixtures for the player template services.

Fast fixtures that need no files beyond pytest's tmp_path.
"""

import json

import pytest

from common.src.appearance import (
    CharacterColors,
    Color,
    HeadParts,
    PlayerTemplate,
)
from presets.src.core.character_classes import CharacterClassRegistry
from presets.src.services.template_store import PlayerTemplates


@pytest.fixture
def registry():
    """Registry with a handful of classes, including the fallback class."""
    return CharacterClassRegistry.from_names(["Jones", "Ogre", "Lady", "WarBaby"])


@pytest.fixture
def store():
    """Empty template store."""
    return PlayerTemplates()


@pytest.fixture
def sample_colors():
    """Colors with a distinct value in every slot."""
    return CharacterColors(
        skin=Color.from_hex("#f4b48c"),
        arms=Color.from_hex("#112233"),
        body=Color.from_hex("#445566"),
        legs=Color.from_hex("#778899"),
        hair=Color.from_hex("#aabbcc"),
        facehair=Color.from_hex("#ddeeff"),
        hat=Color.from_hex("#102030"),
        glasses=Color.from_hex("#40506080"),
        feet=Color.from_hex("#708090"),
    )


@pytest.fixture
def sample_template(sample_colors):
    """Fully populated template."""
    return PlayerTemplate(
        name="Commando",
        character_class_name="Ogre",
        colors=sample_colors,
        head_parts=HeadParts(hair="mohawk", hat="beret", glasses="shades"),
    )


@pytest.fixture
def current_version_record():
    """Minimal version 4 record with every field present."""
    return {
        "Name": "Ice",
        "Face": "Jones",
        "HairType": "flattop",
        "FacehairType": "stubble",
        "HatType": "cap",
        "GlassesType": "shades",
        "Skin": "#f4b48c",
        "Arms": "#112233",
        "Body": "#445566",
        "Legs": "#778899",
        "Hair": "#aabbcc",
        "Facehair": "#ddeeff",
        "Hat": "#102030",
        "Glasses": "#405060",
        "Feet": "#708090",
    }


@pytest.fixture
def write_templates_file(tmp_path):
    """Write a document to a templates file and return its path."""
    def _write(document, name="players.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write
