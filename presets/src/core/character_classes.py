"""
Character class registry.

Maps class names to CharacterClass records. Templates only store a class
name; the registry turns that name into a class when a template is applied
to a character.
"""

from typing import Dict, Iterable, Iterator, Optional

from common.src.appearance import CharacterClass
from presets.src.core.config import Settings, settings


class CharacterClassRegistry:
    """Name -> CharacterClass lookup, in registration order."""

    def __init__(self, classes: Optional[Iterable[CharacterClass]] = None):
        self._classes: Dict[str, CharacterClass] = {}
        for character_class in classes or ():
            self.register(character_class)

    def register(self, character_class: CharacterClass) -> None:
        """Add a class, replacing any class with the same name."""
        self._classes[character_class.name] = character_class

    def get(self, name: Optional[str]) -> Optional[CharacterClass]:
        """
        Look up a class by exact name.

        Returns:
            The class, or None if the name is unknown
        """
        if name is None:
            return None
        return self._classes.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[CharacterClass]:
        return iter(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "CharacterClassRegistry":
        return cls(CharacterClass(name=name) for name in names)

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "CharacterClassRegistry":
        """Registry holding the classes listed in config.yml."""
        config = config or settings
        return cls.from_names(config.CHARACTER_CLASSES)
