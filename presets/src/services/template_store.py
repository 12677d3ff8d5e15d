"""
Player template store.

Holds the two template collections and exposes them through one index
space: custom templates first, then built-in templates.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Optional

from common.src.appearance import Character, PlayerTemplate
from presets.src.core.logging_config import get_logger
from presets.src.services.appearance_bridge import character_to_template

logger = get_logger(__name__)


class TemplateCollection(str, Enum):
    """The two template collections in a store."""
    BUILTIN = "builtin"  # Loaded from the player templates file
    CUSTOM = "custom"  # Captured from characters during play


class PlayerTemplates:
    """
    Ordered, append-only template collections.

    Index space:
        [0, len(custom))                         -> custom[i]
        [len(custom), len(custom)+len(builtin))  -> builtin[i - len(custom)]

    Not thread-safe; callers own any synchronisation.
    """

    def __init__(self):
        self.builtin: List[PlayerTemplate] = []
        self.custom: List[PlayerTemplate] = []

    def collection(self, which: TemplateCollection) -> List[PlayerTemplate]:
        if which is TemplateCollection.BUILTIN:
            return self.builtin
        return self.custom

    def clear(self, which: TemplateCollection) -> None:
        """Release every template in a collection. Safe on an empty collection."""
        self.collection(which).clear()

    def terminate(self) -> None:
        """Release both collections."""
        self.clear(TemplateCollection.BUILTIN)
        self.clear(TemplateCollection.CUSTOM)

    def replace_builtin(self, templates: Iterable[PlayerTemplate]) -> None:
        """Swap the built-in collection for a freshly loaded one."""
        templates = list(templates)
        self.clear(TemplateCollection.BUILTIN)
        self.builtin.extend(templates)

    def get_by_id(self, template_id: int) -> Optional[PlayerTemplate]:
        """
        Look up a template in the combined index space.

        Args:
            template_id: Combined index

        Returns:
            The template, or None for any index outside the space
        """
        if template_id < 0:
            return None
        if template_id < len(self.custom):
            return self.custom[template_id]
        builtin_id = template_id - len(self.custom)
        if builtin_id < len(self.builtin):
            return self.builtin[builtin_id]
        return None

    def add_custom(self, template: PlayerTemplate) -> None:
        self.custom.append(template)

    def add_character(self, character: Character) -> PlayerTemplate:
        """
        Remember a character's current look as a custom template.

        The template is named after the character's player_template_name.
        """
        template = character_to_template(character)
        self.add_custom(template)
        logger.debug(
            "Loaded player template from character %s (%s)",
            template.name,
            template.character_class_name,
        )
        return template

    def __iter__(self) -> Iterator[PlayerTemplate]:
        """Templates in combined index order."""
        yield from self.custom
        yield from self.builtin

    def __len__(self) -> int:
        return len(self.custom) + len(self.builtin)
