"""
Player template serializer.

Always writes the current schema version. Loaded templates are already fully
normalized, so writing never depends on the version a template came from.
"""

import json
from typing import Any, Dict, Iterable, List

from common.src.appearance import ColorSlot, HeadPart, PlayerTemplate
from common.src.constants import CURRENT_TEMPLATE_VERSION


# Color labels in the order they are written
COLOR_WRITE_ORDER = (
    ColorSlot.BODY,
    ColorSlot.ARMS,
    ColorSlot.LEGS,
    ColorSlot.SKIN,
    ColorSlot.HAIR,
    ColorSlot.FACEHAIR,
    ColorSlot.HAT,
    ColorSlot.GLASSES,
    ColorSlot.FEET,
)


def serialize_template(template: PlayerTemplate) -> Dict[str, Any]:
    """
    Encode one template as a version 4 record.

    Empty head part slots are left out, which reads back as "no accessory".
    """
    node: Dict[str, Any] = {
        "Name": template.name,
        "Face": template.character_class_name,
    }
    for part in HeadPart:
        value = template.head_parts.get(part)
        if value is not None:
            node[part.type_label] = value
    for slot in COLOR_WRITE_ORDER:
        node[slot.value] = template.colors.get(slot).to_hex()
    return node


def serialize_templates(templates: Iterable[PlayerTemplate]) -> Dict[str, Any]:
    """Encode a collection as a complete player templates document."""
    records: List[Dict[str, Any]] = [serialize_template(t) for t in templates]
    return {
        "Version": CURRENT_TEMPLATE_VERSION,
        "PlayerTemplates": records,
    }


def dumps_templates(templates: Iterable[PlayerTemplate]) -> str:
    """
    Encode a collection as player templates file text.

    Key order is fixed so saved files diff cleanly.
    """
    return json.dumps(serialize_templates(templates), indent=2, ensure_ascii=False) + "\n"
