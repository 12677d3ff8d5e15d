"""
Character appearance types shared by the template loader, store and bridge.

## Components

- **enums**: HeadPart and ColorSlot, the closed slot enumerations
- **colors**: Color and the nine-slot CharacterColors record
- **head_parts**: HeadParts plus legacy face/hair decomposition
- **palette**: Version 1 palette index conversion
- **template**: PlayerTemplate, the immutable preset record
- **character**: CharacterClass, Character and PlayerData

## Quick Start

```python
from common.src.appearance import (
    CharacterColors,
    Color,
    HeadParts,
    PlayerTemplate,
)

template = PlayerTemplate(
    name="Ice",
    character_class_name="Jones",
    colors=CharacterColors.uniform(Color.from_hex("#336699")),
    head_parts=HeadParts(glasses="shades"),
)
```
"""

# =============================================================================
# Enums
# =============================================================================

from .enums import (
    HeadPart,
    ColorSlot,
    LEGACY_PALETTE_SLOTS,
    HAIR_DERIVED_SLOTS,
)

# =============================================================================
# Value types
# =============================================================================

from .colors import (
    Color,
    CharacterColors,
    COLOR_UNSET,
)

from .head_parts import (
    HeadParts,
    LEGACY_FACES,
    LEGACY_HAIR_PARTS,
    decompose_legacy_face,
    legacy_hair_to_head_parts,
)

from .palette import (
    LegacyShade,
    LEGACY_SHADE_COLORS,
    legacy_shade_color,
    convert_legacy_colors,
)

# =============================================================================
# Records
# =============================================================================

from .template import (
    PlayerTemplate,
    truncate_player_name,
)

from .character import (
    CharacterClass,
    Character,
    PlayerData,
)

__all__ = [
    # Enums
    "HeadPart",
    "ColorSlot",
    "LEGACY_PALETTE_SLOTS",
    "HAIR_DERIVED_SLOTS",
    # Colors
    "Color",
    "CharacterColors",
    "COLOR_UNSET",
    # Head parts
    "HeadParts",
    "LEGACY_FACES",
    "LEGACY_HAIR_PARTS",
    "decompose_legacy_face",
    "legacy_hair_to_head_parts",
    # Palette
    "LegacyShade",
    "LEGACY_SHADE_COLORS",
    "legacy_shade_color",
    "convert_legacy_colors",
    # Records
    "PlayerTemplate",
    "truncate_player_name",
    "CharacterClass",
    "Character",
    "PlayerData",
]
