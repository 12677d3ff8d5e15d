"""
Versioned player template loader.

Turns records written under any supported schema version into normalized
PlayerTemplates. Resolution always runs class -> head parts -> colors, since
the head part rules may rewrite the class name and the color defaults build
on one another.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence

from pydantic import ValidationError

from common.src.appearance import PlayerTemplate
from common.src.constants import CURRENT_TEMPLATE_VERSION
from presets.src.core.exceptions import RecordError, SchemaError
from presets.src.core.logging_config import get_logger
from presets.src.schemas.player_template import (
    PlayerTemplateRecord,
    PlayerTemplatesDocument,
)
from presets.src.services.template_resolvers import (
    CLASS_RESOLVER,
    COLOR_RESOLVER,
    HEAD_PART_RESOLVER,
    ResolutionContext,
    RuleResolver,
)

logger = get_logger(__name__)


SUPPORTED_VERSIONS = range(1, CURRENT_TEMPLATE_VERSION + 1)


@dataclass
class LoadedTemplates:
    """Outcome of loading a whole document."""
    version: int
    templates: List[PlayerTemplate] = field(default_factory=list)
    skipped_records: int = 0


class VersionedTemplateLoader:
    """
    Normalizes single template records.

    Resolvers run in the order given; the default order is the one every
    schema version relies on.
    """

    def __init__(self, resolvers: Optional[Sequence[RuleResolver]] = None):
        if resolvers is None:
            resolvers = (CLASS_RESOLVER, HEAD_PART_RESOLVER, COLOR_RESOLVER)
        self.resolvers = tuple(resolvers)

    def load(self, record: Any, version: int) -> PlayerTemplate:
        """
        Normalize one record.

        Args:
            record: Raw record object from the "PlayerTemplates" list
            version: Schema version of the document the record came from

        Returns:
            Fully populated PlayerTemplate

        Raises:
            RecordError: If the record has no valid "Name" or malformed header fields
            SchemaError: If the version has no resolution rules
        """
        if version not in SUPPORTED_VERSIONS:
            raise SchemaError(f"Unsupported player templates version {version}")

        try:
            parsed = PlayerTemplateRecord.model_validate(record)
        except ValidationError as e:
            raise RecordError(f"Malformed player template record: {e}") from e

        context = ResolutionContext(fields=parsed.present_fields(), version=version)
        for resolver in self.resolvers:
            resolver.resolve(context)

        template = PlayerTemplate(
            name=parsed.name,
            character_class_name=context.character_class_name,
            colors=context.resolved_colors(),
            head_parts=context.head_parts,
        )
        logger.debug(
            "Loaded player template %s (%s)",
            template.name,
            template.character_class_name,
            extra={"version": version},
        )
        return template

    def load_into(self, templates: List[PlayerTemplate], record: Any, version: int) -> PlayerTemplate:
        """Normalize one record and append it to a collection."""
        template = self.load(record, version)
        templates.append(template)
        return template


def load_player_templates_document(
    document: Mapping[str, Any],
    loader: Optional[VersionedTemplateLoader] = None,
) -> LoadedTemplates:
    """
    Load every record of a parsed player templates document.

    Records that fail with RecordError are logged and skipped; the remaining
    records still load.

    Args:
        document: Parsed document with "Version" and "PlayerTemplates"
        loader: Loader to use, defaults to a standard VersionedTemplateLoader

    Returns:
        LoadedTemplates with templates in file order

    Raises:
        SchemaError: If "PlayerTemplates" is missing or the version is invalid
            or newer than CURRENT_TEMPLATE_VERSION
    """
    loader = loader or VersionedTemplateLoader()

    try:
        parsed = PlayerTemplatesDocument.model_validate(document)
    except ValidationError as e:
        raise SchemaError(f"Unknown player templates format: {e}") from e

    if parsed.version not in SUPPORTED_VERSIONS:
        raise SchemaError(
            f"Player templates version {parsed.version} is newer than "
            f"supported version {CURRENT_TEMPLATE_VERSION}"
        )

    result = LoadedTemplates(version=parsed.version)
    for index, record in enumerate(parsed.player_templates):
        try:
            loader.load_into(result.templates, record, parsed.version)
        except RecordError as e:
            result.skipped_records += 1
            logger.warning(
                "Skipping player template record",
                extra={"index": index, "error": str(e)},
            )

    return result
