"""
Player template file service.

Loads the built-in templates from the player templates file and saves them
back. Structural failures are logged and returned as failed ServiceResults;
the store is only touched once a load has fully succeeded, and a save only
replaces the file once the new text is completely written.

Usage:
    from presets.src.services.player_template_service import (
        load_player_templates,
        save_player_templates,
    )

    store = PlayerTemplates()
    result = load_player_templates(store)
    if not result.success:
        # Store is unchanged, default appearances apply
        ...
"""

import contextlib
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from presets.src.core.config import get_player_templates_path
from presets.src.core.exceptions import AccessError, FormatError, SchemaError
from presets.src.core.logging_config import get_logger
from presets.src.schemas.service_results import (
    ServiceErrorCodes,
    ServiceResult,
    TemplateLoadResult,
)
from presets.src.services.template_loader import (
    VersionedTemplateLoader,
    load_player_templates_document,
)
from presets.src.services.template_serializer import dumps_templates
from presets.src.services.template_store import PlayerTemplates

logger = get_logger(__name__)


def read_player_templates_file(path: Path) -> Dict[str, Any]:
    """
    Read and parse a player templates file.

    Raises:
        AccessError: If the file cannot be read
        FormatError: If the content is not UTF-8 JSON, nests too deeply,
            or is not a JSON object
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise AccessError(f"Cannot read player templates '{path}': {e}") from e

    try:
        document = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        raise FormatError(f"Cannot parse player templates '{path}': {e}") from e

    if not isinstance(document, dict):
        raise FormatError(f"Player templates '{path}' is not a JSON object")
    return document


def write_player_templates_file(path: Path, text: str) -> None:
    """
    Write file text atomically through a sibling temp file.

    Raises:
        AccessError: If the file cannot be written; no partial file is left
    """
    temp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(temp_path, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            temp_path.unlink()
        raise AccessError(f"Cannot write player templates '{path}': {e}") from e


def load_player_templates(
    store: PlayerTemplates,
    path: Optional[Path] = None,
    loader: Optional[VersionedTemplateLoader] = None,
) -> TemplateLoadResult[int]:
    """
    Load the built-in templates of a store from file.

    On success the store's built-in collection is replaced; on any structural
    failure it is left exactly as it was.

    Args:
        store: Store to populate
        path: File to read, defaults to the configured player templates path
        loader: Record loader, defaults to a standard VersionedTemplateLoader

    Returns:
        TemplateLoadResult with the number of templates loaded
    """
    path = Path(path) if path is not None else get_player_templates_path()

    try:
        document = read_player_templates_file(path)
        loaded = load_player_templates_document(document, loader)
    except AccessError as e:
        logger.error("Loading player templates failed", extra={"path": str(path), "error": str(e)})
        return TemplateLoadResult.failure(str(e), ServiceErrorCodes.ACCESS_ERROR)
    except FormatError as e:
        logger.error("Parsing player templates failed", extra={"path": str(path), "error": str(e)})
        return TemplateLoadResult.failure(str(e), ServiceErrorCodes.FORMAT_ERROR)
    except SchemaError as e:
        logger.error("Unknown player templates format", extra={"path": str(path), "error": str(e)})
        return TemplateLoadResult.failure(str(e), ServiceErrorCodes.SCHEMA_ERROR)

    store.replace_builtin(loaded.templates)

    logger.info(
        "Player templates loaded",
        extra={
            "path": str(path),
            "version": loaded.version,
            "template_count": len(loaded.templates),
            "skipped_records": loaded.skipped_records,
        },
    )
    return TemplateLoadResult.success_with_templates(
        len(loaded.templates), loaded.skipped_records
    )


def save_player_templates(
    store: PlayerTemplates,
    path: Optional[Path] = None,
) -> ServiceResult[Path]:
    """
    Save the built-in templates of a store at the current schema version.

    Custom templates are runtime-only and are not written.

    Args:
        store: Store to save
        path: File to write, defaults to the configured player templates path

    Returns:
        ServiceResult with the written path
    """
    path = Path(path) if path is not None else get_player_templates_path()

    # Build the whole text before touching the file
    text = dumps_templates(store.builtin)

    try:
        write_player_templates_file(path, text)
    except AccessError as e:
        logger.error("Saving player templates failed", extra={"path": str(path), "error": str(e)})
        return ServiceResult.failure(str(e), ServiceErrorCodes.ACCESS_ERROR)

    logger.info(
        "Player templates saved",
        extra={"path": str(path), "template_count": len(store.builtin)},
    )
    return ServiceResult.success_with_data(path, "Player templates saved")
