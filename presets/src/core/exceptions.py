"""
Errors raised while loading and saving player templates.

Structural errors (AccessError, FormatError, SchemaError) abort a whole load
or save. RecordError only concerns a single template and is recovered by
skipping that record.
"""


class PlayerTemplateError(Exception):
    """Base error for the player template system."""


class AccessError(PlayerTemplateError):
    """Raised when the templates file cannot be opened for reading or writing."""


class FormatError(PlayerTemplateError):
    """Raised when the templates file cannot be parsed into a document."""


class SchemaError(PlayerTemplateError):
    """Raised when a parsed document is not a player templates document the loader supports."""


class RecordError(PlayerTemplateError):
    """Raised when a single template record is malformed."""
