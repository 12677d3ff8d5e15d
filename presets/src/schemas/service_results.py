"""
Structured service result types for clean error handling.

Player template services return these instead of raising, so a failed load or
save is reported to the caller without ever stopping the game.
"""

from dataclasses import dataclass
from typing import Optional, Generic, TypeVar

T = TypeVar('T')


@dataclass
class ServiceResult(Generic[T]):
    """
    Generic service result with structured error information.

    Structural failures carry an error_code from ServiceErrorCodes.
    """
    success: bool
    data: Optional[T] = None
    message: str = ""
    error_code: Optional[str] = None

    @classmethod
    def success_with_data(cls, data: T, message: str = "Operation successful") -> 'ServiceResult[T]':
        """Create successful result with data."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(cls, message: str, error_code: Optional[str] = None) -> 'ServiceResult[T]':
        """Create failure result with error information."""
        return cls(success=False, data=None, message=message, error_code=error_code)


@dataclass
class TemplateLoadResult(ServiceResult[T]):
    """Load result extensions."""
    skipped_records: int = 0

    @classmethod
    def success_with_templates(
        cls,
        loaded: T,
        skipped_records: int,
        message: str = "Player templates loaded"
    ) -> 'TemplateLoadResult[T]':
        """Create successful result with load counts."""
        return cls(
            success=True,
            data=loaded,
            message=message,
            skipped_records=skipped_records
        )


# Error codes for consistent caller-side error handling
class ServiceErrorCodes:
    """Standardized error codes for template services."""

    ACCESS_ERROR = "ACCESS_ERROR"
    FORMAT_ERROR = "FORMAT_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
