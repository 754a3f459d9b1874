"""Custom exceptions for the generation engine and table store"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ErrorContext:
    """Structured context for errors"""

    column_name: Optional[str] = None
    type_name: Optional[str] = None
    argument: Optional[str] = None
    file_path: Optional[str] = None
    operation: Optional[str] = None
    additional_info: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format context for error messages"""
        parts = []
        if self.column_name:
            parts.append(f"column={self.column_name}")
        if self.type_name:
            parts.append(f"type={self.type_name}")
        if self.argument:
            parts.append(f"argument={self.argument}")
        if self.file_path:
            parts.append(f"file={self.file_path}")
        if self.operation:
            parts.append(f"operation={self.operation}")
        for key, value in self.additional_info.items():
            parts.append(f"{key}={value}")
        return ", ".join(parts) if parts else "no context"


class FakeFrameError(Exception):
    """Base exception for all fakeframe errors"""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        error_code: Optional[str] = None,
    ):
        self.message = message
        self.context = context or ErrorContext()
        self.error_code = error_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context"""
        parts = [self.message]
        if self.context and str(self.context) != "no context":
            parts.append(f"[{self.context}]")
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)


# =============================================================================
# Schema Errors
# =============================================================================


class SchemaError(FakeFrameError):
    """Raised when the schema document is malformed or missing"""

    pass


class UnsupportedTypeError(FakeFrameError):
    """Raised when a column type name is unknown or disabled"""

    def __init__(self, type_name: str, context: Optional[ErrorContext] = None):
        self.type_name = type_name
        context = context or ErrorContext()
        context.type_name = type_name
        super().__init__(f"Unsupported type: {type_name}", context, "UNSUPPORTED_TYPE")


# =============================================================================
# Argument Errors
# =============================================================================


class ArgumentError(FakeFrameError):
    """Raised when a column argument is missing or invalid"""

    pass


class MissingArgumentError(ArgumentError):
    """Raised when a required argument is absent or of the wrong kind"""

    pass


class InvalidArgumentValueError(ArgumentError):
    """Raised when an argument value cannot be parsed into its domain"""

    pass


class InvalidRangeError(ArgumentError):
    """Raised when a range has start greater than end"""

    pass


class InvalidTimestampError(ArgumentError):
    """Raised when a timestamp argument is absent or not RFC-3339"""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FakeFrameError):
    """Raised when configuration is invalid"""

    pass


# =============================================================================
# Table Store Errors
# =============================================================================


class TableIOError(FakeFrameError):
    """Base error for reading and writing tables"""

    pass


class TableReadError(TableIOError):
    """Raised when a table file cannot be read"""

    pass


class TableWriteError(TableIOError):
    """Raised when a table cannot be written"""

    pass


class SchemaMismatchError(TableReadError):
    """Raised when partition files do not share one schema"""

    pass


class UnsupportedFormatError(TableIOError):
    """Raised when a file format name is not supported"""

    def __init__(self, file_format: str, context: Optional[ErrorContext] = None):
        self.file_format = file_format
        super().__init__(
            f"Unsupported file format: {file_format}", context, "UNSUPPORTED_FORMAT"
        )
