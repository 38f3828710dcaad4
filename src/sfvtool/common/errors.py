"""Base error definitions for sfvtool."""

from typing import Any, Dict


class SfvToolError(Exception):
    """Base exception for all sfvtool errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(SfvToolError):
    """Configuration is invalid or cannot be loaded."""
    pass


class FileProcessingError(SfvToolError):
    """Base exception for per-file errors."""
    pass


class NotFoundError(FileProcessingError):
    """File is absent or is not a regular file."""
    pass


class ReadError(FileProcessingError):
    """File exists but could not be opened or read to the end."""
    pass
