"""Error types raised by cpx."""

from pathlib import Path
from typing import Any


class CpxError(Exception):
    """Base error for all cpx failures.

    Carries a ``context`` dictionary with diagnostic details about the
    failed operation.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(CpxError):
    """Invalid configuration or unresolvable transform."""


class FileSystemError(CpxError):
    """A filesystem capability call failed."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.path = Path(path) if path is not None else None
        self.operation = operation


class PathNotFoundError(FileSystemError):
    """The path a filesystem call was made on does not exist."""
