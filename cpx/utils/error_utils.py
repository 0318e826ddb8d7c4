"""Helpers for building consistent cpx errors."""

from pathlib import Path
from typing import Any

from cpx.core.errors import FileSystemError, PathNotFoundError


def create_file_error(
    path: Path | str,
    operation: str,
    error: Exception,
    details: dict[str, Any] | None = None,
) -> FileSystemError:
    """Wrap a low-level exception raised by a filesystem call.

    Args:
        path: Path the operation was performed on
        operation: Name of the failed operation (e.g. ``read_bytes``)
        error: Original exception
        details: Extra context to attach to the error

    Returns:
        ``PathNotFoundError`` for missing paths, ``FileSystemError`` otherwise
    """
    error_cls = (
        PathNotFoundError if isinstance(error, FileNotFoundError) else FileSystemError
    )
    reason = error.strerror if isinstance(error, OSError) and error.strerror else error
    context: dict[str, Any] = {"error_type": type(error).__name__}
    if isinstance(error, OSError) and error.errno is not None:
        context["errno"] = error.errno
    if details:
        context.update(details)

    return error_cls(
        f"File operation '{operation}' failed on '{path}': {reason}",
        path=path,
        operation=operation,
        context=context,
    )
