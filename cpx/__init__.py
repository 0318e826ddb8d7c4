"""cpx - copy one file, transform its content, keep its metadata."""

from importlib.metadata import distribution

from .core.errors import ConfigError, CpxError, FileSystemError, PathNotFoundError
from .core.file_operations import (
    FileCopier,
    copy_file,
    copy_file_async,
    create_file_copier,
)
from .models import CopyOptions, CopyOutcome, CopyRequest, CopyResult, FileStat


__version__ = distribution(__package__ or "cpx").version

__all__ = [
    "ConfigError",
    "CopyOptions",
    "CopyOutcome",
    "CopyRequest",
    "CopyResult",
    "CpxError",
    "FileCopier",
    "FileStat",
    "FileSystemError",
    "PathNotFoundError",
    "__version__",
    "copy_file",
    "copy_file_async",
    "create_file_copier",
]
