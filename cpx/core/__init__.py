from .errors import ConfigError, CpxError, FileSystemError, PathNotFoundError
from .logging import get_logger, setup_logging


__all__ = [
    "ConfigError",
    "CpxError",
    "FileSystemError",
    "PathNotFoundError",
    "get_logger",
    "setup_logging",
]
