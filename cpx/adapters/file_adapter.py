"""File adapter over the local filesystem."""

import logging
import os
from pathlib import Path

from cpx.models import FileStat
from cpx.protocols.file_adapter_protocol import FileAdapterProtocol
from cpx.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation."""

    def stat(self, path: Path) -> FileStat:
        """Read metadata of a path."""
        try:
            result = os.stat(path)
        except OSError as e:
            error = create_file_error(path, "stat", e)
            if isinstance(e, FileNotFoundError):
                logger.debug("Path does not exist: %s", path)
            else:
                logger.error("Error reading metadata of %s: %s", path, e)
            raise error from e
        return FileStat.from_stat_result(result)

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        try:
            path.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            error = create_file_error(path, "exists", e)
            logger.error("Error checking existence of %s: %s", path, e)
            raise error from e
        return True

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file."""
        try:
            logger.debug("Reading file: %s", path)
            content = path.read_bytes()
            logger.debug("Successfully read %d bytes from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write content to a file, creating or truncating it."""
        try:
            logger.debug("Writing file: %s", path)
            path.write_bytes(content)
            logger.debug("Successfully wrote %d bytes to %s", len(content), path)
        except PermissionError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Permission denied writing file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Error writing file %s: %s", path, e)
            raise error from e

    def ensure_directory(self, path: Path) -> None:
        """Create a directory and any missing ancestors."""
        try:
            logger.debug("Ensuring directory: %s", path)
            path.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            error = create_file_error(path, "ensure_directory", e)
            logger.error("Permission denied creating directory: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "ensure_directory", e)
            logger.error("Error creating directory %s: %s", path, e)
            raise error from e

    def set_mode(self, path: Path, mode: int) -> None:
        """Set permission bits of a path."""
        try:
            logger.debug("Setting mode of %s to %o", path, mode)
            os.chmod(path, mode)
        except OSError as e:
            error = create_file_error(path, "set_mode", e, {"mode": oct(mode)})
            logger.error("Error setting mode of %s: %s", path, e)
            raise error from e

    def set_owner(self, path: Path, uid: int, gid: int) -> None:
        """Set owner and group of a path."""
        try:
            logger.debug("Setting owner of %s to %d:%d", path, uid, gid)
            os.chown(path, uid, gid)
        except OSError as e:
            error = create_file_error(path, "set_owner", e, {"uid": uid, "gid": gid})
            logger.error("Error setting owner of %s: %s", path, e)
            raise error from e

    def set_times(
        self, path: Path, accessed_time_ns: int, modified_time_ns: int
    ) -> None:
        """Set access and modification times of a path."""
        try:
            logger.debug("Setting timestamps of %s", path)
            os.utime(path, ns=(accessed_time_ns, modified_time_ns))
        except OSError as e:
            error = create_file_error(
                path,
                "set_times",
                e,
                {
                    "accessed_time_ns": accessed_time_ns,
                    "modified_time_ns": modified_time_ns,
                },
            )
            logger.error("Error setting timestamps of %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileAdapterProtocol:
    """Create a file adapter with default implementation."""
    return FileSystemAdapter()
