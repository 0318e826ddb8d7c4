"""Protocol definition for the filesystem capability used by the copier."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from cpx.models import FileStat


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for the filesystem calls a copy operation needs."""

    def stat(self, path: Path) -> FileStat:
        """Read metadata of a path, following symlinks.

        Args:
            path: Path to inspect

        Returns:
            Metadata snapshot

        Raises:
            PathNotFoundError: If the path does not exist
            FileSystemError: If metadata cannot be read
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check

        Returns:
            True if path exists, False otherwise

        Raises:
            FileSystemError: If existence cannot be determined
        """
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the full content of a file.

        Args:
            path: Path to the file to read

        Returns:
            File content

        Raises:
            FileSystemError: If the file cannot be read
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write content to a file, creating or truncating it.

        Args:
            path: Path to the file to write
            content: Bytes to write

        Raises:
            FileSystemError: If the file cannot be written
        """
        ...

    def ensure_directory(self, path: Path) -> None:
        """Create a directory and any missing ancestors.

        Args:
            path: Directory path to create

        Raises:
            FileSystemError: If the directory cannot be created
        """
        ...

    def set_mode(self, path: Path, mode: int) -> None:
        """Set permission bits of a path.

        Args:
            path: Path to change
            mode: Permission bits only, without file type bits

        Raises:
            FileSystemError: If the mode cannot be changed
        """
        ...

    def set_owner(self, path: Path, uid: int, gid: int) -> None:
        """Set owner and group of a path.

        Raises:
            FileSystemError: If ownership cannot be changed
        """
        ...

    def set_times(self, path: Path, accessed_time_ns: int, modified_time_ns: int) -> None:
        """Set access and modification times of a path, in nanoseconds.

        Raises:
            FileSystemError: If the timestamps cannot be changed
        """
        ...
