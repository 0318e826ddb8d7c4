"""Tests for FileSystemAdapter implementation."""

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from cpx.adapters.file_adapter import FileSystemAdapter, create_file_adapter
from cpx.core.errors import FileSystemError, PathNotFoundError
from cpx.models import FileStat
from cpx.protocols import FileAdapterProtocol


class TestFileSystemAdapter:
    """Test FileSystemAdapter class."""

    def test_create_file_adapter(self):
        """Test factory returns an implementation of the protocol."""
        adapter = create_file_adapter()

        assert isinstance(adapter, FileSystemAdapter)
        assert isinstance(adapter, FileAdapterProtocol)

    def test_stat_file(self, tmp_path, file_adapter):
        """Test stat of a regular file."""
        path = tmp_path / "file.txt"
        path.write_bytes(b"abc")
        path.chmod(0o640)

        result = file_adapter.stat(path)

        assert isinstance(result, FileStat)
        assert result.is_directory is False
        assert result.permissions == 0o640
        assert result.modified_time_ns == path.stat().st_mtime_ns

    def test_stat_directory(self, tmp_path, file_adapter):
        """Test stat of a directory."""
        assert file_adapter.stat(tmp_path).is_directory is True

    def test_stat_missing_path(self, tmp_path, file_adapter):
        """Test stat of a missing path raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError) as exc_info:
            file_adapter.stat(tmp_path / "missing")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert exc_info.value.operation == "stat"

    def test_stat_permission_error(self, file_adapter):
        """Test other stat failures raise plain FileSystemError."""
        with (
            patch("os.stat", side_effect=PermissionError(13, "Permission denied")),
            pytest.raises(FileSystemError) as exc_info,
        ):
            file_adapter.stat(Path("/restricted/file.txt"))

        assert not isinstance(exc_info.value, PathNotFoundError)
        assert str(exc_info.value) == (
            "File operation 'stat' failed on '/restricted/file.txt': Permission denied"
        )

    def test_exists(self, tmp_path, file_adapter):
        """Test exists for present and missing paths."""
        (tmp_path / "here").write_bytes(b"")

        assert file_adapter.exists(tmp_path / "here") is True
        assert file_adapter.exists(tmp_path / "gone") is False

    def test_exists_below_a_file(self, tmp_path, file_adapter):
        """Test a path whose parent is a regular file does not exist."""
        (tmp_path / "file").write_bytes(b"")

        assert file_adapter.exists(tmp_path / "file" / "child") is False

    def test_exists_permission_error(self, file_adapter):
        """Test failures other than a missing path raise FileSystemError."""
        with (
            patch(
                "pathlib.Path.stat",
                side_effect=PermissionError(13, "Permission denied"),
            ),
            pytest.raises(
                FileSystemError,
                match="File operation 'exists' failed on '/locked/file.txt': Permission denied",
            ) as exc_info,
        ):
            file_adapter.exists(Path("/locked/file.txt"))

        assert not isinstance(exc_info.value, PathNotFoundError)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_read_write_bytes(self, tmp_path, file_adapter):
        """Test written bytes are read back unchanged."""
        path = tmp_path / "data.bin"
        content = bytes(range(256))

        file_adapter.write_bytes(path, content)

        assert file_adapter.read_bytes(path) == content

    def test_write_bytes_truncates(self, tmp_path, file_adapter):
        """Test writing replaces longer existing content."""
        path = tmp_path / "data.bin"
        path.write_bytes(b"0123456789")

        file_adapter.write_bytes(path, b"ab")

        assert path.read_bytes() == b"ab"

    def test_read_bytes_file_not_found(self, file_adapter):
        """Test read_bytes of a missing file."""
        with (
            patch(
                "pathlib.Path.read_bytes",
                side_effect=FileNotFoundError("File not found"),
            ),
            pytest.raises(
                PathNotFoundError,
                match="File operation 'read_bytes' failed on '/nonexistent/file.txt': File not found",
            ),
        ):
            file_adapter.read_bytes(Path("/nonexistent/file.txt"))

    def test_write_bytes_permission_error(self, file_adapter):
        """Test write_bytes wraps permission errors."""
        with (
            patch(
                "pathlib.Path.write_bytes",
                side_effect=PermissionError("Permission denied"),
            ),
            pytest.raises(
                FileSystemError,
                match="File operation 'write_bytes' failed on '/restricted/file.txt': Permission denied",
            ) as exc_info,
        ):
            file_adapter.write_bytes(Path("/restricted/file.txt"), b"abc")

        assert exc_info.value.context["content_length"] == 3

    def test_write_bytes_into_directory(self, tmp_path, file_adapter):
        """Test writing onto a directory path fails."""
        with pytest.raises(FileSystemError) as exc_info:
            file_adapter.write_bytes(tmp_path, b"abc")

        assert exc_info.value.operation == "write_bytes"

    def test_ensure_directory(self, tmp_path, file_adapter):
        """Test nested directories are created and existing ones accepted."""
        target = tmp_path / "a" / "b" / "c"

        file_adapter.ensure_directory(target)
        file_adapter.ensure_directory(target)

        assert target.is_dir()

    def test_ensure_directory_permission_error(self, file_adapter):
        """Test ensure_directory wraps permission errors."""
        with (
            patch("pathlib.Path.mkdir", side_effect=PermissionError("Permission denied")),
            pytest.raises(FileSystemError, match="'ensure_directory'"),
        ):
            file_adapter.ensure_directory(Path("/restricted/dir"))

    def test_set_mode_passes_bits_to_chmod(self, file_adapter):
        """Test the given permission bits are passed to chmod unchanged."""
        with patch("os.chmod") as mock_chmod:
            file_adapter.set_mode(Path("/some/file"), 0o755)

        mock_chmod.assert_called_once_with(Path("/some/file"), 0o755)

    def test_set_mode(self, tmp_path, file_adapter):
        """Test mode is applied on disk."""
        path = tmp_path / "file"
        path.write_bytes(b"")

        file_adapter.set_mode(path, 0o600)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_set_owner_to_current_owner(self, tmp_path, file_adapter):
        """Test chown to the current owner succeeds."""
        path = tmp_path / "file"
        path.write_bytes(b"")
        before = path.stat()

        file_adapter.set_owner(path, before.st_uid, before.st_gid)

        assert (path.stat().st_uid, path.stat().st_gid) == (before.st_uid, before.st_gid)

    def test_set_owner_error(self, file_adapter):
        """Test chown failures are wrapped with uid/gid context."""
        with (
            patch("os.chown", side_effect=PermissionError(1, "Operation not permitted")),
            pytest.raises(FileSystemError) as exc_info,
        ):
            file_adapter.set_owner(Path("/some/file"), 0, 0)

        assert exc_info.value.context["uid"] == 0
        assert exc_info.value.context["errno"] == 1

    def test_set_times(self, tmp_path, file_adapter):
        """Test timestamps are applied without rounding to seconds."""
        path = tmp_path / "file"
        path.write_bytes(b"")

        file_adapter.set_times(path, 1_000_000_000_000_001_000, 1_100_000_000_000_002_000)

        result = os.stat(path)
        assert result.st_atime_ns == 1_000_000_000_000_001_000
        assert result.st_mtime_ns == 1_100_000_000_000_002_000

    def test_set_times_missing_path(self, tmp_path, file_adapter):
        """Test set_times on a missing path raises PathNotFoundError."""
        with pytest.raises(PathNotFoundError):
            file_adapter.set_times(tmp_path / "missing", 0, 0)
