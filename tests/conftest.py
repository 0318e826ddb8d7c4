"""Core test fixtures for the cpx project."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from cpx.adapters import FileSystemAdapter
from cpx.config import CpxSettings, get_settings
from cpx.models import FileStat
from cpx.protocols import FileAdapterProtocol


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Keep CPX_* variables and .env files of the host out of every test."""
    for key in list(os.environ):
        if key.startswith("CPX_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def file_adapter() -> FileSystemAdapter:
    """Real filesystem adapter."""
    return FileSystemAdapter()


@pytest.fixture
def mock_file_adapter() -> Mock:
    """Create a mock file adapter for testing."""
    return Mock(spec=FileAdapterProtocol)


@pytest.fixture
def settings() -> CpxSettings:
    """Settings without an exclusion pattern."""
    return CpxSettings()


@pytest.fixture
def make_stat() -> Callable[..., FileStat]:
    """Factory for FileStat snapshots with sensible defaults."""

    def _make_stat(
        is_directory: bool = False,
        mode: int = 0o100644,
        uid: int = 1000,
        gid: int = 1000,
        modified_time_ns: int = 2_000_000_000_000_000_000,
        accessed_time_ns: int = 2_000_000_000_000_000_000,
    ) -> FileStat:
        return FileStat(
            is_directory=is_directory,
            mode=mode,
            uid=uid,
            gid=gid,
            modified_time_ns=modified_time_ns,
            accessed_time_ns=accessed_time_ns,
        )

    return _make_stat


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A source file containing ``hello``."""
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    path = src_dir / "a.txt"
    path.write_bytes(b"hello")
    return path
