"""Filesystem metadata snapshot."""

import os
import stat

from pydantic import Field

from .base import CpxBaseModel


class FileStat(CpxBaseModel):
    """Metadata of a filesystem entry at the time it was read.

    Timestamps are stored in integer nanoseconds so they can be written back
    with ``os.utime(ns=...)`` without losing precision.
    """

    is_directory: bool
    mode: int = Field(description="Full st_mode value, including file type bits")
    uid: int
    gid: int
    modified_time_ns: int
    accessed_time_ns: int

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "FileStat":
        """Build a snapshot from an ``os.stat`` result."""
        return cls(
            is_directory=stat.S_ISDIR(result.st_mode),
            mode=result.st_mode,
            uid=result.st_uid,
            gid=result.st_gid,
            modified_time_ns=result.st_mtime_ns,
            accessed_time_ns=result.st_atime_ns,
        )

    @property
    def permissions(self) -> int:
        """Permission bits only (what ``chmod`` accepts)."""
        return stat.S_IMODE(self.mode)

    def is_newer_than(self, other: "FileStat") -> bool:
        """Return True if this entry was modified strictly after ``other``."""
        return self.modified_time_ns > other.modified_time_ns
