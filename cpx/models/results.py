"""Result models for copy operations."""

from enum import Enum
from pathlib import Path

from .base import CpxBaseModel


class CopyOutcome(str, Enum):
    """What a successful copy actually did."""

    COPIED = "copied"
    DIRECTORY_CREATED = "directory_created"
    SKIPPED_EXCLUDED = "skipped_excluded"
    SKIPPED_NEWER = "skipped_newer"
    SKIPPED_UNCHANGED = "skipped_unchanged"

    @property
    def skipped(self) -> bool:
        """True for outcomes where nothing was written or created."""
        return self in (
            CopyOutcome.SKIPPED_EXCLUDED,
            CopyOutcome.SKIPPED_NEWER,
            CopyOutcome.SKIPPED_UNCHANGED,
        )


class CopyResult(CpxBaseModel):
    """Result of a successful copy operation."""

    source: Path
    destination: Path
    outcome: CopyOutcome
    bytes_written: int = 0

    @property
    def wrote_content(self) -> bool:
        """True if destination content was written."""
        return self.outcome is CopyOutcome.COPIED
