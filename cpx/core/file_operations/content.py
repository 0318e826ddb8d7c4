"""Content copy step: exclusion, unchanged-content skip and transforms."""

import logging
import re
from collections.abc import Sequence
from functools import reduce
from pathlib import Path

from cpx.models import CopyOutcome, Transform
from cpx.protocols import FileAdapterProtocol


logger = logging.getLogger(__name__)


def apply_transforms(content: bytes, transforms: Sequence[Transform]) -> bytes:
    """Run ``content`` through each transform in order."""
    return reduce(lambda data, transform: transform(data), transforms, content)


class ContentCopier:
    """Copies the bytes of one regular file to a destination path."""

    def __init__(
        self,
        file_adapter: FileAdapterProtocol,
        exclude: re.Pattern[str] | None = None,
    ):
        """Initialize the content copier.

        Args:
            file_adapter: Filesystem capability
            exclude: Source paths matching this pattern are never copied
        """
        self.file_adapter = file_adapter
        self.exclude = exclude

    def is_excluded(self, source: Path) -> bool:
        """Return True if the exclusion pattern matches ``source``."""
        return self.exclude is not None and self.exclude.search(str(source)) is not None

    def copy_content(
        self,
        source: Path,
        destination: Path,
        transforms: Sequence[Transform] = (),
    ) -> tuple[CopyOutcome, int]:
        """Copy file content, transforming it on the way.

        The unchanged-content check compares the untransformed source bytes
        with the destination, so a destination produced by a non-identity
        pipeline is rewritten on every call, and a destination that happens
        to equal the raw source is never transformed.

        Args:
            source: Regular file to read
            destination: File to create or overwrite
            transforms: Content transforms applied in order

        Returns:
            The outcome and the number of bytes written

        Raises:
            FileSystemError: If reading or writing fails
        """
        if self.is_excluded(source):
            logger.debug("Skipping excluded source: %s", source)
            return CopyOutcome.SKIPPED_EXCLUDED, 0

        content = self.file_adapter.read_bytes(source)

        if self.file_adapter.exists(destination):
            if self.file_adapter.read_bytes(destination) == content:
                logger.debug("Content unchanged, skipping write: %s", destination)
                return CopyOutcome.SKIPPED_UNCHANGED, 0

        content = apply_transforms(content, transforms)
        self.file_adapter.write_bytes(destination, content)
        return CopyOutcome.COPIED, len(content)
