"""Single-file copy service."""

import asyncio
import logging
from pathlib import Path

from cpx.adapters import create_file_adapter
from cpx.config import CpxSettings, get_settings
from cpx.core.errors import PathNotFoundError
from cpx.models import CopyOptions, CopyOutcome, CopyRequest, CopyResult, FileStat
from cpx.protocols import FileAdapterProtocol

from .content import ContentCopier


class FileCopier:
    """Copies one source path to one destination path.

    Each call is a strict sequence of filesystem calls: read source metadata,
    optionally check whether the destination is newer, copy the directory or
    content, then sync mode and, when asked, ownership and timestamps. There
    is no locking; concurrent copies to the same destination are racy.
    """

    def __init__(
        self,
        file_adapter: FileAdapterProtocol,
        content_copier: ContentCopier | None = None,
    ):
        """Initialize the file copier.

        Args:
            file_adapter: Filesystem capability
            content_copier: Content step, defaults to one without exclusion
        """
        self.file_adapter = file_adapter
        self.content_copier = content_copier or ContentCopier(file_adapter)
        self.logger = logging.getLogger(__name__)

    def copy(
        self,
        source: Path,
        destination: Path,
        options: CopyOptions | None = None,
    ) -> CopyResult:
        """Copy ``source`` to ``destination``.

        Args:
            source: Existing file or directory
            destination: Target path; missing parent directories are created
            options: Copy options, defaults to a plain copy

        Returns:
            CopyResult describing what was done

        Raises:
            PathNotFoundError: If the source does not exist
            FileSystemError: If any other filesystem call fails
        """
        options = options or CopyOptions()
        src_stat = self.file_adapter.stat(source)

        if options.update and self._destination_is_newer(destination, src_stat):
            self.logger.debug(
                "Destination is newer than source, skipping: %s", destination
            )
            return CopyResult(
                source=source,
                destination=destination,
                outcome=CopyOutcome.SKIPPED_NEWER,
            )

        bytes_written = 0
        if src_stat.is_directory:
            self.file_adapter.ensure_directory(destination)
            outcome = CopyOutcome.DIRECTORY_CREATED
        else:
            self.file_adapter.ensure_directory(destination.parent)
            outcome, bytes_written = self.content_copier.copy_content(
                source, destination, options.transforms
            )
            if outcome is CopyOutcome.SKIPPED_EXCLUDED:
                # Destination may not exist, nothing to apply metadata to
                return CopyResult(
                    source=source, destination=destination, outcome=outcome
                )

        self.file_adapter.set_mode(destination, src_stat.permissions)

        if options.preserve:
            self.file_adapter.set_owner(destination, src_stat.uid, src_stat.gid)
            self.file_adapter.set_times(
                destination, src_stat.accessed_time_ns, src_stat.modified_time_ns
            )

        self.logger.debug("Copy %s -> %s: %s", source, destination, outcome.value)
        return CopyResult(
            source=source,
            destination=destination,
            outcome=outcome,
            bytes_written=bytes_written,
        )

    def execute(self, request: CopyRequest) -> CopyResult:
        """Run a prepared copy request."""
        return self.copy(request.source, request.destination, request.options)

    def _destination_is_newer(self, destination: Path, src_stat: FileStat) -> bool:
        try:
            dst_stat = self.file_adapter.stat(destination)
        except PathNotFoundError:
            return False
        return dst_stat.is_newer_than(src_stat)


def create_file_copier(
    settings: CpxSettings | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> FileCopier:
    """Factory function to create a file copier.

    Args:
        settings: Settings supplying the exclusion pattern, defaults to the
            process settings
        file_adapter: Filesystem capability, defaults to the local filesystem

    Returns:
        Configured FileCopier instance
    """
    settings = settings or get_settings()
    file_adapter = file_adapter or create_file_adapter()
    return FileCopier(
        file_adapter,
        ContentCopier(file_adapter, exclude=settings.exclude),
    )


def copy_file(
    source: Path | str,
    destination: Path | str,
    options: CopyOptions | None = None,
    *,
    settings: CpxSettings | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> CopyResult:
    """Copy a single file or directory entry.

    See ``FileCopier.copy``.
    """
    copier = create_file_copier(settings=settings, file_adapter=file_adapter)
    return copier.copy(Path(source), Path(destination), options)


async def copy_file_async(
    source: Path | str,
    destination: Path | str,
    options: CopyOptions | None = None,
    *,
    settings: CpxSettings | None = None,
    file_adapter: FileAdapterProtocol | None = None,
) -> CopyResult:
    """Awaitable ``copy_file``, run in a worker thread.

    The copy runs to completion once started; cancelling the awaiting task
    does not interrupt it.
    """
    return await asyncio.to_thread(
        copy_file,
        source,
        destination,
        options,
        settings=settings,
        file_adapter=file_adapter,
    )
