"""Single-file copy operations."""

from .content import ContentCopier, apply_transforms
from .service import FileCopier, copy_file, copy_file_async, create_file_copier
from .transforms import load_transform, load_transforms


__all__ = [
    "ContentCopier",
    "FileCopier",
    "apply_transforms",
    "copy_file",
    "copy_file_async",
    "create_file_copier",
    "load_transform",
    "load_transforms",
]
