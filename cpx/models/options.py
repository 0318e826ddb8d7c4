"""Options and request models for copy operations."""

from collections.abc import Callable
from pathlib import Path

from pydantic import Field

from .base import CpxBaseModel


# A transform maps the full content of a file to new content
Transform = Callable[[bytes], bytes]


class CopyOptions(CpxBaseModel):
    """Per-call copy options.

    Attributes:
        transforms: Content transforms applied in order before writing
        preserve: Also copy ownership and access/modification times
        update: Do not overwrite a destination newer than the source
    """

    transforms: tuple[Transform, ...] = Field(default_factory=tuple)
    preserve: bool = False
    update: bool = False


class CopyRequest(CpxBaseModel):
    """A single source to destination copy."""

    source: Path
    destination: Path
    options: CopyOptions = Field(default_factory=CopyOptions)
