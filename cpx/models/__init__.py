"""Data models for cpx."""

from .base import CpxBaseModel
from .options import CopyOptions, CopyRequest, Transform
from .results import CopyOutcome, CopyResult
from .stat import FileStat


__all__ = [
    "CopyOptions",
    "CopyOutcome",
    "CopyRequest",
    "CopyResult",
    "CpxBaseModel",
    "FileStat",
    "Transform",
]
