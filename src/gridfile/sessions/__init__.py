"""Read, edit and build sessions spawned by a FileHandle."""

from .builder import BuildSession
from .editor import EditSession
from .reader import ReadSession

__all__ = [
    "ReadSession",
    "EditSession",
    "BuildSession",
]
