"""Classification of directory entries met during traversal."""

from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """What a directory entry is, as far as traversal cares."""

    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"  # symlinks, sockets, devices...


def classify_entry(path: Path) -> EntryKind:
    """Classify ``path`` without following symlinks."""
    if path.is_symlink():
        return EntryKind.OTHER
    if path.is_dir():
        return EntryKind.DIRECTORY
    if path.is_file():
        return EntryKind.FILE
    return EntryKind.OTHER
