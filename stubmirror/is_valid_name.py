"""Name filter deciding which entries take part in stub generation."""

from pathlib import Path

from stubmirror.entry_kind import EntryKind, classify_entry
from stubmirror.init_file import InitFile
from stubmirror.is_hidden import is_hidden

NO_EXTENSION = "Empty"


def file_extension_of(path: Path) -> str:
    """Return the extension with its dot, or ``NO_EXTENSION`` when there is none."""
    return path.suffix or NO_EXTENSION


def is_readable_name(name: str) -> bool:
    """Check that a name decoded cleanly (no surrogate-escaped bytes)."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_valid_name(path: Path, config: InitFile) -> bool:
    """Check whether a directory entry should be traversed or generated for.

    Extensions are compared by exact string equality against
    ``config.file_extension``; no case folding is applied.
    """
    name = path.name
    if not name or not is_readable_name(name) or is_hidden(name):
        return False

    kind = classify_entry(path)
    if kind is EntryKind.DIRECTORY:
        return name not in config.folder_file_exceptions
    if kind is EntryKind.FILE:
        return (
            name not in config.folder_file_exceptions
            and file_extension_of(path) in config.file_extension
        )
    return False
