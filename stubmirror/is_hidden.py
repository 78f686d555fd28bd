"""Helper for identifying hidden directory entries."""


def is_hidden(name: str) -> bool:
    """Check if a file or folder name is hidden (dot-prefixed)."""
    return name.startswith(".")
