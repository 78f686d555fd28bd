"""Error types raised while mirroring unit-test stubs."""

from pathlib import Path


class StubMirrorError(Exception):
    """Base class for all stubmirror failures."""

    kind = "error"

    def __init__(self, path: Path, message: str) -> None:
        """Store the offending path alongside the message."""
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message


class ConfigReadError(StubMirrorError):
    """The settings document is missing, unreadable or invalid."""

    kind = "config_read"


class DirectoryListError(StubMirrorError):
    """A directory of the sources tree could not be listed."""

    kind = "directory_list"


class PathMappingError(StubMirrorError):
    """A source file does not live under the configured sources root."""

    kind = "path_mapping"


class TemplateRenderError(StubMirrorError):
    """The unit-test template could not be loaded or rendered."""

    kind = "template_render"


class StubWriteError(StubMirrorError):
    """The stub file or one of its directories could not be written."""

    kind = "stub_write"
