"""Mapping of a source file onto its stub location in the tests tree."""

from pathlib import Path

from stubmirror.errors import PathMappingError
from stubmirror.folder_paths import FolderPaths

STUB_SUFFIX = "Tests"


def unit_test_path(
    source_file: Path, folder_paths: FolderPaths, template_extension: str
) -> tuple[Path, str]:
    """Return the stub directory and stub file name for ``source_file``.

    The file's parent directory is re-anchored from the sources root onto the
    tests root: ``sources/a/b/Foo.swift`` -> ``tests/a/b``, ``FooTests.swift``.
    """
    # Resolve both sides so ".." segments cannot step out of the sources root.
    parent = source_file.parent.resolve()
    sources = folder_paths.sources.resolve()
    try:
        relative = parent.relative_to(sources)
    except ValueError as exc:
        msg = f"Not under sources root {folder_paths.sources}"
        raise PathMappingError(source_file, msg) from exc

    stub_dir = folder_paths.tests / relative
    stub_file_name = source_file.stem + STUB_SUFFIX + template_extension
    return stub_dir, stub_file_name
