"""Depth-first walk of the sources tree dispatching files to the generator."""

import logging
from collections.abc import Collection
from pathlib import Path

from stubmirror.errors import (
    DirectoryListError,
    PathMappingError,
    StubWriteError,
    TemplateRenderError,
)
from stubmirror.generation_report import GenerationReport
from stubmirror.init_file import InitFile
from stubmirror.is_valid_name import is_valid_name
from stubmirror.stub_generator import StubGenerator

logger = logging.getLogger(__name__)


def traverse_directory(
    directory: Path,
    config: InitFile,
    generator: StubGenerator,
    report: GenerationReport,
    skip_dirs: Collection[Path] = (),
) -> None:
    """Recursively ensure stubs for every eligible file below ``directory``.

    A directory that cannot be listed aborts the whole walk. Failures for a
    single file are recorded in ``report`` and the walk moves on.
    """
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        msg = f"Cannot list directory ({exc})"
        raise DirectoryListError(directory, msg) from exc

    for path in entries:
        if not is_valid_name(path, config):
            continue

        if path.is_dir():
            if path in skip_dirs:
                logger.debug("Skipping output directory: %s", path)
                continue
            logger.debug("Directory: %s", path)
            traverse_directory(path, config, generator, report, skip_dirs)
            continue

        logger.debug("File: %s", path)
        try:
            stub = generator.ensure_stub(path)
        except (PathMappingError, TemplateRenderError, StubWriteError) as exc:
            logger.error("Failed to create unit test for %s: %s", path, exc)
            report.add_failure(path, exc)
            continue

        if stub is None:
            report.add_skipped(path)
        else:
            report.add_created(path, stub)
