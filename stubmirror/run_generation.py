"""Orchestration of one stub-mirroring run."""

import logging
from pathlib import Path

from stubmirror.compute_config_hash import compute_config_hash
from stubmirror.folder_paths import FolderPaths
from stubmirror.generation_report import GenerationReport
from stubmirror.load_config import load_config
from stubmirror.stub_generator import StubGenerator
from stubmirror.traverse_directory import traverse_directory
from stubmirror.unit_test_template import UnitTestTemplate

logger = logging.getLogger(__name__)


def run_generation(
    config_path: str | Path,
    template_path: str | Path,
    *,
    dry_run: bool = False,
    report_path: str | Path | None = None,
) -> GenerationReport:
    """Load settings, walk the sources tree and ensure every stub exists.

    Raises ``ConfigReadError`` or ``DirectoryListError`` when the run cannot
    proceed at all; per-file failures end up in the returned report.
    """
    config = load_config(config_path)
    folder_paths = FolderPaths.from_config(config)

    nested = folder_paths.tests_inside_sources()
    for p in nested:
        logger.warning(
            "Output folder %s lies inside sources %s", p, folder_paths.sources
        )

    generator = StubGenerator(
        folder_paths, config, UnitTestTemplate(template_path), dry_run=dry_run
    )
    report = GenerationReport(compute_config_hash(config), dry_run=dry_run)

    traverse_directory(
        folder_paths.sources,
        config,
        generator,
        report,
        skip_dirs={folder_paths.tests, folder_paths.unresolved},
    )

    if report_path:
        report.generate_report(report_path)
        logger.info("Report written to %s", report_path)

    return report
