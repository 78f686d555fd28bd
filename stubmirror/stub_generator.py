"""Idempotent creation of unit-test stubs in the tests tree."""

import logging
from collections.abc import Callable
from datetime import date
from pathlib import Path

from stubmirror.errors import StubWriteError
from stubmirror.folder_paths import FolderPaths
from stubmirror.init_file import InitFile
from stubmirror.unit_test_path import unit_test_path
from stubmirror.unit_test_record import UnitTestRecord
from stubmirror.unit_test_template import UnitTestTemplate

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d/%m/%Y"


class StubGenerator:
    """Creates one stub per source file, never touching existing stubs."""

    def __init__(
        self,
        folder_paths: FolderPaths,
        config: InitFile,
        template: UnitTestTemplate,
        *,
        today: Callable[[], date] = date.today,
        dry_run: bool = False,
    ) -> None:
        """Bind the generator to a run's folders, settings and template."""
        self.folder_paths = folder_paths
        self.config = config
        self.template = template
        self.today = today
        self.dry_run = dry_run

    def ensure_stub(self, source_file: Path) -> Path | None:
        """Create the stub for ``source_file`` unless one already exists.

        Returns the stub path if it was generated (or would be, in a dry run),
        or None if skipped (exists).
        """
        stub_dir, stub_file_name = unit_test_path(
            source_file, self.folder_paths, self.template.extension
        )
        stub_path = stub_dir / stub_file_name

        if stub_path.exists():
            return None  # Immutable: never overwrite existing stubs

        record = UnitTestRecord(
            project_name=self.config.tested_project,
            class_name=source_file.stem,
            created_date=self.today().strftime(DATE_FORMAT),
        )
        content = self.template.render(record)

        if self.dry_run:
            return stub_path

        try:
            stub_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            msg = f"Cannot create stub directory ({exc})"
            raise StubWriteError(stub_path, msg) from exc

        try:
            # "x" refuses to clobber a stub that appeared after the check above
            with open(stub_path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError:
            return None
        except OSError as exc:
            raise StubWriteError(stub_path, f"Cannot write stub ({exc})") from exc

        logger.info("Created unit test %s", stub_path)
        return stub_path
