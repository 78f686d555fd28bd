"""Per-run record of created, skipped and failed stubs."""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from stubmirror.errors import StubMirrorError


@dataclass(frozen=True)
class FailedFile:
    """A source file whose stub could not be produced."""

    source: Path
    kind: str
    message: str


class GenerationReport:
    """Collects the outcome of every eligible source file in one run."""

    def __init__(self, config_hash: str, *, dry_run: bool = False) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.dry_run = dry_run
        self.created: list[tuple[Path, Path]] = []  # (source, stub)
        self.skipped: list[Path] = []
        self.failed: list[FailedFile] = []
        self.start_time = time.time()

    def add_created(self, source: Path, stub: Path) -> None:
        """Record a stub that was written (or would be, in a dry run)."""
        self.created.append((source, stub))

    def add_skipped(self, source: Path) -> None:
        """Record a source whose stub already existed."""
        self.skipped.append(source)

    def add_failure(self, source: Path, error: StubMirrorError) -> None:
        """Record a source whose stub could not be produced."""
        self.failed.append(FailedFile(source, error.kind, str(error)))

    @property
    def has_failures(self) -> bool:
        """Whether any source file failed."""
        return bool(self.failed)

    def summary(self) -> dict[str, int]:
        """Return the created, skipped and failed counts."""
        return {
            "created": len(self.created),
            "skipped": len(self.skipped),
            "failed": len(self.failed),
        }

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report: dict[str, Any] = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "dry_run": self.dry_run,
                "totals": self.summary(),
            },
            "created": [
                {"source": str(source), "stub": str(stub)}
                for source, stub in self.created
            ],
            "skipped": [str(source) for source in self.skipped],
            "failed": [
                {"source": str(f.source), "kind": f.kind, "message": f.message}
                for f in self.failed
            ],
        }

        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
