"""Resolution of the working directories from the settings document."""

from dataclasses import dataclass
from pathlib import Path

from stubmirror.init_file import InitFile


@dataclass(frozen=True)
class FolderPaths:
    """Absolute paths of the base, sources, tests and unresolved folders."""

    parent: Path
    sources: Path
    tests: Path
    unresolved: Path

    @classmethod
    def from_config(cls, config: InitFile) -> "FolderPaths":
        """Join the base directory with each configured sub-folder name."""
        parent = Path(config.parent_path).expanduser().absolute()
        return cls(
            parent=parent,
            sources=parent / config.folder_with_files_project,
            tests=parent / config.folder_tests_name,
            unresolved=parent / config.folder_unresolved_tests,
        )

    def tests_inside_sources(self) -> list[Path]:
        """Return the output folders that lie inside the sources tree."""
        return [
            p
            for p in (self.tests, self.unresolved)
            if p == self.sources or self.sources in p.parents
        ]
