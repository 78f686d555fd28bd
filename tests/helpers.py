"""Builders shared by the test modules."""

import json
from pathlib import Path

from stubmirror.init_file import InitFile

TEMPLATE_TEXT = (
    "// {{ class_name }}Tests for {{ project_name }}, created {{ created_date }}\n"
    "final class {{ class_name }}Tests {}\n"
)


def make_init_file(tmp_path: Path, **overrides: object) -> InitFile:
    """Build settings rooted at ``tmp_path`` with Src/Tests/Unresolved folders."""
    values: dict[str, object] = {
        "tested_project": "Demo",
        "parent_path": str(tmp_path),
        "folder_tests_name": "Tests",
        "folder_unresolved_tests": "Unresolved",
        "folder_with_files_project": "Src",
        "folder_file_exceptions": (),
        "file_extension": (".swift",),
    }
    values.update(overrides)
    return InitFile(**values)  # type: ignore[arg-type]


def write_init_file(path: Path, config: InitFile) -> Path:
    """Write ``config`` to ``path`` as a JSON settings document."""
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    return path


def touch(path: Path, text: str = "") -> Path:
    """Create ``path`` and its parents with the given content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
