"""Data model for the InitFile settings document."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class InitFile:
    """Settings for one run, keyed exactly like the JSON document."""

    tested_project: str  # project the tests are attached to
    parent_path: str  # base the three folders are joined onto
    folder_tests_name: str
    folder_unresolved_tests: str  # tests with no matching source file
    folder_with_files_project: str
    folder_file_exceptions: tuple[str, ...]  # folder/file names to skip
    file_extension: tuple[str, ...]  # e.g. ".swift"

    @classmethod
    def default(cls) -> "InitFile":
        """Return the placeholder document written on first run."""
        return cls(
            tested_project="Project the tests are attached to",
            parent_path="Path the test folders are joined onto",
            folder_tests_name="Folder to save tests into",
            folder_unresolved_tests="Folder for tests without a source file",
            folder_with_files_project="Folder with the project sources",
            folder_file_exceptions=("Folder/file names to skip",),
            file_extension=(".swift",),
        )

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the document keys in declaration order."""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with lists instead of tuples."""
        data = asdict(self)
        data["folder_file_exceptions"] = list(self.folder_file_exceptions)
        data["file_extension"] = list(self.file_extension)
        return data
