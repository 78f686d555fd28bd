"""Substitution data for one rendered unit-test stub."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitTestRecord:
    """Fields substituted into the unit-test template."""

    project_name: str
    class_name: str  # source file stem, without the "Tests" decoration
    created_date: str

    def as_context(self) -> dict[str, str]:
        """Return the template context."""
        return {
            "class_name": self.class_name,
            "created_date": self.created_date,
            "project_name": self.project_name,
        }
