"""Shared fixtures for stubmirror tests."""

from pathlib import Path

import pytest

from stubmirror.folder_paths import FolderPaths
from stubmirror.init_file import InitFile
from helpers import TEMPLATE_TEXT, make_init_file


@pytest.fixture
def config(tmp_path: Path) -> InitFile:
    """Settings with an empty exclusion list and Swift sources."""
    return make_init_file(tmp_path)


@pytest.fixture
def folder_paths(config: InitFile) -> FolderPaths:
    """Resolved folders for the default settings, with Src created."""
    paths = FolderPaths.from_config(config)
    paths.sources.mkdir()
    return paths


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    """A small Swift template with all three placeholders."""
    path = tmp_path / "Template.swift"
    path.write_text(TEMPLATE_TEXT, encoding="utf-8")
    return path
