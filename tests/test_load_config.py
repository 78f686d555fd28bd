"""Tests for loading the InitFile settings document."""

import json
from pathlib import Path

import pytest
import yaml

from stubmirror.compute_config_hash import compute_config_hash
from stubmirror.errors import ConfigReadError
from stubmirror.init_file import InitFile
from stubmirror.load_config import load_config, placeholder_fields
from helpers import make_init_file, write_init_file


def test_load_config_json(tmp_path: Path) -> None:
    """Verify that a JSON settings document is loaded into an InitFile."""
    expected = make_init_file(tmp_path, folder_file_exceptions=("Generated",))
    path = write_init_file(tmp_path / "InitFile.json", expected)

    loaded = load_config(path)

    assert loaded == expected
    assert loaded.file_extension == (".swift",)


def test_load_config_yaml(tmp_path: Path) -> None:
    """Verify that a YAML settings document is accepted as well."""
    expected = make_init_file(tmp_path)
    path = tmp_path / "InitFile.yml"
    path.write_text(yaml.safe_dump(expected.to_dict()), encoding="utf-8")

    assert load_config(path) == expected


def test_missing_file_creates_placeholder_and_fails(tmp_path: Path) -> None:
    """Verify that a missing document is created but the run does not proceed."""
    path = tmp_path / "InitFile.json"

    with pytest.raises(ConfigReadError, match="fill it in"):
        load_config(path)

    assert path.exists()
    written = json.loads(path.read_text(encoding="utf-8"))
    assert written == InitFile.default().to_dict()


def test_untouched_placeholder_is_rejected(tmp_path: Path) -> None:
    """Verify that a second run on the placeholder document still fails."""
    path = tmp_path / "InitFile.json"
    with pytest.raises(ConfigReadError):
        load_config(path)

    with pytest.raises(ConfigReadError, match="placeholder"):
        load_config(path)


def test_placeholder_fields_lists_partial_edits(tmp_path: Path) -> None:
    """Verify that only the fields left at their placeholder are reported."""
    default = InitFile.default()
    config = make_init_file(
        tmp_path, parent_path=default.parent_path, tested_project="Demo"
    )
    assert placeholder_fields(config) == ["parent_path"]


def test_malformed_document(tmp_path: Path) -> None:
    """Verify that malformed content is a ConfigReadError."""
    path = tmp_path / "InitFile.json"
    path.write_text('{"tested_project": [', encoding="utf-8")

    with pytest.raises(ConfigReadError, match="Malformed"):
        load_config(path)


def test_non_mapping_document(tmp_path: Path) -> None:
    """Verify that a top-level list is rejected."""
    path = tmp_path / "InitFile.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigReadError, match="mapping"):
        load_config(path)


def test_missing_keys(tmp_path: Path) -> None:
    """Verify that missing keys are named in the error."""
    data = make_init_file(tmp_path).to_dict()
    del data["file_extension"]
    path = tmp_path / "InitFile.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigReadError, match="file_extension"):
        load_config(path)


def test_wrong_types(tmp_path: Path) -> None:
    """Verify that a string where a list is expected is rejected."""
    data = make_init_file(tmp_path).to_dict()
    data["file_extension"] = ".swift"
    path = tmp_path / "InitFile.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigReadError, match="list of strings"):
        load_config(path)


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    """Verify that extra keys do not prevent loading."""
    data = make_init_file(tmp_path).to_dict()
    data["comment"] = "hello"
    path = tmp_path / "InitFile.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    assert load_config(path).tested_project == "Demo"


def test_compute_config_hash_stability(tmp_path: Path) -> None:
    """Verify that equal settings hash equally and different ones do not."""
    a = make_init_file(tmp_path)
    b = make_init_file(tmp_path)
    c = make_init_file(tmp_path, tested_project="Other")

    assert compute_config_hash(a) == compute_config_hash(b)
    assert compute_config_hash(a) != compute_config_hash(c)


def test_tab_indented_json(tmp_path: Path) -> None:
    """Verify that JSON indented with tabs is loaded."""
    expected = make_init_file(tmp_path)
    path = tmp_path / "InitFile.json"
    path.write_text(json.dumps(expected.to_dict(), indent="\t"), encoding="utf-8")

    assert load_config(path) == expected


def test_non_utf8_settings(tmp_path: Path) -> None:
    """Verify that an undecodable settings file is a ConfigReadError."""
    path = tmp_path / "InitFile.json"
    path.write_bytes(b'{"tested_project": "\xff"}')

    with pytest.raises(ConfigReadError, match="Cannot read settings file"):
        load_config(path)


def test_json_with_yaml_only_syntax_is_malformed(tmp_path: Path) -> None:
    """Verify that a .json file is decoded as JSON, not YAML."""
    path = tmp_path / "InitFile.json"
    path.write_text("tested_project: Demo\n", encoding="utf-8")

    with pytest.raises(ConfigReadError, match="Malformed"):
        load_config(path)
