"""Logic for loading the InitFile settings document."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from stubmirror.errors import ConfigReadError
from stubmirror.init_file import InitFile

logger = logging.getLogger(__name__)

STRING_FIELDS = (
    "tested_project",
    "parent_path",
    "folder_tests_name",
    "folder_unresolved_tests",
    "folder_with_files_project",
)
LIST_FIELDS = ("folder_file_exceptions", "file_extension")
YAML_SUFFIXES = (".yml", ".yaml")


def create_init_file(path: Path) -> None:
    """Write the placeholder settings document to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(InitFile.default().to_dict(), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def load_config(path: str | Path) -> InitFile:
    """Load the settings document, creating a placeholder one if it is absent.

    A freshly created or untouched placeholder document is rejected so the run
    never proceeds with placeholder paths.
    """
    p = Path(path)
    if not p.exists():
        try:
            create_init_file(p)
        except OSError as exc:
            raise ConfigReadError(p, f"Cannot create settings file ({exc})") from exc
        logger.warning("Created settings file with placeholder values: %s", p)
        raise ConfigReadError(p, "Settings file created, fill it in and run again")

    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(p, f"Cannot read settings file ({exc})") from exc

    try:
        if p.suffix.lower() in YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigReadError(p, f"Malformed settings file ({exc})") from exc

    config = _parse(p, raw)

    placeholders = placeholder_fields(config)
    if placeholders:
        joined = ", ".join(placeholders)
        raise ConfigReadError(p, f"Settings still hold placeholder values ({joined})")
    return config


def placeholder_fields(config: InitFile) -> list[str]:
    """Return the names of string fields still equal to the placeholder."""
    default = InitFile.default()
    return [
        name
        for name in STRING_FIELDS
        if getattr(config, name) == getattr(default, name)
    ]


def _parse(path: Path, raw: Any) -> InitFile:
    """Validate the decoded document and build an ``InitFile``."""
    if not isinstance(raw, dict):
        raise ConfigReadError(path, "Settings document must be a mapping")

    missing = [name for name in InitFile.field_names() if name not in raw]
    if missing:
        raise ConfigReadError(path, f"Missing settings keys ({', '.join(missing)})")

    for key in sorted(set(raw) - set(InitFile.field_names())):
        logger.warning("Ignoring unknown settings key %r in %s", key, path)

    values: dict[str, Any] = {}
    for name in STRING_FIELDS:
        value = raw[name]
        if not isinstance(value, str):
            raise ConfigReadError(path, f"Settings key {name!r} must be a string")
        values[name] = value
    for name in LIST_FIELDS:
        value = raw[name]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigReadError(
                path, f"Settings key {name!r} must be a list of strings"
            )
        values[name] = tuple(value)

    return InitFile(**values)
