"""Load the bundled MCM Helper schema and validate ``config.json`` files.

Usage::

    from mcm_meta_helper.contracts.load import validate_config_file

    issues = validate_config_file(Path("MCM/Config/MyMod/config.json"))
    for issue in issues:
        print(issue.kind, issue.message, issue.instance_path)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"
CONFIG_SCHEMA = "mcm_config.schema.json"


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    """One schema violation: failing keyword, message, JSON pointer."""

    kind: str
    message: str
    instance_path: str

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind,
            "message": self.message,
            "instance_path": self.instance_path,
        }


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``data/schemas/`` relative to the package root (source checkout)
    2. pip-installed package data via importlib.resources
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(
        resources.files("mcm_meta_helper") / SCHEMA_DIR / name
    ) as p:
        return p


def load_schema(name: str = CONFIG_SCHEMA) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    path = _schema_path(name)
    return json.loads(path.read_text(encoding="utf-8"))


def _pointer(parts: Any) -> str:
    escaped = [str(p).replace("~", "~0").replace("/", "~1") for p in parts]
    return "/" + "/".join(escaped) if escaped else ""


def validate_instance(instance: Any, schema_name: str = CONFIG_SCHEMA) -> list[SchemaIssue]:
    """Return every violation of *instance* against the named schema.

    An empty list means the instance is valid.  Issues are ordered by
    instance path, then keyword, so output is stable across runs.
    """
    schema = load_schema(schema_name)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)
    issues = [
        SchemaIssue(
            kind=str(error.validator),
            message=error.message,
            instance_path=_pointer(error.absolute_path),
        )
        for error in validator.iter_errors(instance)
    ]
    return sorted(issues, key=lambda i: (i.instance_path, i.kind, i.message))


def validate_config_file(path: Path, schema_name: str = CONFIG_SCHEMA) -> list[SchemaIssue]:
    """Load *path* as JSON and validate it.

    Raises ``OSError`` or ``json.JSONDecodeError`` when the file cannot be
    read or parsed; those are not schema issues.
    """
    instance = json.loads(path.read_text(encoding="utf-8-sig"))
    return validate_instance(instance, schema_name)
