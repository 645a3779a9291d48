"""Tests for config.json validation against the bundled MCM Helper schema."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from helpers import CONFIG_JSON
from mcm_meta_helper.contracts.load import (
    load_schema,
    validate_config_file,
    validate_instance,
)


def test_schema_loads_and_is_draft7():
    schema = load_schema()
    assert schema["$schema"].startswith("http://json-schema.org/draft-07")
    assert "modName" in schema["required"]


def test_fixture_config_is_valid():
    assert validate_instance(CONFIG_JSON) == []


def test_missing_mod_name():
    issues = validate_instance({"displayName": "$X"})
    assert [i.kind for i in issues] == ["required"]
    assert issues[0].instance_path == ""


def test_bad_control_type_has_pointer():
    doc = {"modName": "M", "content": [{"type": "toggle"}, {"type": "button"}]}
    issues = validate_instance(doc)
    assert len(issues) == 1
    assert issues[0].kind == "enum"
    assert issues[0].instance_path == "/content/1/type"


def test_issues_sorted():
    doc = {"modName": "", "extra": 1, "cursorFillMode": "diagonal"}
    issues = validate_instance(doc)
    keys = [(i.instance_path, i.kind, i.message) for i in issues]
    assert keys == sorted(keys)
    assert len(issues) == 3


def test_validate_config_file(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG_JSON), encoding="utf-8")
    assert validate_config_file(path) == []


def test_malformed_json_raises(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        validate_config_file(path)
