"""Tests for translation key extraction from JSON documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from mcm_meta_helper.keys.extractor import (
    collect_required_keys,
    collect_translation_keys,
    load_json_keys,
)


def test_nested_objects_and_arrays():
    doc = {"a": {"b": ["$Foo", "bar", {"c": "$Baz "}]}, "d": "$Qux"}
    assert collect_translation_keys(doc) == ["$Foo", "$Baz", "$Qux"]


def test_object_keys_are_never_matches():
    assert collect_translation_keys({"$NotAKey": "plain"}) == []


def test_only_leading_sentinel_counts():
    assert collect_translation_keys(["a$b", " $Padded", "$Ok"]) == ["$Ok"]


def test_non_string_leaves_ignored():
    assert collect_translation_keys({"n": 1, "b": True, "x": None, "f": 1.5}) == []


def test_duplicates_are_kept():
    assert collect_translation_keys(["$A", {"x": "$A"}]) == ["$A", "$A"]


def test_root_string_is_a_match():
    assert collect_translation_keys("$Root") == ["$Root"]


def test_load_json_keys_accepts_bom(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"text": "$Foo"}), encoding="utf-8-sig")
    assert load_json_keys(path) == ["$Foo"]


def test_collect_required_keys_is_sorted_across_files(tmp_path: Path):
    first = tmp_path / "a.json"
    second = tmp_path / "b.json"
    first.write_text(json.dumps({"x": ["$Zed", "$Alpha"]}), encoding="utf-8")
    second.write_text(json.dumps({"y": "$Alpha"}), encoding="utf-8")
    assert collect_required_keys([first, second]) == ["$Alpha", "$Alpha", "$Zed"]


def test_unreadable_sources_are_skipped(tmp_path: Path, caplog):
    good = tmp_path / "good.json"
    bad = tmp_path / "bad.json"
    good.write_text(json.dumps({"x": "$Foo"}), encoding="utf-8")
    bad.write_text("{not json", encoding="utf-8")
    missing = tmp_path / "missing.json"

    with caplog.at_level(logging.WARNING):
        keys = collect_required_keys([bad, missing, good])

    assert keys == ["$Foo"]
    assert "bad.json" in caplog.text
    assert "missing.json" in caplog.text
