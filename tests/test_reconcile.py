"""Tests for the reconciliation engine."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpers import write_ucs2
from mcm_meta_helper.baseline import SKYUI_KEYS, load_baseline
from mcm_meta_helper.errors import UnknownLanguageError
from mcm_meta_helper.reconcile.engine import (
    REPORT_SCHEMA_VERSION,
    missing_for,
    reconcile,
    reconcile_all,
    reconcile_language,
    select_language,
)
from mcm_meta_helper.translation.file import TranslationFile


REQUIRED = frozenset({"$Foo", "$Bar", "$Armor"})


class TestReconcile:
    def test_missing_and_unused(self):
        result = reconcile(REQUIRED, ["$Bar", "$Qux"], SKYUI_KEYS)
        assert result.missing == ("$Foo",)
        assert result.unused == ("$Qux",)
        assert not result.passed

    def test_baseline_keys_never_missing(self):
        result = reconcile(REQUIRED, ["$Foo", "$Bar"], SKYUI_KEYS)
        assert "$Armor" not in result.missing
        assert result.passed
        assert result.is_clean

    def test_baseline_keys_still_reported_unused(self):
        result = reconcile({"$Foo"}, ["$Foo", "$Armor"], SKYUI_KEYS)
        assert result.unused == ("$Armor",)
        assert result.passed

    def test_unused_alone_passes(self):
        result = reconcile({"$Foo"}, ["$Foo", "$Old"], frozenset())
        assert result.passed
        assert not result.is_clean

    def test_outputs_sorted_and_disjoint(self):
        required = ["$b", "$a", "$C", "$a"]
        provided = ["$z", "$C", "$y"]
        result = reconcile(required, provided, frozenset())
        assert list(result.missing) == sorted(result.missing)
        assert list(result.unused) == sorted(result.unused)
        assert set(result.missing).isdisjoint(provided)
        assert set(result.unused).isdisjoint(required)
        assert result.missing == ("$a", "$b")

    def test_empty_inputs(self):
        result = reconcile([], [], SKYUI_KEYS)
        assert result.missing == ()
        assert result.unused == ()

    def test_identical_inputs_are_deterministic(self):
        a = reconcile(REQUIRED, ["$Qux", "$Bar"], SKYUI_KEYS)
        b = reconcile(set(REQUIRED), ("$Bar", "$Qux"), SKYUI_KEYS)
        assert a == b


class TestBaseline:
    def test_known_skyui_keys_present(self):
        assert "$Armor" in SKYUI_KEYS
        assert all(key.startswith("$") for key in SKYUI_KEYS)

    def test_extra_keys_extend_baseline(self):
        baseline = load_baseline(["$MyFramework"])
        assert "$MyFramework" in baseline
        assert SKYUI_KEYS <= baseline


def _files(tmp_path: Path) -> dict[str, TranslationFile]:
    english = write_ucs2(tmp_path / "MyMod_english.txt", "$Foo\tFoo\r\n$Bar\tBar\r\n")
    french = write_ucs2(tmp_path / "MyMod_FRENCH.txt", "$Bar\tvaleur\r\n$Qux\told\r\n")
    return {
        "english": TranslationFile(english, "english"),
        "french": TranslationFile(french, "FRENCH"),
    }


class TestLanguages:
    def test_reconcile_language(self, tmp_path: Path):
        files = _files(tmp_path)
        report = reconcile_language(files["french"], REQUIRED, SKYUI_KEYS)
        assert report.language == "FRENCH"
        assert report.display_name == "MyMod_FRENCH.txt"
        assert report.provided_count == 2
        assert report.missing == ("$Foo",)
        assert report.unused == ("$Qux",)

    def test_all_mode_evaluates_every_language(self, tmp_path: Path):
        files = _files(tmp_path)
        aggregate = reconcile_all(files, REQUIRED, SKYUI_KEYS)
        assert [r.language for r in aggregate.reports] == ["english", "FRENCH"]
        assert not aggregate.passed
        assert aggregate.reports[0].passed
        assert not aggregate.reports[1].passed

    def test_all_mode_passes_when_each_language_passes(self, tmp_path: Path):
        files = _files(tmp_path)
        del files["french"]
        assert reconcile_all(files, REQUIRED, SKYUI_KEYS).passed

    def test_aggregate_dict(self, tmp_path: Path):
        aggregate = reconcile_all(_files(tmp_path), REQUIRED, SKYUI_KEYS)
        data = aggregate.to_dict()
        assert data["schema_version"] == REPORT_SCHEMA_VERSION
        assert data["required_count"] == 3
        assert data["passed"] is False
        assert data["languages"][1]["missing"] == ["$Foo"]
        assert "Failing: 1" in aggregate.summary()

    def test_select_language_is_case_insensitive(self, tmp_path: Path):
        files = _files(tmp_path)
        assert select_language(files, "French") is files["french"]
        assert select_language(files, "ENGLISH") is files["english"]

    def test_unknown_language_is_an_error(self, tmp_path: Path):
        files = _files(tmp_path)
        with pytest.raises(UnknownLanguageError) as exc:
            select_language(files, "german")
        assert exc.value.language == "german"
        assert exc.value.available == ["FRENCH", "english"]
        assert "german" in str(exc.value)

    def test_missing_for_feeds_stubs(self, tmp_path: Path):
        trfile = _files(tmp_path)["french"]
        missing = missing_for(trfile, REQUIRED, SKYUI_KEYS)
        assert missing == ["$Foo"]
        trfile.append_stubs(missing)
        assert missing_for(trfile, REQUIRED, SKYUI_KEYS) == []
