"""Tests for the canonical JSON normalization layer."""

import io
import json
from pathlib import Path

from mcm_meta_helper.reconcile.engine import Reconciliation
from mcm_meta_helper.utils.json_norm import stable_json_dump, stable_json_dumps


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    obj = json.loads(stable_json_dumps({"p": Path("a") / "b"}))
    assert obj["p"] == "a/b"


def test_sets_become_sorted_lists():
    obj = json.loads(stable_json_dumps({"keys": {"$b", "$a"}, "t": ("$x",)}))
    assert obj == {"keys": ["$a", "$b"], "t": ["$x"]}


def test_non_ascii_is_kept():
    assert "Übersetzung" in stable_json_dumps({"v": "Übersetzung"})


def test_dataclass_without_to_dict_is_stringified():
    s = stable_json_dumps({"r": Reconciliation(missing=(), unused=())})
    assert json.loads(s)["r"].startswith("Reconciliation(")


def test_stable_json_dump_writes_to_file_like():
    buf = io.StringIO()
    stable_json_dump({"b": 1, "a": 2}, buf)
    assert buf.getvalue() == stable_json_dumps({"b": 1, "a": 2})
