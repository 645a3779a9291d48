from __future__ import annotations

import json
from pathlib import Path

import pytest

from helpers import CONFIG_JSON, ENGLISH, FRENCH, write_ucs2


@pytest.fixture
def mod_tree(tmp_path: Path) -> Path:
    """``MyMod`` with a clean English file and a French file missing ``$Foo``."""
    root = tmp_path / "MyMod"
    translations = root / "Interface" / "Translations"
    write_ucs2(translations / "MyMod_english.txt", ENGLISH)
    write_ucs2(translations / "MyMod_FRENCH.txt", FRENCH)

    config_dir = root / "MCM" / "Config" / "MyMod"
    config_dir.mkdir(parents=True)
    (config_dir / "config.json").write_text(json.dumps(CONFIG_JSON), encoding="utf-8")
    return root
