"""Helpers shared by the test modules: UCS-2 files and fixture content."""

from __future__ import annotations

from pathlib import Path

CONFIG_JSON = {
    "modName": "MyMod",
    "displayName": "$MyMod",
    "content": [
        {"type": "toggle", "text": "$Foo", "help": "plain help text"},
    ],
    "pages": [
        {
            "pageDisplayName": "$Bar",
            "content": [{"type": "header", "text": "$Armor"}],
        }
    ],
}

ENGLISH = "$MyMod\tMy Mod\r\n$Foo\tFoo\r\n$Bar\tBar\r\n"
FRENCH = "$MyMod\tMon Mod\r\n$Bar\tvaleur\r\n$Qux\told\r\n"


def write_ucs2(path: Path, text: str, *, bom: bool = False) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = text.encode("utf-16-le")
    if bom:
        data = b"\xff\xfe" + data
    path.write_bytes(data)
    return path


def read_ucs2(path: Path) -> str:
    return path.read_bytes().decode("utf-16-le")
