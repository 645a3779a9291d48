"""Key extraction — find every ``$Key`` reference in a JSON document."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from mcm_meta_helper.model import SENTINEL

logger = logging.getLogger(__name__)


def collect_translation_keys(value: Any) -> list[str]:
    """Return every string leaf of *value* that starts with ``$``.

    Objects contribute their values (never their keys), arrays their
    elements, at any depth.  Matches are whitespace-trimmed and kept in
    document order; duplicates are not removed.

    >>> collect_translation_keys({"a": {"b": ["$Foo", "bar"]}})
    ['$Foo']
    """
    found: list[str] = []
    if isinstance(value, str):
        if value.startswith(SENTINEL):
            found.append(value.strip())
    elif isinstance(value, dict):
        for child in value.values():
            found.extend(collect_translation_keys(child))
    elif isinstance(value, list):
        for child in value:
            found.extend(collect_translation_keys(child))
    return found


def load_json_keys(path: Path) -> list[str]:
    """Read one JSON file and extract its keys.

    Raises ``OSError`` / ``ValueError`` (``json.JSONDecodeError``,
    ``UnicodeDecodeError``) for unreadable or malformed files.
    """
    with open(path, encoding="utf-8-sig") as f:
        document = json.load(f)
    return collect_translation_keys(document)


def collect_required_keys(paths: Iterable[Path]) -> list[str]:
    """Concatenate the keys of every readable JSON file in *paths*.

    A file that cannot be read or parsed is logged and skipped.  The result
    is sorted and may contain duplicates.
    """
    requested: list[str] = []
    for path in paths:
        try:
            keys = load_json_keys(path)
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", path, e)
            continue
        logger.debug("%s: %d translation keys", path, len(keys))
        requested.extend(keys)
    requested.sort()
    return requested
