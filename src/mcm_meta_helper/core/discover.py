"""Mod directory discovery — find the data dir, translation files and JSON sources.

Layout of an MCM Helper mod (directory names are matched case-insensitively)::

    <data>/Interface/Translations/<Mod>_<language>.txt
    <data>/MCM/Config/<Mod>/config.json
    <data>/SKSE/Plugins/InventoryInjector/*.json

``<data>`` is the mod directory itself or the first subdirectory (depth
first, sorted) that contains an ``Interface`` directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mcm_meta_helper.core.config import HelperConfig
from mcm_meta_helper.errors import ModDirectoryError, UnknownLanguageError
from mcm_meta_helper.translation.file import (
    TRANSLATION_SUFFIX,
    TranslationFile,
    parse_language_tag,
)

logger = logging.getLogger(__name__)

# Directory basenames never searched for a data dir.
_IGNORE_DIRS = frozenset({"target", "build", "extern"})


def _subdirs(path: Path) -> list[Path]:
    """Immediate subdirectories worth searching, sorted by name."""
    try:
        entries = sorted(path.iterdir())
    except OSError:
        return []
    return [
        p for p in entries
        if p.is_dir()
        and not p.name.startswith(".")
        and p.name.lower() not in _IGNORE_DIRS
    ]


def _child(parent: Path, name: str) -> Path | None:
    """Case-insensitive lookup of *name* directly under *parent*."""
    exact = parent / name
    if exact.exists():
        return exact
    wanted = name.lower()
    try:
        for p in sorted(parent.iterdir()):
            if p.name.lower() == wanted:
                return p
    except OSError:
        return None
    return None


def _child_path(parent: Path, *names: str) -> Path | None:
    current: Path | None = parent
    for name in names:
        if current is None:
            return None
        current = _child(current, name)
    return current


def find_data_dir(top: Path) -> Path | None:
    """Return *top* or the first descendant holding an ``Interface`` dir."""
    relevant = _subdirs(top)
    if any(p.name.lower() == "interface" for p in relevant):
        return top
    for entry in relevant:
        found = find_data_dir(entry)
        if found is not None:
            return found
    return None


class ModDirectory:
    """An MCM Helper mod on disk.

    Parameters
    ----------
    directory:
        The mod directory (or any ancestor of its data directory).
    config:
        Tool configuration; also passed to every ``TranslationFile``.

    Raises
    ------
    ModDirectoryError
        If no data directory can be found under *directory*.
    """

    def __init__(self, directory: str | Path, config: HelperConfig | None = None) -> None:
        self.modpath = Path(directory).resolve()
        if not self.modpath.is_dir():
            raise ModDirectoryError(f"{self.modpath} is not a directory.")
        self.name = self.modpath.name
        self.config = config or HelperConfig()

        datadir = find_data_dir(self.modpath)
        if datadir is None:
            raise ModDirectoryError(
                f"{self.modpath} does not contain a valid MCM Helper-using mod."
            )
        self.datadir = datadir
        self._translations: dict[str, TranslationFile] | None = None
        logger.debug("mod %s: data dir %s", self.name, self.datadir)

    # ── translation files ───────────────────────────────────────────

    def translations_dir(self) -> Path | None:
        return _child_path(self.datadir, "Interface", "Translations")

    def translation_files(self) -> dict[str, TranslationFile]:
        """Map lower-cased language tag -> ``TranslationFile`` (cached)."""
        if self._translations is not None:
            return self._translations

        mapping: dict[str, TranslationFile] = {}
        search_dir = self.translations_dir()
        if search_dir is not None and search_dir.is_dir():
            for path in sorted(search_dir.iterdir()):
                if path.is_dir() or path.suffix.lower() != TRANSLATION_SUFFIX:
                    continue
                language = parse_language_tag(path.name)
                if language is None:
                    logger.debug("ignoring %s: no language suffix", path.name)
                    continue
                mapping[language.lower()] = TranslationFile(path, language, self.config)
        self._translations = mapping
        return mapping

    def languages(self) -> list[str]:
        return sorted(self.translation_files())

    def translation_file_for(self, language: str) -> TranslationFile | None:
        return self.translation_files().get(language.lower())

    def provided_translations_for(self, language: str) -> list[str]:
        """Sorted keys of *language*'s file.

        Raises ``UnknownLanguageError`` when there is no such file; an empty
        list always means an existing file with no entries.
        """
        trfile = self.translation_file_for(language)
        if trfile is None:
            raise UnknownLanguageError(
                language, [f.language for f in self.translation_files().values()]
            )
        return trfile.provided_translations()

    # ── JSON sources ────────────────────────────────────────────────

    def find_config(self) -> Path | None:
        """First ``MCM/Config/<Mod>/config.json``, or ``None``."""
        config_root = _child_path(self.datadir, "MCM", "Config")
        if config_root is None or not config_root.is_dir():
            return None
        for sub in sorted(config_root.iterdir()):
            if not sub.is_dir():
                continue
            candidate = _child(sub, "config.json")
            if candidate is not None and candidate.is_file():
                return candidate
        return None

    def find_i4_jsons(self) -> list[Path]:
        """Inventory Injector JSON files for this mod."""
        search_dir = _child_path(self.datadir, "SKSE", "Plugins", "InventoryInjector")
        if search_dir is None or not search_dir.is_dir():
            return []
        return sorted(
            p for p in search_dir.iterdir()
            if p.is_file() and p.suffix.lower() == ".json"
        )

    def required_sources(self) -> list[Path]:
        """Every JSON document scanned for required keys."""
        sources = self.find_i4_jsons()
        config = self.find_config()
        if config is not None:
            sources.append(config)
        for rel in self.config.extra_json_sources:
            sources.append(self.datadir / rel)
        return sources
