"""
mcm_meta_helper.api
===================

Programmatic entrypoints behind the ``check``, ``update`` and ``validate``
commands.

Goals:
  - No argparse / CLI dependencies
  - Results are dataclasses with ``to_dict()`` for JSON output
  - The SkyUI baseline is built once per call and passed explicitly

Usage::

    from mcm_meta_helper.api import check_translations, update_translations

    report = check_translations("path/to/MyMod", language="all")
    if not report.passed:
        update_translations("path/to/MyMod")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from mcm_meta_helper.baseline import load_baseline
from mcm_meta_helper.contracts.load import SchemaIssue, validate_config_file
from mcm_meta_helper.core.config import HelperConfig
from mcm_meta_helper.core.discover import ModDirectory
from mcm_meta_helper.keys.extractor import collect_required_keys
from mcm_meta_helper.reconcile.engine import (
    AggregateReport,
    missing_for,
    reconcile_all,
    reconcile_language,
    select_language,
)

logger = logging.getLogger(__name__)

ALL_LANGUAGES = "all"


def load_config(moddir: str | Path, config_path: str | Path | None = None) -> HelperConfig:
    """Explicit *config_path* wins; otherwise look for ``.mcm-meta.yaml``."""
    if config_path is not None:
        return HelperConfig.from_yaml(Path(config_path))
    return HelperConfig.discover(Path(moddir))


def _open(moddir: str | Path | ModDirectory, config: Optional[HelperConfig]) -> ModDirectory:
    if isinstance(moddir, ModDirectory):
        return moddir
    return ModDirectory(moddir, config or load_config(moddir))


def required_keys(mod: ModDirectory) -> frozenset[str]:
    """Every key referenced by the mod's config and Inventory Injector JSON."""
    return frozenset(collect_required_keys(mod.required_sources()))


# ── check ───────────────────────────────────────────────────────────


def check_translations(
    moddir: str | Path | ModDirectory = ".",
    language: str = ALL_LANGUAGES,
    *,
    config: Optional[HelperConfig] = None,
) -> AggregateReport:
    """Reconcile one language, or every language when *language* is ``all``.

    Raises
    ------
    UnknownLanguageError
        No translation file exists for *language*.
    TranslationIOError, WideTextError
        A translation file could not be read or decoded.
    """
    mod = _open(moddir, config)
    baseline = load_baseline(mod.config.extra_baseline_keys)
    required = required_keys(mod)
    files = mod.translation_files()

    if language.lower() == ALL_LANGUAGES:
        return reconcile_all(files, required, baseline)

    trfile = select_language(files, language)
    report = reconcile_language(trfile, required, baseline)
    return AggregateReport(required_count=len(required), reports=(report,))


# ── update ──────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StubResult:
    language: str
    display_name: str
    added: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "file": self.display_name,
            "added": list(self.added),
        }


@dataclass(frozen=True)
class UpdateReport:
    results: tuple[StubResult, ...] = field(default_factory=tuple)

    @property
    def total_added(self) -> int:
        return sum(len(r.added) for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "translation_update_v1",
            "total_added": self.total_added,
            "files": [r.to_dict() for r in self.results],
        }


def update_translations(
    moddir: str | Path | ModDirectory = ".",
    *,
    config: Optional[HelperConfig] = None,
) -> UpdateReport:
    """Append placeholder entries for missing keys to every translation file.

    Uses the append-only path (``TranslationFile.append_stubs``), so existing
    entries are never rewritten.  Files with nothing missing are untouched.
    """
    mod = _open(moddir, config)
    baseline = load_baseline(mod.config.extra_baseline_keys)
    required = required_keys(mod)

    results: list[StubResult] = []
    for language in mod.languages():
        trfile = mod.translation_files()[language]
        missing = missing_for(trfile, required, baseline)
        if missing:
            trfile.append_stubs(missing)
            logger.info("%s: %d stub(s) added", trfile.display_name, len(missing))
        else:
            logger.debug("%s: none needed", trfile.display_name)
        results.append(StubResult(trfile.language, trfile.display_name, tuple(missing)))
    return UpdateReport(results=tuple(results))


# ── validate ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ValidationReport:
    config_path: Optional[Path]
    issues: tuple[SchemaIssue, ...] = ()

    @property
    def found(self) -> bool:
        return self.config_path is not None

    @property
    def valid(self) -> bool:
        return self.found and not self.issues

    @property
    def display_name(self) -> str:
        if self.config_path is None:
            return "config.json"
        return f"{self.config_path.parent.name}/{self.config_path.name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "config_validation_v1",
            "config": self.display_name if self.found else None,
            "valid": self.valid,
            "issues": [i.to_dict() for i in self.issues],
        }


def validate_config(
    moddir: str | Path | ModDirectory = ".",
    *,
    config: Optional[HelperConfig] = None,
) -> ValidationReport:
    """Validate the mod's ``config.json`` against the bundled schema.

    A mod without a ``config.json`` yields a report with ``found == False``.
    """
    mod = _open(moddir, config)
    path = mod.find_config()
    if path is None:
        return ValidationReport(config_path=None)
    issues = validate_config_file(path)
    return ValidationReport(config_path=path, issues=tuple(issues))
