"""Reconciliation — required keys versus the keys a translation file provides.

*  **missing** = (required - baseline) - provided
*  **unused**  = provided - required

The baseline only excuses keys from being missing.  Both outputs are sorted
so repeated runs over unchanged files produce identical reports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Iterable, Mapping

from mcm_meta_helper.errors import UnknownLanguageError
from mcm_meta_helper.translation.file import TranslationFile

REPORT_SCHEMA_VERSION = "translation_check_v1"


@dataclass(frozen=True, slots=True)
class Reconciliation:
    """Sorted differences between a required and a provided key set."""

    missing: tuple[str, ...]
    unused: tuple[str, ...]

    @property
    def is_clean(self) -> bool:
        return not self.missing and not self.unused

    @property
    def passed(self) -> bool:
        # Unused keys are reported but never fail a check.
        return not self.missing


def reconcile(
    required: Iterable[str],
    provided: Iterable[str],
    baseline: AbstractSet[str],
) -> Reconciliation:
    required_set = set(required)
    provided_set = set(provided)
    effective = required_set - baseline
    return Reconciliation(
        missing=tuple(sorted(effective - provided_set)),
        unused=tuple(sorted(provided_set - required_set)),
    )


@dataclass(frozen=True, slots=True)
class LanguageReport:
    """Reconciliation result for one language's translation file."""

    language: str
    display_name: str
    provided_count: int
    result: Reconciliation

    @property
    def missing(self) -> tuple[str, ...]:
        return self.result.missing

    @property
    def unused(self) -> tuple[str, ...]:
        return self.result.unused

    @property
    def passed(self) -> bool:
        return self.result.passed

    @property
    def is_clean(self) -> bool:
        return self.result.is_clean

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "file": self.display_name,
            "provided_count": self.provided_count,
            "missing": list(self.missing),
            "unused": list(self.unused),
            "passed": self.passed,
        }


@dataclass(frozen=True, slots=True)
class AggregateReport:
    """Per-language reports plus the combined verdict."""

    required_count: int
    reports: tuple[LanguageReport, ...]

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.reports)

    def summary(self) -> str:
        failing = [r.language for r in self.reports if not r.passed]
        parts = [
            f"Languages: {len(self.reports)}",
            f"Failing: {len(failing)}",
            f"Missing: {sum(len(r.missing) for r in self.reports)}",
            f"Unused: {sum(len(r.unused) for r in self.reports)}",
        ]
        return ", ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": REPORT_SCHEMA_VERSION,
            "required_count": self.required_count,
            "passed": self.passed,
            "languages": [r.to_dict() for r in self.reports],
        }


def reconcile_language(
    trfile: TranslationFile,
    required: AbstractSet[str],
    baseline: AbstractSet[str],
) -> LanguageReport:
    provided = trfile.provided_translations()
    return LanguageReport(
        language=trfile.language,
        display_name=trfile.display_name,
        provided_count=len(provided),
        result=reconcile(required, provided, baseline),
    )


def reconcile_all(
    files: Mapping[str, TranslationFile],
    required: AbstractSet[str],
    baseline: AbstractSet[str],
) -> AggregateReport:
    """Reconcile every language in *files*, in sorted language order.

    A language with missing keys does not stop the others from being
    evaluated.  File-level errors propagate.
    """
    reports = [
        reconcile_language(files[language], required, baseline)
        for language in sorted(files)
    ]
    return AggregateReport(required_count=len(required), reports=tuple(reports))


def select_language(
    files: Mapping[str, TranslationFile], language: str
) -> TranslationFile:
    """Look up *language* case-insensitively.

    Raises ``UnknownLanguageError`` when no file was discovered for it;
    that is never treated as "nothing missing".
    """
    wanted = language.lower()
    for tag, trfile in files.items():
        if tag.lower() == wanted:
            return trfile
    raise UnknownLanguageError(language, [f.language for f in files.values()])


def missing_for(
    trfile: TranslationFile,
    required: AbstractSet[str],
    baseline: AbstractSet[str],
) -> list[str]:
    """Sorted keys *trfile* lacks; the input to ``append_stubs``."""
    return list(reconcile(required, trfile.provided_translations(), baseline).missing)
