"""Reconciliation engine — missing and unused keys per language."""

from mcm_meta_helper.reconcile.engine import (
    AggregateReport,
    LanguageReport,
    Reconciliation,
    missing_for,
    reconcile,
    reconcile_all,
    reconcile_language,
    select_language,
)

__all__ = [
    "AggregateReport",
    "LanguageReport",
    "Reconciliation",
    "missing_for",
    "reconcile",
    "reconcile_all",
    "reconcile_language",
    "select_language",
]
