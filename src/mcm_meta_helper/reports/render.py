"""Plain-text rendering for the CLI.  Everything here returns strings; the
caller decides where they go (stderr for humans, stdout stays JSON-only).

With ``color=True`` the strings carry ``rich`` console markup: labels and
file names are styled and every other piece of text is escaped, so
``Text.from_markup(colored).plain`` equals the uncolored rendering.
"""

from __future__ import annotations

import shutil
from typing import Sequence

from rich.markup import escape

from mcm_meta_helper.contracts.load import SchemaIssue
from mcm_meta_helper.reconcile.engine import AggregateReport, LanguageReport

LABEL_WIDTH = 10
SEPARATOR = "---"

LANGUAGE_STYLE = "bold blue"
MISSING_STYLE = "bold red"
UNUSED_STYLE = "bold yellow"


def terminal_width() -> int:
    return shutil.get_terminal_size(fallback=(74, 24)).columns - 2


def grid_string(
    items: Sequence[str],
    column_width: int = 20,
    width: int | None = None,
) -> str:
    """Lay *items* out left to right in fixed-width columns.

    Columns widen to fit the longest item; at least one column is used even
    when the available width is smaller than that.
    """
    if not items:
        return ""
    width = terminal_width() if width is None else width
    cell = max(column_width, max(len(i) for i in items) + 2)
    columns = max(1, width // cell)
    rows = []
    for start in range(0, len(items), columns):
        chunk = items[start:start + columns]
        rows.append("".join(item.ljust(cell) for item in chunk).rstrip())
    return "\n".join(rows)


def _plural(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"


def _text(text: str, color: bool) -> str:
    return escape(text) if color else text


def _styled(text: str, style: str, color: bool) -> str:
    return f"[{style}]{escape(text)}[/]" if color else text


def _row(label: str, body: str, style: str, color: bool) -> list[str]:
    lines = body.splitlines() or [""]
    # Padding stays outside the markup.
    pad = " " * max(0, LABEL_WIDTH - len(label))
    out = [f"{_styled(label, style, color)}{pad}{_text(lines[0], color)}"]
    out.extend(f"{'':<{LABEL_WIDTH}}{_text(line, color)}" for line in lines[1:])
    return out


def render_language(
    report: LanguageReport,
    *,
    verbose: bool = False,
    quiet: bool = False,
    column_width: int = 20,
    width: int | None = None,
    color: bool = False,
) -> list[str]:
    """Rows for one language; empty when the file is clean."""
    if report.is_clean:
        return []

    lines = _row(
        report.language,
        f"{_plural(len(report.missing), 'missing translation')} found",
        LANGUAGE_STYLE,
        color,
    )
    if quiet:
        return lines

    if len(report.missing) == 1:
        lines += _row("missing", report.missing[0], MISSING_STYLE, color)
    elif report.missing:
        body = grid_string(report.missing, column_width, width)
        lines += _row("missing", body, MISSING_STYLE, color)

    if len(report.unused) == 1:
        lines += _row("unused", report.unused[0], UNUSED_STYLE, color)
    elif report.unused:
        if verbose:
            body = grid_string(report.unused, column_width, width)
        else:
            body = _plural(len(report.unused), "translation")
        lines += _row("unused", body, UNUSED_STYLE, color)
    return lines


def render_check(
    aggregate: AggregateReport,
    *,
    verbose: bool = False,
    quiet: bool = False,
    column_width: int = 20,
    width: int | None = None,
    color: bool = False,
) -> str:
    """Report for ``check``; languages separated by ``---`` rows."""
    lines: list[str] = []
    for report in aggregate.reports:
        rows = render_language(
            report,
            verbose=verbose,
            quiet=quiet,
            column_width=column_width,
            width=width,
            color=color,
        )
        if not rows:
            if verbose:
                name = _styled(report.language, LANGUAGE_STYLE, color)
                lines.append(f"{name}: no problems found")
            continue
        lines += rows
        if not quiet and len(aggregate.reports) > 1:
            lines.append(SEPARATOR)
    summary = _text(aggregate.summary(), color)
    if aggregate.passed:
        lines.append(f"✅  {summary}")
    else:
        lines.append(f"⚠️  {summary}")
    return "\n".join(lines)


def render_update(results: Sequence[tuple[str, int]], *, color: bool = False) -> str:
    """One line per file: ``<file>: N stubs added`` or ``none needed``."""
    if not results:
        return "No translation files found."
    padding = max(30, max(len(name) for name, _ in results))
    lines = []
    for name, count in results:
        status = f"{_plural(count, 'stub')} added" if count else "none needed"
        pad = " " * (padding - len(name))
        lines.append(f"{pad}{_styled(name, LANGUAGE_STYLE, color)}: {status}")
    return "\n".join(lines)


def render_schema_issues(
    display_name: str,
    issues: Sequence[SchemaIssue],
    *,
    color: bool = False,
) -> str:
    if not issues:
        name = _styled(display_name, LANGUAGE_STYLE, color)
        return f"✅  {name} is a valid MCM Helper file."
    lines = [f"⚠️  {_styled(display_name, MISSING_STYLE, color)} has errors!"]
    for issue in issues:
        lines.append(_text(f"{issue.kind}: {issue.message}", color))
        lines.append(_text(f"Instance path: {issue.instance_path or '/'}", color))
        lines.append("")
    return "\n".join(lines).rstrip("\n")
