"""CLI entry-point for mcm_meta_helper.

Usage:
    python -m mcm_meta_helper check <language|all> [--moddir DIR] [--json]
    python -m mcm_meta_helper update [--moddir DIR] [--json]
    python -m mcm_meta_helper validate [--moddir DIR] [--json]

Global options (before or after the command):
    -m/--moddir DIR   mod directory to analyze (default: .)
    -v/--verbose      print more information as the tool runs
    -q/--quiet        print only very important information
    --config FILE     YAML settings (default: <moddir>/.mcm-meta.yaml if present)
    --json            print the result as JSON on stdout

Exit codes follow ``utils/exit_codes.py``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import yaml
from rich.console import Console

from mcm_meta_helper import __version__
from mcm_meta_helper.api import (
    check_translations,
    load_config,
    update_translations,
    validate_config,
)
from mcm_meta_helper.core.discover import ModDirectory
from mcm_meta_helper.errors import MetaHelperError
from mcm_meta_helper.reports.render import (
    render_check,
    render_schema_issues,
    render_update,
)
from mcm_meta_helper.utils.exit_codes import ExitCode
from mcm_meta_helper.utils.json_norm import stable_json_dump

logger = logging.getLogger("mcm_meta_helper")

PROG = "mcm-meta-helper"


def _global_options(*, suppress: bool) -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand.

    Subcommand copies use ``SUPPRESS`` defaults so they never overwrite a
    value given before the subcommand.
    """
    def default(value):
        return argparse.SUPPRESS if suppress else value

    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "-m",
        "--moddir",
        default=default("."),
        help="The mod directory containing the mod to analyze.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Print out more information as the tool runs.",
    )
    p.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default(False),
        help="Print out only very important information.",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=default(None),
        help="YAML settings file (default: <moddir>/.mcm-meta.yaml if present).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=default(False),
        help="Print the result as JSON on stdout.",
    )
    return p


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Help manage MCM Helper translation files by checking for missing "
            "or unused translations."
        ),
        parents=[_global_options(suppress=False)],
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")
    common = [_global_options(suppress=True)]

    check_p = sub.add_parser(
        "check",
        parents=common,
        help="Cross-check required translation strings versus the ones found in translation files.",
    )
    check_p.add_argument(
        "language",
        help="Language to check (e.g. english), or 'all'.",
    )

    sub.add_parser(
        "update",
        parents=common,
        help="Update all translation files with missing translation strings and placeholders.",
    )
    sub.add_parser(
        "validate",
        parents=common,
        help="Validate the MCM config.json file against the MCM Helper schema.",
    )
    return p


def _describe(args: argparse.Namespace) -> str:
    """Reconstruct the command line for error messages."""
    parts = [PROG]
    if args.verbose:
        parts.append("--verbose")
    if args.quiet:
        parts.append("--quiet")
    if args.moddir != ".":
        parts.append(f"--moddir '{args.moddir}'")
    if args.config_path:
        parts.append(f"--config '{args.config_path}'")
    parts.append(args.command)
    if args.command == "check":
        parts.append(args.language)
    return " ".join(parts)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False, emoji=False)


def _emit(text: str, console: Console) -> None:
    """Human output goes to stderr; styled only on a terminal."""
    if not text:
        return
    if console.is_terminal:
        console.print(text, soft_wrap=True)
    else:
        print(text, file=sys.stderr)


def _handle_check(args: argparse.Namespace, mod: ModDirectory) -> int:
    report = check_translations(mod, args.language)
    if args.json_out:
        stable_json_dump(report.to_dict(), sys.stdout)
    console = _stderr_console()
    text = render_check(
        report,
        verbose=args.verbose,
        quiet=args.quiet,
        column_width=mod.config.grid_width,
        color=console.is_terminal,
    )
    _emit(text, console)
    return ExitCode.SUCCESS if report.passed else ExitCode.VIOLATION


def _handle_update(args: argparse.Namespace, mod: ModDirectory) -> int:
    report = update_translations(mod)
    if args.json_out:
        stable_json_dump(report.to_dict(), sys.stdout)
    if not args.quiet:
        console = _stderr_console()
        rows = [(r.display_name, len(r.added)) for r in report.results]
        _emit(render_update(rows, color=console.is_terminal), console)
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace, mod: ModDirectory) -> int:
    report = validate_config(mod)
    if args.json_out:
        stable_json_dump(report.to_dict(), sys.stdout)
    console = _stderr_console()
    if not report.found:
        _emit("No MCM Helper config.json files found to check.", console)
        return ExitCode.VIOLATION
    text = render_schema_issues(
        report.display_name, report.issues, color=console.is_terminal
    )
    _emit(text, console)
    return ExitCode.SUCCESS if report.valid else ExitCode.VIOLATION


_HANDLERS = {
    "check": _handle_check,
    "update": _handle_update,
    "validate": _handle_validate,
}


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = passed, 1 = problems, 2 = error)."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    _configure_logging(args)

    try:
        config = load_config(args.moddir, args.config_path)
        mod = ModDirectory(args.moddir, config)
        return _HANDLERS[args.command](args, mod)
    except (MetaHelperError, OSError, ValueError, yaml.YAMLError) as e:
        # json.JSONDecodeError from `validate` is a ValueError.
        kind = "invalid JSON" if isinstance(e, json.JSONDecodeError) else type(e).__name__
        logger.error("%s couldn't run! (%s)", PROG, kind)
        logger.error("%s", e)
        logger.error("The command run was:\n%s", _describe(args))
        return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
