"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — every check passed, or an update completed
  1   Violation — missing translations, or config.json fails the schema
  2   Error — unknown language, unreadable/undecodable file, bad mod dir
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
