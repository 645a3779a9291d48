"""Enums shared across the codec, the engine and the CLI."""

from __future__ import annotations

from enum import Enum

# Leading marker of a translation-key reference in MCM / Inventory Injector JSON.
SENTINEL = "$"


class LineKind(str, Enum):
    """How a line of a translation file was classified."""

    ENTRY = "entry"
    PASSTHROUGH = "passthrough"


class DuplicateKeyPolicy(str, Enum):
    """What to do when one file defines the same key twice."""

    LAST_WINS = "last-wins"
    WARN = "warn"
    ERROR = "error"
