"""Exception taxonomy.

Exit-code mapping (see ``utils/exit_codes.py``)::

    MetaHelperError and subclasses   -> ExitCode.ERROR
    a successful check with problems -> ExitCode.VIOLATION (not an exception)
"""

from __future__ import annotations


class MetaHelperError(Exception):
    """Base class for every failure this tool reports."""


class ModDirectoryError(MetaHelperError):
    """The mod directory does not look like an MCM Helper mod."""


class TranslationIOError(MetaHelperError, OSError):
    """A translation file could not be opened, read or written."""


class WideTextError(MetaHelperError, ValueError):
    """A translation file is not usable UCS-2 text."""

    reason = "The file could not be decoded"

    def __init__(self, display_name: str, detail: str = "") -> None:
        self.display_name = display_name
        self.detail = detail
        head = self.reason if not detail else f"{self.reason} ({detail})"
        super().__init__(
            f"{head};\n{display_name} might not be a valid UCS-2 file."
        )


class OddByteCountError(WideTextError):
    reason = "The byte count is not a whole number of 2-byte code units"


class DecodeOverflowError(WideTextError):
    reason = "Not enough space left in the output buffer to decode UCS-2 characters"


class UnrepresentableCharacterError(WideTextError):
    reason = "Input contained a character which cannot be represented in UCS-2"


class DuplicateKeyError(MetaHelperError, ValueError):
    """A key appears twice in one file under the ``error`` policy."""

    def __init__(self, display_name: str, key: str, line_number: int) -> None:
        self.display_name = display_name
        self.key = key
        self.line_number = line_number
        super().__init__(
            f"{display_name}: duplicate translation key {key!r} on line {line_number}"
        )


class UnsavedEditsError(MetaHelperError):
    """Dropping the cached parse would lose edits not yet written by ``rewrite()``."""

    def __init__(self, display_name: str) -> None:
        self.display_name = display_name
        super().__init__(
            f"{display_name} has unsaved edits; call rewrite() first"
        )


class UnknownLanguageError(MetaHelperError, LookupError):
    """No translation file was discovered for the requested language."""

    def __init__(self, language: str, available: list[str] | None = None) -> None:
        self.language = language
        self.available = sorted(available or [])
        msg = f"Can't find a translation file for language {language!r}"
        if self.available:
            msg += f" (found: {', '.join(self.available)})"
        super().__init__(msg)
