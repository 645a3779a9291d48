"""TranslationLine — one line of a translation file."""

from __future__ import annotations

from dataclasses import dataclass

from . import LineKind


@dataclass(frozen=True, slots=True)
class TranslationLine:
    """A ``KEY<TAB>VALUE`` entry or a passthrough line kept verbatim.

    ``raw`` is the line as read, without its terminator.  Entries built in
    memory have ``raw`` set to their rendered form.
    """

    kind: LineKind
    raw: str
    key: str = ""
    value: str = ""

    @classmethod
    def entry(cls, key: str, value: str) -> "TranslationLine":
        return cls(LineKind.ENTRY, f"{key}\t{value}", key, value)

    @classmethod
    def passthrough(cls, raw: str) -> "TranslationLine":
        return cls(LineKind.PASSTHROUGH, raw)

    @property
    def is_entry(self) -> bool:
        return self.kind is LineKind.ENTRY

    def render(self) -> str:
        if self.is_entry:
            return f"{self.key}\t{self.value}"
        return self.raw
