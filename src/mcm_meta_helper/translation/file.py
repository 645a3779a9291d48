"""TranslationFile — one language's ``Interface/Translations/<mod>_<lang>.txt``.

The file is loaded lazily on first access and cached.  The ordered line
list is the single source of truth; the key -> value lookup is a projection
of it and is rebuilt whenever the lines change.

Two ways to persist changes, with different safety properties:

*  ``append_stubs()`` — fast path used by ``update``.  Encodes one new block
   and appends it at EOF in a single write.  Existing bytes are never touched,
   so a failure can at worst leave the file exactly as it was.
*  ``rewrite()`` — serializes the whole in-memory model after
   ``insert_line()`` / ``append_pair()``.  Written to a temporary file in the
   same directory and moved over the original.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from mcm_meta_helper.core.config import HelperConfig
from mcm_meta_helper.errors import (
    DuplicateKeyError,
    TranslationIOError,
    UnsavedEditsError,
)
from mcm_meta_helper.model import SENTINEL, DuplicateKeyPolicy, LineKind
from mcm_meta_helper.model.line import TranslationLine
from mcm_meta_helper.translation.codec import decode_wide, encode_wide

logger = logging.getLogger(__name__)

TRANSLATION_SUFFIX = ".txt"
# Shorter lines cannot hold a key, a tab and a value.
MIN_ENTRY_LENGTH = 4
COMMENT_MARKER = "-"

_BOM_BYTES = b"\xff\xfe"


def parse_language_tag(filename: str) -> str | None:
    """``MyMod_english.txt`` -> ``english``; ``None`` without an underscore."""
    stem = filename.replace(TRANSLATION_SUFFIX, "")
    _, sep, language = stem.partition("_")
    if not sep or not language:
        return None
    return language


def stub_value(key: str) -> str:
    """Placeholder text written for a missing key."""
    return f"translation for {key.replace(SENTINEL, '', 1)}"


def _clean(line: str) -> str:
    return line.strip().strip("\x00").strip()


def parse_lines(text: str, display_name: str = "") -> list[TranslationLine]:
    """Classify each line of decoded text as an entry or a passthrough line."""
    pieces = text.split("\n")
    if pieces and pieces[-1] == "":
        pieces.pop()

    lines: list[TranslationLine] = []
    for number, piece in enumerate(pieces, start=1):
        raw = piece.rstrip("\r")
        line = _clean(raw)
        if len(line) < MIN_ENTRY_LENGTH:
            lines.append(TranslationLine.passthrough(raw))
            continue
        key, sep, value = line.partition("\t")
        if not sep:
            if not line.startswith(COMMENT_MARKER):
                logger.debug(
                    "%s:%d: line with len=%d does not contain a tab: %s",
                    display_name, number, len(line), line,
                )
            lines.append(TranslationLine.passthrough(raw))
            continue
        lines.append(TranslationLine(LineKind.ENTRY, raw, key.strip(), value.strip()))
    return lines


def project_translations(
    lines: Iterable[TranslationLine],
    display_name: str = "",
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
) -> dict[str, str]:
    """Build the key -> value lookup from an ordered line sequence.

    Later occurrences of a key overwrite earlier ones unless *policy* is
    ``ERROR``.
    """
    mapping: dict[str, str] = {}
    for number, line in enumerate(lines, start=1):
        if not line.is_entry:
            continue
        if line.key in mapping:
            if policy is DuplicateKeyPolicy.ERROR:
                raise DuplicateKeyError(display_name, line.key, number)
            if policy is DuplicateKeyPolicy.WARN:
                logger.warning(
                    "%s:%d: %s is defined again; the later value wins",
                    display_name, number, line.key,
                )
        mapping[line.key] = line.value
    return mapping


class TranslationFile:
    """A lazily loaded translation file for one language.

    Parameters
    ----------
    path:
        Location of the ``.txt`` file.
    language:
        Language tag as it appears in the filename (display form).
    config:
        Duplicate-key policy, line terminator and decode limits.
    """

    def __init__(
        self,
        path: Path,
        language: str,
        config: HelperConfig | None = None,
    ) -> None:
        self.path = Path(path)
        self.language = language
        self.display_name = self.path.name or f"something_{language}.txt"
        self.config = config or HelperConfig()
        self._lines: list[TranslationLine] | None = None
        self._translations: dict[str, str] | None = None
        self._has_bom = False
        self._dirty = False

    @classmethod
    def from_path(
        cls, path: Path, config: HelperConfig | None = None
    ) -> "TranslationFile":
        language = parse_language_tag(Path(path).name)
        if language is None:
            raise ValueError(f"{Path(path).name}: no language tag after '_'")
        return cls(path, language, config)

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "unloaded"
        return f"TranslationFile({self.display_name!r}, {self.language!r}, {state})"

    # ── loading ──────────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self._lines is not None

    @property
    def is_dirty(self) -> bool:
        """True when in-memory edits have not been written by ``rewrite()``."""
        return self._dirty

    def _context(self, action: str) -> str:
        return f"{action} the {self.language} translation file: {self.display_name}"

    def _read_bytes(self) -> bytes:
        try:
            f = open(self.path, "rb")
        except OSError as e:
            raise TranslationIOError(f"{self._context('opening')}: {e.strerror or e}") from e
        with f:
            try:
                return f.read()
            except OSError as e:
                raise TranslationIOError(
                    f"{self._context('reading')}: {e.strerror or e}"
                ) from e

    def _loaded(self) -> tuple[list[TranslationLine], dict[str, str]]:
        """The cached ``(lines, lookup)`` pair, reading the file on first use."""
        if self._lines is not None and self._translations is not None:
            return self._lines, self._translations

        raw = self._read_bytes()
        self._has_bom = raw.startswith(_BOM_BYTES)
        text = decode_wide(
            raw, self.display_name, max_decoded_bytes=self.config.max_decoded_bytes
        )
        lines = parse_lines(text, self.display_name)
        translations = project_translations(
            lines, self.display_name, self.config.duplicate_keys
        )
        self._lines = lines
        self._translations = translations
        self._dirty = False
        logger.debug(
            "%s: %d lines, %d translations", self.display_name, len(lines), len(translations)
        )
        return lines, translations

    def load(self) -> list[TranslationLine]:
        """Return the ordered lines, reading the file on first use only."""
        return self._loaded()[0]

    def invalidate(self, *, discard_edits: bool = False) -> None:
        """Drop the cached parse; the next access reads the file again.

        Raises ``UnsavedEditsError`` while ``is_dirty`` unless
        *discard_edits* is set.
        """
        if self._dirty and not discard_edits:
            raise UnsavedEditsError(self.display_name)
        self._lines = None
        self._translations = None
        self._dirty = False

    @property
    def lines(self) -> list[TranslationLine]:
        return list(self.load())

    @property
    def translations(self) -> dict[str, str]:
        return dict(self._loaded()[1])

    def provided_translations(self) -> list[str]:
        """Sorted keys this file supplies."""
        return sorted(self._loaded()[1])

    def get(self, key: str) -> str | None:
        return self._loaded()[1].get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._loaded()[1]

    # ── in-memory edits ──────────────────────────────────────────────

    def _commit(self, lines: list[TranslationLine]) -> None:
        translations = project_translations(
            lines, self.display_name, self.config.duplicate_keys
        )
        self._lines = lines
        self._translations = translations
        self._dirty = True

    def insert_line(self, index: int, key: str, value: str) -> None:
        """Insert an entry before position *index*; persist with ``rewrite()``."""
        lines = list(self.load())
        lines.insert(index, TranslationLine.entry(key, value))
        self._commit(lines)

    def append_pair(self, key: str, value: str) -> None:
        """Add an entry after the last line; persist with ``rewrite()``."""
        lines = list(self.load())
        lines.append(TranslationLine.entry(key, value))
        self._commit(lines)

    # ── writing ──────────────────────────────────────────────────────

    def stub_block(self, keys: Iterable[str]) -> str:
        """Text of the block ``append_stubs`` would append for *keys*."""
        eol = self.config.line_terminator
        rows = ["", self.config.stub_header]
        rows.extend(f"{key}\t{stub_value(key)}" for key in keys)
        return eol.join(rows) + eol

    def _stub_lines(self, keys: list[str]) -> list[TranslationLine]:
        """The lines ``stub_block`` writes, as parsed back."""
        rows = [
            TranslationLine.passthrough(""),
            TranslationLine.passthrough(self.config.stub_header),
        ]
        rows.extend(TranslationLine.entry(key, stub_value(key)) for key in keys)
        return rows

    def append_stubs(self, keys: Iterable[str]) -> int:
        """Append a placeholder entry for each key in *keys* at EOF.

        The caller passes only keys the file lacks; they are written in the
        order given.  Returns the number of stubs written (0 writes nothing).

        Without pending edits the cached parse is dropped afterwards.  With
        pending edits the stub lines are added to the in-memory model too,
        which stays dirty; a later ``rewrite()`` writes edits and stubs.
        """
        keys = list(keys)
        if not keys:
            return 0

        payload = encode_wide(self.stub_block(keys), self.display_name)
        pending: list[TranslationLine] | None = None
        pending_translations: dict[str, str] = {}
        if self._dirty:
            pending = self.lines + self._stub_lines(keys)
            # Checked before touching the file.
            pending_translations = project_translations(
                pending, self.display_name, self.config.duplicate_keys
            )
        if not self.path.is_file():
            raise TranslationIOError(
                f"{self._context('appending to')}: file does not exist"
            )
        try:
            with open(self.path, "ab") as f:
                f.write(payload)
                f.flush()
        except OSError as e:
            raise TranslationIOError(
                f"{self._context('appending to')}: {e.strerror or e}"
            ) from e

        if pending is None:
            self.invalidate()
        else:
            self._lines = pending
            self._translations = pending_translations
        logger.debug("%s: appended %d bytes", self.display_name, len(payload))
        return len(keys)

    def render(self) -> str:
        """Whole-file text for ``rewrite()``."""
        eol = self.config.line_terminator
        lines = self.load()
        if not lines:
            return ""
        return eol.join(line.render() for line in lines) + eol

    def rewrite(self) -> None:
        """Replace the file on disk with the in-memory model."""
        payload = encode_wide(self.render(), self.display_name)
        if self._has_bom:
            payload = _BOM_BYTES + payload

        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise TranslationIOError(
                f"{self._context('rewriting')}: {e.strerror or e}"
            ) from e
        self._dirty = False
