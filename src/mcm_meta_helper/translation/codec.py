"""UCS-2 codec for Skyrim translation files.

Translation files are little-endian UCS-2: every character is exactly one
2-byte code unit.  Python's ``utf-16-le`` codec is a superset of that (it
also accepts and produces surrogate pairs), so the checks here narrow it back
down to the Basic Multilingual Plane.

Guarantees:
  - ``decode_wide(encode_wide(s))`` returns ``s`` for every BMP string
  - a leading byte-order mark is dropped on decode and never emitted on encode
  - every failure is a ``WideTextError`` subclass naming the offending file
"""

from __future__ import annotations

import struct

from mcm_meta_helper.core.config import DEFAULT_MAX_DECODED_BYTES
from mcm_meta_helper.errors import (
    DecodeOverflowError,
    OddByteCountError,
    UnrepresentableCharacterError,
)

CODE_UNIT_WIDTH = 2
BOM = "\ufeff"

_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF


def _code_units(raw: bytes) -> tuple[int, ...]:
    return struct.unpack(f"<{len(raw) // CODE_UNIT_WIDTH}H", raw)


def decode_wide(
    raw: bytes,
    display_name: str,
    *,
    max_decoded_bytes: int = DEFAULT_MAX_DECODED_BYTES,
) -> str:
    """Decode UCS-2 LE bytes into text.

    Raises
    ------
    OddByteCountError
        ``len(raw)`` is not a multiple of the code-unit width.
    UnrepresentableCharacterError
        A code unit falls in the surrogate range, which UCS-2 cannot express.
    DecodeOverflowError
        The decoded text needs more than *max_decoded_bytes* of UTF-8.
    """
    if not raw:
        return ""
    if len(raw) % CODE_UNIT_WIDTH:
        raise OddByteCountError(display_name, f"{len(raw)} bytes")

    for index, unit in enumerate(_code_units(raw)):
        if _SURROGATE_FIRST <= unit <= _SURROGATE_LAST:
            raise UnrepresentableCharacterError(
                display_name,
                f"code unit 0x{unit:04X} at offset {index * CODE_UNIT_WIDTH}",
            )

    text = raw.decode("utf-16-le")
    if len(text.encode("utf-8")) > max_decoded_bytes:
        raise DecodeOverflowError(
            display_name, f"limit is {max_decoded_bytes} bytes"
        )
    if text.startswith(BOM):
        text = text[len(BOM):]
    return text


def encode_wide(text: str, display_name: str) -> bytes:
    """Encode *text* as UCS-2 LE bytes (no byte-order mark).

    Raises ``UnrepresentableCharacterError`` for characters outside the BMP
    and for lone surrogates.
    """
    for index, ch in enumerate(text):
        point = ord(ch)
        if point > 0xFFFF or _SURROGATE_FIRST <= point <= _SURROGATE_LAST:
            raise UnrepresentableCharacterError(
                display_name, f"U+{point:04X} at character {index}"
            )
    return text.encode("utf-16-le")
