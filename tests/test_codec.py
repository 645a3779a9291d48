"""Tests for the UCS-2 codec."""

from __future__ import annotations

import pytest

from mcm_meta_helper.errors import (
    DecodeOverflowError,
    OddByteCountError,
    TranslationIOError,
    UnrepresentableCharacterError,
    WideTextError,
)
from mcm_meta_helper.translation.codec import decode_wide, encode_wide


class TestDecodeWide:
    def test_empty_input_is_empty_text(self):
        assert decode_wide(b"", "x_english.txt") == ""

    def test_decodes_little_endian_units(self):
        raw = "$Foo\tvaleur élevée\r\n".encode("utf-16-le")
        assert decode_wide(raw, "x_french.txt") == "$Foo\tvaleur élevée\r\n"

    def test_cjk_text_decodes(self):
        raw = "$Foo\t設定\r\n".encode("utf-16-le")
        assert decode_wide(raw, "x_japanese.txt") == "$Foo\t設定\r\n"

    def test_leading_bom_is_dropped(self):
        raw = b"\xff\xfe" + "$Foo\tFoo".encode("utf-16-le")
        assert decode_wide(raw, "x_english.txt") == "$Foo\tFoo"

    def test_odd_byte_count_is_an_encoding_error(self):
        raw = "$Foo\tFoo".encode("utf-16-le") + b"\x00"
        with pytest.raises(OddByteCountError) as exc:
            decode_wide(raw, "x_english.txt")
        assert isinstance(exc.value, WideTextError)
        assert not isinstance(exc.value, TranslationIOError)
        assert not isinstance(exc.value, OSError)
        assert "x_english.txt might not be a valid UCS-2 file" in str(exc.value)

    def test_surrogate_pair_is_unrepresentable(self):
        # U+1F600 needs a surrogate pair in UTF-16; UCS-2 cannot hold it.
        raw = "$Foo\t\U0001F600".encode("utf-16-le")
        with pytest.raises(UnrepresentableCharacterError) as exc:
            decode_wide(raw, "x_english.txt")
        assert "cannot be represented in UCS-2" in str(exc.value)
        assert exc.value.display_name == "x_english.txt"

    def test_lone_surrogate_is_unrepresentable(self):
        raw = "$A".encode("utf-16-le") + b"\x00\xd8"
        with pytest.raises(UnrepresentableCharacterError):
            decode_wide(raw, "x_english.txt")

    def test_output_limit_overflow(self):
        raw = ("$Foo\t" + "x" * 100).encode("utf-16-le")
        with pytest.raises(DecodeOverflowError) as exc:
            decode_wide(raw, "x_english.txt", max_decoded_bytes=50)
        assert "output buffer" in str(exc.value)
        assert "x_english.txt" in str(exc.value)

    def test_output_exactly_at_limit_is_fine(self):
        raw = "abcd".encode("utf-16-le")
        assert decode_wide(raw, "x.txt", max_decoded_bytes=4) == "abcd"


class TestEncodeWide:
    def test_no_bom_is_written(self):
        assert encode_wide("$A", "x.txt") == b"$\x00A\x00"

    def test_bmp_text_survives_decode(self):
        text = "$Key\tÜbersetzung 翻訳\r\n"
        assert decode_wide(encode_wide(text, "x.txt"), "x.txt") == text

    def test_astral_character_is_rejected(self):
        with pytest.raises(UnrepresentableCharacterError) as exc:
            encode_wide("$Key\t\U0001F600", "x_english.txt")
        assert "U+1F600" in str(exc.value)
