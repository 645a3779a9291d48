"""Translation-file model and UCS-2 codec."""

from mcm_meta_helper.translation.codec import decode_wide, encode_wide
from mcm_meta_helper.translation.file import (
    TranslationFile,
    parse_language_tag,
    parse_lines,
    project_translations,
    stub_value,
)

__all__ = [
    "TranslationFile",
    "decode_wide",
    "encode_wide",
    "parse_language_tag",
    "parse_lines",
    "project_translations",
    "stub_value",
]
