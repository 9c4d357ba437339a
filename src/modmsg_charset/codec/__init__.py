"""CP437 transcoding and UTF-8 conversion."""

from modmsg_charset.codec.cp437 import TRANSCODE_TABLE, transcode
from modmsg_charset.codec.utf8 import (
    codepoints_to_utf8,
    grapheme_count,
    remap_codepoints,
    transcode_message,
    utf8_to_codepoints,
)

__all__ = [
    "TRANSCODE_TABLE",
    "transcode",
    "utf8_to_codepoints",
    "codepoints_to_utf8",
    "remap_codepoints",
    "transcode_message",
    "grapheme_count",
]
