"""CP437 (IBM PC) glyph transcoding."""

from modmsg_charset.core.constants import CP437_TO_UNICODE, LINE_FEED


# Only the byte values whose CP437 glyph differs from the value itself
TRANSCODE_TABLE: dict[int, int] = {
    idx: ord(char)
    for idx, char in enumerate(CP437_TO_UNICODE)
    if idx != LINE_FEED and ord(char) != idx
}


def transcode(codepoint: int) -> int:
    """Return the code point of the CP437 glyph for ``codepoint``.

    Values without a special glyph (line feed, printable ASCII, anything
    above 0xFF) come back unchanged.
    """
    return TRANSCODE_TABLE.get(codepoint, codepoint)
