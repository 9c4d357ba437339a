"""UTF-8 <-> code point conversion and the CP437 remapping pipeline."""

from collections.abc import Iterable

from modmsg_charset.codec.cp437 import transcode
from modmsg_charset.core.constants import MAX_CODEPOINT, SURROGATES
from modmsg_charset.errors import DecodeError, EncodeError


def utf8_to_codepoints(data: bytes) -> list[int]:
    """Strictly decode UTF-8 bytes into a list of code points."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(e.reason, e.start) from e
    return [ord(char) for char in text]


def codepoints_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8, rejecting non-scalar values."""
    chars: list[str] = []
    for index, codepoint in enumerate(codepoints):
        if not 0 <= codepoint <= MAX_CODEPOINT or codepoint in SURROGATES:
            raise EncodeError(codepoint, index)
        chars.append(chr(codepoint))
    return "".join(chars).encode("utf-8")


def remap_codepoints(codepoints: Iterable[int]) -> list[int]:
    """Reinterpret every code point as a CP437 byte value."""
    return [transcode(c) for c in codepoints]


def transcode_message(data: bytes) -> bytes:
    """
    Show what a UTF-8 message would read as if its code points were CP437.

    Raises:
        DecodeError: ``data`` is not valid UTF-8
        EncodeError: remapping produced a value outside the Unicode range
    """
    return codepoints_to_utf8(remap_codepoints(utf8_to_codepoints(data)))


def grapheme_count(data: bytes) -> int:
    """
    Count display units in UTF-8 bytes, one per encoded code point.

    A lead byte swallows every continuation byte (``10xxxxxx``) after it.
    Combining marks and joined emoji each count on their own.
    """
    i = 0
    count = 0

    while i < len(data):
        if data[i] & 0x80:
            i += 1
            while i < len(data) and (data[i] & 0xC0) == 0x80:
                i += 1
        else:
            i += 1
        count += 1

    return count
