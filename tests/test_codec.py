"""Tests for the CP437 table, UTF-8 conversion and grapheme counting."""

import pytest

from modmsg_charset.codec import (
    TRANSCODE_TABLE,
    codepoints_to_utf8,
    grapheme_count,
    remap_codepoints,
    transcode,
    transcode_message,
    utf8_to_codepoints,
)
from modmsg_charset.errors import DecodeError, EncodeError


CONTROL_GLYPHS = {
    0x00: 0x2400, 0x01: 0x263A, 0x02: 0x263B, 0x03: 0x2665,
    0x04: 0x2666, 0x05: 0x2663, 0x06: 0x2660, 0x07: 0x2022,
    0x08: 0x25D8, 0x09: 0x25CB, 0x0B: 0x2642,
    0x0C: 0x2640, 0x0D: 0x266A, 0x0E: 0x266B, 0x0F: 0x263C,
    0x10: 0x25BA, 0x11: 0x25C4, 0x12: 0x2195, 0x13: 0x203C,
    0x14: 0x00B6, 0x15: 0x00A7, 0x16: 0x25AC, 0x17: 0x21A8,
    0x18: 0x2191, 0x19: 0x2193, 0x1A: 0x2192, 0x1B: 0x2190,
    0x1C: 0x221F, 0x1D: 0x2194, 0x1E: 0x25B2, 0x1F: 0x25BC,
    0x7F: 0x2302,
}


class TestTranscode:
    """Tests for the CP437 glyph table."""

    def test_printable_ascii_is_identity(self) -> None:
        for b in range(0x20, 0x7F):
            assert transcode(b) == b

    def test_line_feed_is_identity(self) -> None:
        assert transcode(0x0A) == 0x0A
        assert 0x0A not in TRANSCODE_TABLE

    def test_control_glyphs(self) -> None:
        for b, expected in CONTROL_GLYPHS.items():
            assert transcode(b) == expected, hex(b)

    def test_high_half_matches_cp437_codec(self) -> None:
        for b in range(0x80, 0x100):
            assert transcode(b) == ord(bytes([b]).decode("cp437")), hex(b)

    def test_known_glyphs(self) -> None:
        assert transcode(0x90) == 0xC9   # É
        assert transcode(0xB0) == 0x2591  # light shade
        assert transcode(0xE6) == 0xB5   # micro sign, not Greek mu
        assert transcode(0xFF) == 0xA0   # no-break space

    def test_table_covers_every_special_value(self) -> None:
        assert len(TRANSCODE_TABLE) == len(CONTROL_GLYPHS) + 128

    def test_above_byte_range_passes_through(self) -> None:
        for c in (0x100, 0x2591, 0x1F600, 0x10FFFF):
            assert transcode(c) == c


class TestUtf8Conversion:
    """Tests for UTF-8 <-> code point conversion."""

    def test_decode_ascii(self) -> None:
        assert utf8_to_codepoints(b"abc") == [0x61, 0x62, 0x63]

    def test_decode_multibyte(self) -> None:
        assert utf8_to_codepoints("\u00e9\u2591\U0001F600".encode("utf-8")) == [0xE9, 0x2591, 0x1F600]

    def test_decode_empty(self) -> None:
        assert utf8_to_codepoints(b"") == []

    @pytest.mark.parametrize("data", [
        b"\xff",                 # invalid lead byte
        b"\x80abc",              # stray continuation byte
        b"\xc0\xaf",             # overlong '/'
        b"\xe2\x82",             # truncated sequence
        b"\xed\xa0\x80",         # encoded surrogate
    ])
    def test_decode_rejects_malformed(self, data: bytes) -> None:
        with pytest.raises(DecodeError):
            utf8_to_codepoints(data)

    def test_decode_error_reports_offset(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            utf8_to_codepoints(b"ok\xff")
        assert exc_info.value.offset == 2

    def test_round_trip(self) -> None:
        for text in ("", "Hello", "Ça va?\n╔═╗", "日本語 😀"):
            data = text.encode("utf-8")
            assert codepoints_to_utf8(utf8_to_codepoints(data)) == data

    def test_encode_rejects_out_of_range(self) -> None:
        with pytest.raises(EncodeError) as exc_info:
            codepoints_to_utf8([0x41, 0x110000])
        assert exc_info.value.codepoint == 0x110000
        assert exc_info.value.index == 1

    def test_encode_rejects_negative_and_surrogate(self) -> None:
        with pytest.raises(EncodeError):
            codepoints_to_utf8([-1])
        with pytest.raises(EncodeError):
            codepoints_to_utf8([0xD800])


class TestTranscodeMessage:
    """Tests for the decode-remap-encode pipeline."""

    def test_ascii_unchanged(self) -> None:
        assert transcode_message(b"Hello") == b"Hello"

    def test_c1_control_becomes_accented_letter(self) -> None:
        assert transcode_message("\u0090t\u0082".encode("utf-8")) == "\u00c9t\u00e9".encode("utf-8")

    def test_line_feeds_survive(self) -> None:
        result = transcode_message("a\n°\nb\n".encode("utf-8"))
        assert result.count(b"\n") == 3

    def test_remap_leaves_wide_codepoints(self) -> None:
        assert remap_codepoints([0x263A, 0x01]) == [0x263A, 0x263A]

    def test_malformed_input_propagates(self) -> None:
        with pytest.raises(DecodeError):
            transcode_message(b"\x90")


class TestGraphemeCount:
    """Tests for display unit counting."""

    def test_empty(self) -> None:
        assert grapheme_count(b"") == 0

    def test_ascii(self) -> None:
        assert grapheme_count(b"abc") == 3

    def test_three_byte_sequence(self) -> None:
        assert grapheme_count("░ab".encode("utf-8")) == 3

    def test_four_byte_sequence(self) -> None:
        assert grapheme_count("😀".encode("utf-8")) == 1

    def test_combining_mark_counts_separately(self) -> None:
        assert grapheme_count("e\u0301".encode("utf-8")) == 2

    def test_lone_continuation_bytes_do_not_overrun(self) -> None:
        assert grapheme_count(b"\xc3") == 1
        assert grapheme_count(b"a\xe2\x82") == 2
