"""Song message extraction from module files."""

import logging
from pathlib import Path

from modmsg_charset.module.record import ModuleFormat, ModuleMessage, ParseFailure

_LOGGER = logging.getLogger(__name__)

# Raw message bytes are taken one byte per code point
RAW_CHARSET = "latin-1"

IT_ID = b"IMPM"
IT_HEADER_SIZE = 0xC0
IT_SPECIAL_MESSAGE = 0x01

MTM_ID = b"MTM"
MTM_HEADER_SIZE = 66
MTM_SAMPLE_SIZE = 37
MTM_ORDER_TABLE_SIZE = 128
MTM_TRACK_SIZE = 192
MTM_COMMENT_WIDTH = 40

C669_IDS = (b"if", b"JN")
C669_HEADER_SIZE = 0x1F1
C669_MESSAGE_SIZE = 108
C669_COMMENT_WIDTH = 36
C669_MAX_SAMPLES = 64
C669_MAX_PATTERNS = 128
C669_MAX_ORDERS = 128


def detect_format(data: bytes) -> ModuleFormat | None:
    """Identify the module format from its signature."""
    if data[0:4] == IT_ID:
        return ModuleFormat.IMPULSE
    if data[0:3] == MTM_ID:
        return ModuleFormat.MULTITRACKER
    if data[0:2] in C669_IDS and _plausible_669(data):
        return ModuleFormat.COMPOSER_669
    return None


def _plausible_669(data: bytes) -> bool:
    """Sample, pattern and loop order counts must be in range."""
    if len(data) < 113:
        # too short to tell; parsing reports the truncation
        return True
    num_samples, num_patterns, loop_order = data[110], data[111], data[112]
    return (
        num_samples <= C669_MAX_SAMPLES
        and num_patterns <= C669_MAX_PATTERNS
        and loop_order < C669_MAX_ORDERS
    )


def load_message(path: str | Path) -> ModuleMessage | ParseFailure:
    """Read the song message of a module file on disk."""
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        return ParseFailure(path, e.strerror or str(e))

    return parse_message_bytes(data, path)


def parse_message_bytes(data: bytes, path: str | Path = "<bytes>") -> ModuleMessage | ParseFailure:
    """Extract the song message from raw module bytes."""
    path = Path(path)
    module_format = detect_format(data)

    if module_format is ModuleFormat.IMPULSE:
        result = _parse_it(data, path)
    elif module_format is ModuleFormat.MULTITRACKER:
        result = _parse_mtm(data, path)
    elif module_format is ModuleFormat.COMPOSER_669:
        result = _parse_669(data, path)
    else:
        return ParseFailure(path, "unrecognised module format")

    if isinstance(result, ModuleMessage):
        _LOGGER.debug(
            "%s: %s module, %d message bytes",
            path, module_format.label, len(result.message),
        )
    return result


def _parse_it(data: bytes, path: Path) -> ModuleMessage | ParseFailure:
    if len(data) < IT_HEADER_SIZE:
        return ParseFailure(path, "truncated Impulse Tracker header")

    title = _decode_field(data[4:30])
    special = int.from_bytes(data[0x2E:0x30], "little")
    length = int.from_bytes(data[0x36:0x38], "little")
    offset = int.from_bytes(data[0x38:0x3C], "little")

    if not special & IT_SPECIAL_MESSAGE or length == 0:
        return ModuleMessage(path, ModuleFormat.IMPULSE, title)

    if offset + length > len(data):
        return ParseFailure(path, "song message extends past end of file")

    raw = data[offset:offset + length].split(b"\x00", 1)[0]
    raw = raw.replace(b"\r\n", b"\n").replace(b"\r", b"\n")

    return ModuleMessage(path, ModuleFormat.IMPULSE, title, _to_utf8(raw))


def _parse_mtm(data: bytes, path: Path) -> ModuleMessage | ParseFailure:
    if len(data) < MTM_HEADER_SIZE:
        return ParseFailure(path, "truncated MultiTracker header")

    title = _decode_field(data[4:24])
    num_tracks = int.from_bytes(data[24:26], "little")
    last_pattern = data[26]
    comment_length = int.from_bytes(data[28:30], "little")
    num_samples = data[30]

    if comment_length == 0:
        return ModuleMessage(path, ModuleFormat.MULTITRACKER, title)

    offset = (
        MTM_HEADER_SIZE
        + num_samples * MTM_SAMPLE_SIZE
        + MTM_ORDER_TABLE_SIZE
        + num_tracks * MTM_TRACK_SIZE
        + (last_pattern + 1) * 32 * 2
    )
    if offset + comment_length > len(data):
        return ParseFailure(path, "song message extends past end of file")

    raw = _join_fixed_lines(data[offset:offset + comment_length], MTM_COMMENT_WIDTH)
    return ModuleMessage(path, ModuleFormat.MULTITRACKER, title, _to_utf8(raw))


def _parse_669(data: bytes, path: Path) -> ModuleMessage | ParseFailure:
    if len(data) < C669_HEADER_SIZE:
        return ParseFailure(path, "truncated 669 header")

    raw = _join_fixed_lines(data[2:2 + C669_MESSAGE_SIZE], C669_COMMENT_WIDTH)
    return ModuleMessage(path, ModuleFormat.COMPOSER_669, message=_to_utf8(raw))


def _join_fixed_lines(block: bytes, width: int) -> bytes:
    """Turn a block of fixed-width, NUL padded lines into LF separated text."""
    lines = [
        block[i:i + width].rstrip(b"\x00 ").replace(b"\x00", b" ")
        for i in range(0, len(block), width)
    ]
    while lines and not lines[-1]:
        lines.pop()
    return b"\n".join(lines)


def _decode_field(field: bytes) -> str:
    return field.split(b"\x00", 1)[0].rstrip(b" ").decode(RAW_CHARSET)


def _to_utf8(raw: bytes) -> bytes:
    return raw.decode(RAW_CHARSET).encode("utf-8")
