"""
Compare a song message with its CP437 reading.

Splits the original message and its transcoded counterpart into lines,
pairs them up by index and renders the pairs as two columns:

    original line, padded to the column width | transcoded line

Works on UTF-8 bytes so column padding counts encoded code points
rather than bytes or terminal cells.
"""

import logging
from dataclasses import dataclass, field
from typing import TextIO

from modmsg_charset.codec.utf8 import grapheme_count, transcode_message
from modmsg_charset.core.constants import COLUMN_WIDTH, SEPARATOR
from modmsg_charset.errors import LineCountMismatch

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffConfig:
    """Report settings, fixed before the first file is processed."""
    diff_only: bool = True
    column_width: int = COLUMN_WIDTH
    separator: str = SEPARATOR


@dataclass
class LinePair:
    """One original line next to its transcoded counterpart."""
    index: int
    original: bytes
    transcoded: bytes

    @property
    def differs(self) -> bool:
        return self.original != self.transcoded


@dataclass
class MessageDiff:
    """Result of transcoding a message."""
    original: bytes
    transcoded: bytes
    pairs: list[LinePair] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """True if transcoding altered any byte of the message."""
        return self.original != self.transcoded

    def reported_pairs(self, config: DiffConfig) -> list[LinePair]:
        if config.diff_only:
            return [pair for pair in self.pairs if pair.differs]
        return list(self.pairs)


def split_lines(data: bytes) -> list[bytes]:
    """
    Split on line feeds the way line-by-line stream reading does.

    A trailing line feed ends the last line instead of starting an empty
    one, so ``b""`` has no lines and ``b"a\\n"`` has one.
    """
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return lines


def diff_message(original: bytes) -> MessageDiff:
    """
    Transcode ``original`` and pair its lines with the result.

    Raises:
        DecodeError: ``original`` is not valid UTF-8
        EncodeError: transcoding produced an invalid code point
        LineCountMismatch: the two messages split into different line counts
    """
    transcoded = transcode_message(original)

    original_lines = split_lines(original)
    transcoded_lines = split_lines(transcoded)

    if len(original_lines) != len(transcoded_lines):
        raise LineCountMismatch(len(original_lines), len(transcoded_lines))

    pairs = [
        LinePair(i, old, new)
        for i, (old, new) in enumerate(zip(original_lines, transcoded_lines))
    ]
    return MessageDiff(original=original, transcoded=transcoded, pairs=pairs)


def pad_line(line: bytes, width: int = COLUMN_WIDTH) -> bytes:
    """Pad with spaces up to ``width`` display units; never truncate."""
    graphemes = grapheme_count(line)
    if graphemes < width:
        return line + b" " * (width - graphemes)
    return line


def render_report(filename: str, diff: MessageDiff, config: DiffConfig = DiffConfig()) -> str:
    """Render the two-column report for one file, or ``""`` if unchanged."""
    if not diff.changed:
        return ""

    parts: list[str] = [f"Difference in {filename}:\n\n"]

    for pair in diff.reported_pairs(config):
        left = pad_line(pair.original, config.column_width).decode("utf-8")
        right = pair.transcoded.decode("utf-8")
        parts.append(f"{left}{config.separator}{right}\n")

    parts.append("\n")
    return "".join(parts)


def compare_and_report(
    filename: str,
    message: bytes,
    config: DiffConfig,
    out: TextIO,
) -> bool:
    """
    Write the report for one message to ``out``.

    Nothing is written for an empty message or one that transcodes to
    itself. The report goes out in a single write.

    Returns:
        True if a report was written
    """
    if not message:
        return False

    diff = diff_message(message)
    if not diff.changed:
        _LOGGER.debug("%s: message unchanged by CP437 reading", filename)
        return False

    out.write(render_report(filename, diff, config))
    return True
