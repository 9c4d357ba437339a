"""Exceptions raised while transcoding and comparing song messages."""


class CharsetError(Exception):
    """Base class for all transcoding errors."""


class DecodeError(CharsetError, ValueError):
    """Message bytes are not valid UTF-8."""

    def __init__(self, reason: str, offset: int = 0):
        self.reason = reason
        self.offset = offset
        super().__init__(f"invalid UTF-8 at byte {offset}: {reason}")


class EncodeError(CharsetError, ValueError):
    """A code point cannot be encoded as UTF-8."""

    def __init__(self, codepoint: int, index: int = 0):
        self.codepoint = codepoint
        self.index = index
        super().__init__(f"code point {codepoint:#x} at index {index} is not a Unicode scalar value")


class LineCountMismatch(CharsetError):
    """
    Original and transcoded messages split into different line counts.

    Transcoding never touches line feeds, so this signals a bug in the
    pipeline rather than a problem with the input file.
    """

    def __init__(self, original_lines: int, transcoded_lines: int):
        self.original_lines = original_lines
        self.transcoded_lines = transcoded_lines
        super().__init__(
            f"size mismatch: {original_lines} original lines, "
            f"{transcoded_lines} transcoded lines"
        )
