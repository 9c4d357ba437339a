"""
modmsg-charset: spot CP437 song messages in tracker modules

Reads the song message embedded in a tracker module and shows how it
would read if its characters were really IBM PC code page 437.

Quick Start:
    >>> import sys
    >>> import modmsg_charset as mc
    >>> msg = mc.load_message("song.it")
    >>> if isinstance(msg, mc.ModuleMessage):
    ...     mc.compare_and_report("song.it", msg.message, mc.DiffConfig(), sys.stdout)
    ... else:
    ...     print(msg, file=sys.stderr)

Features:
    - CP437 glyph table covering control pictures and the high half
    - Strict UTF-8 <-> code point conversion
    - Two-column report aligned on encoded code points
    - Song message extraction for IT/MPTM, MTM and 669 modules
"""

__version__ = "0.1.0"

# Transcoding
from modmsg_charset.codec import (
    codepoints_to_utf8,
    grapheme_count,
    transcode,
    transcode_message,
    utf8_to_codepoints,
)

# Comparison
from modmsg_charset.diff import DiffConfig, MessageDiff, compare_and_report, diff_message

# Errors
from modmsg_charset.errors import CharsetError, DecodeError, EncodeError, LineCountMismatch

# Module files
from modmsg_charset.module import ModuleFormat, ModuleMessage, ParseFailure, load_message

__all__ = [
    # Version
    "__version__",
    # Transcoding
    "transcode",
    "utf8_to_codepoints",
    "codepoints_to_utf8",
    "transcode_message",
    "grapheme_count",
    # Comparison
    "DiffConfig",
    "MessageDiff",
    "diff_message",
    "compare_and_report",
    # Errors
    "CharsetError",
    "DecodeError",
    "EncodeError",
    "LineCountMismatch",
    # Module files
    "ModuleFormat",
    "ModuleMessage",
    "ParseFailure",
    "load_message",
]
