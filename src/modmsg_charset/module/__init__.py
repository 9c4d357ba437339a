"""Song message extraction from tracker modules."""

from modmsg_charset.module.record import ModuleFormat, ModuleMessage, ParseFailure
from modmsg_charset.module.reader import detect_format, load_message, parse_message_bytes

__all__ = [
    "ModuleFormat",
    "ModuleMessage",
    "ParseFailure",
    "detect_format",
    "load_message",
    "parse_message_bytes",
]
