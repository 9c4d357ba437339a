"""Shared constants."""

from modmsg_charset.core.constants import (
    COLUMN_WIDTH,
    CP437_TO_UNICODE,
    LINE_FEED,
    MODULE_EXTENSIONS,
    SEPARATOR,
)

__all__ = ["COLUMN_WIDTH", "CP437_TO_UNICODE", "LINE_FEED", "MODULE_EXTENSIONS", "SEPARATOR"]
