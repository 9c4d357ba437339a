"""Song message data structures."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ModuleFormat(Enum):
    """Module formats that carry a free-form song message."""
    IMPULSE = "it"
    MULTITRACKER = "mtm"
    COMPOSER_669 = "669"

    @property
    def label(self) -> str:
        return {
            ModuleFormat.IMPULSE: "Impulse Tracker",
            ModuleFormat.MULTITRACKER: "MultiTracker",
            ModuleFormat.COMPOSER_669: "Composer 669",
        }[self]


@dataclass
class ModuleMessage:
    """
    Song message extracted from a module file.

    ``message`` holds UTF-8 bytes with line feeds as separators; it is
    empty when the module has no message attached.
    """
    path: Path
    format: ModuleFormat
    title: str = ""
    message: bytes = b""

    @property
    def has_message(self) -> bool:
        """True if the module carries a non-empty message."""
        return bool(self.message)

    @property
    def line_count(self) -> int:
        from modmsg_charset.diff.differ import split_lines
        return len(split_lines(self.message))

    def __str__(self) -> str:
        parts = [f"Format: {self.format.label}"]
        if self.title:
            parts.append(f"Title: {self.title}")
        parts.append(f"Message: {self.line_count} lines" if self.message else "Message: (none)")
        return "\n".join(parts)


@dataclass
class ParseFailure:
    """A file that could not be read as a supported module."""
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"can't open {self.path}: {self.reason}"
