"""
Diff module - line-wise comparison of a message and its CP437 reading.

Pairs original and transcoded lines and lays them out in two columns
aligned on display units.
"""

from modmsg_charset.diff.differ import (
    DiffConfig,
    LinePair,
    MessageDiff,
    compare_and_report,
    diff_message,
    pad_line,
    render_report,
    split_lines,
)

__all__ = [
    "DiffConfig",
    "LinePair",
    "MessageDiff",
    "compare_and_report",
    "diff_message",
    "pad_line",
    "render_report",
    "split_lines",
]
