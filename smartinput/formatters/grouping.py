from __future__ import annotations

from .base import Formatter, remap_selection, require
from ..value import EditValue


class GroupingFormatter(Formatter):
    """
    Re-inserts `separator` after every `group_size` raw characters
    ("1234 5678 9012 3456" for card numbers).

    Existing separators in the candidate are dropped first, so the formatter
    is stable under repeated application.
    """
    name = "grouping"
    __slots__ = ("_group_size", "_separator")

    def __init__(self, group_size: int = 4, separator: str = " "):
        require(isinstance(group_size, int) and group_size >= 1,
                f"GroupingFormatter: group_size must be >= 1, got {group_size!r}")
        require(len(separator) == 1,
                f"GroupingFormatter: separator must be a single character, got {separator!r}")
        self._group_size = group_size
        self._separator = separator

    def ungroup(self, text: str) -> str:
        return text.replace(self._separator, "")

    def group(self, raw: str) -> str:
        n = self._group_size
        return self._separator.join(raw[i:i + n] for i in range(0, len(raw), n))

    def _grouped_offset(self, raw_offset: int) -> int:
        # one separator precedes every complete group in front of the offset,
        # except a separator that would sit right at the offset
        if raw_offset <= 0:
            return 0
        return raw_offset + (raw_offset - 1) // self._group_size

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        raw = self.ungroup(text)
        sep = self._separator

        def raw_before(offset: int) -> int:
            return offset - text.count(sep, 0, offset)

        return remap_selection(
            candidate,
            self.group(raw),
            lambda offset: self._grouped_offset(raw_before(offset)),
        )


__all__ = ["GroupingFormatter"]
