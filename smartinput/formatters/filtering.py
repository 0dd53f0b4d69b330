"""
Character-level filters: allowlist, no-space and single-space.

All three may shorten the text, so each one re-derives the selection by
counting what survived in front of the original offsets.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from typing import Any, Dict, List, Pattern, Tuple

from .base import Formatter, remap_selection, require
from ..errors import FormatterConfigError
from ..value import EditValue


class AllowlistFormatter(Formatter):
    """
    Keeps only the parts of the text matched by `pattern`.

    The pattern is applied with `finditer` and the non-overlapping matches are
    concatenated, so both a character class (`[0-9]`) and an anchored shape
    (`^\\d*\\.?\\d{0,2}`) work. A non-empty candidate that filters down to
    nothing is rejected.
    """
    name = "allow"
    __slots__ = ("_pattern",)

    def __init__(self, pattern: str | Pattern[str]):
        if isinstance(pattern, str):
            require(pattern != "", "AllowlistFormatter: pattern must not be empty")
            try:
                pattern = re.compile(pattern)
            except re.error as e:
                raise FormatterConfigError(f"AllowlistFormatter: invalid pattern {pattern!r}: {e}") from e
        self._pattern = pattern

    @classmethod
    def digits_only(cls) -> AllowlistFormatter:
        return cls(r"[0-9]")

    @property
    def pattern(self) -> str:
        return self._pattern.pattern

    def describe(self) -> Dict[str, Any]:
        return {"pattern": self.pattern}

    def _kept_spans(self, text: str) -> List[Tuple[int, int]]:
        return [m.span() for m in self._pattern.finditer(text) if m.end() > m.start()]

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        spans = self._kept_spans(text)
        # spans never overlap, so full length means full coverage
        if sum(e - s for s, e in spans) == len(text):
            return candidate
        if text and not spans:
            return old

        filtered = "".join(text[s:e] for s, e in spans)

        def retained_before(offset: int) -> int:
            return sum(max(0, min(e, offset) - s) for s, e in spans)

        return remap_selection(candidate, filtered, retained_before)


class NoSpaceFormatter(Formatter):
    """Removes every space character."""
    name = "no_space"
    __slots__ = ()

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        if " " not in text:
            return candidate
        spaces = [i for i, ch in enumerate(text) if ch == " "]
        # offset - number of removed spaces strictly before it
        return remap_selection(
            candidate,
            text.replace(" ", ""),
            lambda offset: offset - bisect_left(spaces, offset),
        )


class SingleSpaceFormatter(Formatter):
    """Collapses runs of consecutive spaces into one."""
    name = "single_space"
    __slots__ = ()

    def apply(self, old: EditValue, candidate: EditValue) -> EditValue:
        text = candidate.text
        if "  " not in text:
            return candidate
        out: List[str] = []
        dropped: List[int] = []
        for i, ch in enumerate(text):
            if i > 0 and ch == " " and text[i - 1] == " ":
                dropped.append(i)
            else:
                out.append(ch)
        return remap_selection(
            candidate,
            "".join(out),
            lambda offset: offset - bisect_left(dropped, offset),
        )


__all__ = ["AllowlistFormatter", "NoSpaceFormatter", "SingleSpaceFormatter"]
