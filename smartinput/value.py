"""
Immutable snapshot of a text field: its content and cursor/selection.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

BACKSPACE = "\b"


def clamp(offset: int, length: int) -> int:
    """Clamp an offset into [0, length]."""
    if offset < 0:
        return 0
    if offset > length:
        return length
    return offset


@dataclass(frozen=True)
class EditValue:
    """
    Text plus selection, offsets are str indices.

    selection_start == selection_end means a collapsed caret.
    Invariant: 0 <= selection_start <= selection_end <= len(text).
    """
    text: str = ""
    selection_start: int = 0
    selection_end: int = 0

    def __post_init__(self):
        if not (0 <= self.selection_start <= self.selection_end <= len(self.text)):
            raise ValueError(
                f"Invalid selection: [{self.selection_start}, {self.selection_end}] "
                f"for text of length {len(self.text)}"
            )

    # ---------------- constructors ---------------- #
    @classmethod
    def empty(cls) -> EditValue:
        return cls()

    @classmethod
    def at_end(cls, text: str) -> EditValue:
        """Caret collapsed after the last character."""
        return cls(text, len(text), len(text))

    @classmethod
    def collapsed(cls, text: str, offset: int) -> EditValue:
        """Caret collapsed at offset, clamped to the text bounds."""
        pos = clamp(offset, len(text))
        return cls(text, pos, pos)

    # ---------------- views ---------------- #
    @property
    def is_collapsed(self) -> bool:
        return self.selection_start == self.selection_end

    @property
    def caret(self) -> int:
        return self.selection_end

    @property
    def selected_text(self) -> str:
        return self.text[self.selection_start:self.selection_end]

    @property
    def text_before_selection(self) -> str:
        return self.text[:self.selection_start]

    @property
    def text_after_selection(self) -> str:
        return self.text[self.selection_end:]

    # ---------------- derived values ---------------- #
    def with_text(self, text: str) -> EditValue:
        """Same selection on another text; offsets clamped to the new length."""
        n = len(text)
        return EditValue(text, clamp(self.selection_start, n), clamp(self.selection_end, n))

    def with_selection(self, start: int, end: int | None = None) -> EditValue:
        n = len(self.text)
        s = clamp(start, n)
        e = s if end is None else clamp(end, n)
        if e < s:
            s, e = e, s
        return replace(self, selection_start=s, selection_end=e)

    def replace_selection(self, insert: str) -> EditValue:
        """
        What a plain platform text field shows after typing or pasting
        `insert` over the current selection.
        """
        text = self.text_before_selection + insert + self.text_after_selection
        return EditValue.collapsed(text, self.selection_start + len(insert))

    def delete_backward(self) -> EditValue:
        """Backspace: remove the selection, or one character before the caret."""
        if not self.is_collapsed:
            return self.replace_selection("")
        if self.selection_start == 0:
            return self
        pos = self.selection_start - 1
        return EditValue.collapsed(self.text[:pos] + self.text[pos + 1:], pos)

    def keystroke(self, key: str) -> EditValue:
        """Candidate value produced by one key press (BACKSPACE or text)."""
        if key == BACKSPACE:
            return self.delete_backward()
        return self.replace_selection(key)


__all__ = ["EditValue", "BACKSPACE", "clamp"]
