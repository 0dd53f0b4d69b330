"""
JSON shapes of CLI responses.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .value import EditValue


class EditValueModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    selection_start: int = Field(alias="selectionStart")
    selection_end: int = Field(alias="selectionEnd")

    @classmethod
    def of(cls, value: EditValue) -> EditValueModel:
        return cls(
            text=value.text,
            selection_start=value.selection_start,
            selection_end=value.selection_end,
        )


class FormatterModel(BaseModel):
    name: str
    params: Dict[str, Any] = Field(default_factory=dict)


class ApplyResult(BaseModel):
    """Outcome of a single edit."""
    preset: str
    formatters: List[FormatterModel]
    old: EditValueModel
    candidate: EditValueModel
    result: EditValueModel
    rejected: bool
    rewritten: bool


class TypeResult(BaseModel):
    """Outcome of replaying keystrokes through a field."""
    name: str
    keystrokes: int
    result: EditValueModel
    error: Optional[str] = None


class NamesList(BaseModel):
    names: List[str]
    defaults: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


__all__ = ["EditValueModel", "FormatterModel", "ApplyResult", "TypeResult", "NamesList"]
