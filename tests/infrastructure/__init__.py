"""
Unified test infrastructure for smart-input.

Modules:
- file_utils: Utilities for creating files and directories
- edit_utils: Building EditValues and running edits through chains
"""

from .file_utils import write, write_fields_yaml
from .edit_utils import apply_edit, run_edit, val, assert_well_formed

__all__ = [
    # File utilities
    "write", "write_fields_yaml",

    # Edit utilities
    "apply_edit", "run_edit", "val", "assert_well_formed",
]
