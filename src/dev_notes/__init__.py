"""
Dev Notes Package
"""

from .slug import slugify
from .store import NoteInfo, NoteNotFoundError, NoteStore, NoteStoreError
from .tools import TOOL_NAMES, NoteTools, ToolResult

__all__ = [
    "slugify",
    "NoteInfo",
    "NoteStore",
    "NoteStoreError",
    "NoteNotFoundError",
    "NoteTools",
    "ToolResult",
    "TOOL_NAMES",
]
