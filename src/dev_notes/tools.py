"""
Tool Dispatcher - routes named tool calls to the note store.
Every outcome, including faults, comes back as a ToolResult; nothing is raised to the caller.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .logger import logger
from .store import NoteNotFoundError, NoteStore, format_timestamp

TOOL_NAMES = ("save_note", "list_notes", "read_note")


@dataclass
class ToolResult:
    text: str
    is_error: bool = False


def _error(text: str) -> ToolResult:
    return ToolResult(text=text, is_error=True)


class NoteTools:
    """Stateless router over the save/list/read note operations."""

    def __init__(self, store: NoteStore):
        self.store = store
        self._handlers: Dict[str, Callable[[Mapping[str, Any]], ToolResult]] = {
            "save_note": self.save_note,
            "list_notes": self.list_notes,
            "read_note": self.read_note,
        }

    def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning(f"Unknown tool requested: {name}")
            return _error(f"Unknown tool: {name}")
        logger.info(f"Tool call: {name}")
        return handler(arguments or {})

    def save_note(self, args: Mapping[str, Any]) -> ToolResult:
        title = args.get("title")
        content = args.get("content")
        if not title or not content:
            return _error("Error: Both title and content are required")

        try:
            filename = self.store.save(title, content)
        except Exception as e:
            logger.error(f"Failed to save note '{title}': {e}")
            return _error(f"Error saving note: {e}")

        logger.info(f"Saved note: {filename}")
        return ToolResult(f"Note saved successfully: {filename}")

    def list_notes(self, args: Mapping[str, Any]) -> ToolResult:
        try:
            notes = self.store.list()
        except Exception as e:
            logger.error(f"Failed to list notes: {e}")
            return _error(f"Error listing notes: {e}")

        if not notes:
            return ToolResult(f"No notes found in {self.store.notes_dir}")

        entries = "\n".join(
            f"- **{note.title}** ({note.filename})\n"
            f"  Last modified: {format_timestamp(note.last_modified)}"
            for note in notes
        )
        return ToolResult(f"Found {len(notes)} note(s):\n\n{entries}")

    def read_note(self, args: Mapping[str, Any]) -> ToolResult:
        title = args.get("title")
        if not title:
            return _error("Error: Title is required")

        try:
            content = self.store.read(title)
        except NoteNotFoundError as e:
            return _error(str(e))
        except Exception as e:
            logger.error(f"Failed to read note '{title}': {e}")
            return _error(f"Error reading note: {e}")

        return ToolResult(f"# {title}\n\n{content}")
