"""
Note Store - flat directory of markdown notes.
Each note is one file named <prefix>-<slug><extension>; the directory listing is the index.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List

from .config import DEFAULT_NOTES_DIR
from .slug import slugify

TIMESTAMP_FORMAT = "%m/%d/%Y, %I:%M:%S %p"


class NoteStoreError(Exception):
    """Base error for note storage."""


class NoteNotFoundError(NoteStoreError):
    def __init__(self, filename: str):
        super().__init__(f"Note not found: {filename}")
        self.filename = filename


@dataclass
class NoteInfo:
    """Listing entry for a stored note."""

    filename: str
    #: Filename without extension, not the title the note was saved under
    title: str
    last_modified: datetime
    size: int


def format_timestamp(moment: datetime) -> str:
    """Human-readable local time, e.g. '10/19/2026, 03:04:05 PM'."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(TIMESTAMP_FORMAT)


class NoteStore:
    def __init__(
        self,
        notes_dir,
        prefix: str = "week4",
        extension: str = ".md",
        slugifier: Callable[[str], str] = slugify,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.notes_dir = Path(notes_dir)
        self.prefix = prefix
        self.extension = extension
        self._slugify = slugifier
        self._clock = clock

    @classmethod
    def from_config(cls, config: Any) -> "NoteStore":
        """Build a store from the `notes` section of a SystemConfig."""
        notes = config.get_notes_config() or {}
        notes_dir = Path(str(notes.get("dir") or DEFAULT_NOTES_DIR)).expanduser()
        return cls(
            notes_dir,
            prefix=notes.get("prefix") or "week4",
            extension=notes.get("extension") or ".md",
        )

    def ensure_directory(self) -> None:
        """Create the notes directory (and parents) if needed"""
        self.notes_dir.mkdir(parents=True, exist_ok=True)

    def filename_for(self, title: str) -> str:
        return f"{self.prefix}-{self._slugify(title)}{self.extension}"

    def path_for(self, title: str) -> Path:
        return self.notes_dir / self.filename_for(title)

    def save(self, title: str, content: str) -> str:
        """
        Write a note, replacing whatever was stored under the same slug.

        Args:
            title: Note title (slugified into the filename)
            content: Markdown body, stored verbatim below the timestamp line

        Returns:
            The filename the note was written to
        """
        self.ensure_directory()
        timestamp = format_timestamp(self._clock())
        path = self.path_for(title)
        path.write_text(f"*Created/Updated: {timestamp}*\n\n{content}", encoding="utf-8")
        return path.name

    def list(self) -> List[NoteInfo]:
        """All notes, most recently modified first."""
        self.ensure_directory()
        notes = []
        for path in self.notes_dir.iterdir():
            if not path.is_file() or not path.name.endswith(self.extension):
                continue
            stats = path.stat()
            notes.append(
                NoteInfo(
                    filename=path.name,
                    title=path.name[: -len(self.extension)],
                    last_modified=datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc),
                    size=stats.st_size,
                )
            )
        # sort() is stable, so equal mtimes keep directory order
        notes.sort(key=lambda note: note.last_modified, reverse=True)
        return notes

    def read(self, title: str) -> str:
        path = self.path_for(title)
        if not path.exists():
            raise NoteNotFoundError(path.name)
        return path.read_text(encoding="utf-8")

