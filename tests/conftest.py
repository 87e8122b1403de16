import sys
from datetime import datetime
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dev_notes.store import NoteStore  # noqa: E402
from dev_notes.tools import NoteTools  # noqa: E402

FIXED_NOW = datetime(2026, 10, 19, 15, 4, 5)


@pytest.fixture
def notes_dir(tmp_path):
    """Notes directory that does not exist yet."""
    return tmp_path / "dev-notes"


@pytest.fixture
def store(notes_dir):
    return NoteStore(notes_dir, clock=lambda: FIXED_NOW)


@pytest.fixture
def tools(store):
    return NoteTools(store)
