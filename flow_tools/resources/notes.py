"""In-memory note store.

A fixed set of plain-text notes exposed as `note:///<id>` resources.
Loaded once, never mutated.
"""

from collections.abc import Mapping
from urllib.parse import urlparse

from mcp import types
from pydantic import BaseModel

from flow_tools.exceptions import ResourceNotFoundError

NOTE_MIME_TYPE = "text/plain"


class Note(BaseModel):
    """A text note."""

    title: str
    content: str


DEFAULT_NOTES: dict[str, Note] = {
    "1": Note(title="First Note", content="This is note 1"),
    "2": Note(title="Second Note", content="This is note 2"),
}


class NoteStore:
    """Read-only note lookup keyed by note id."""

    def __init__(self, notes: Mapping[str, Note] | None = None):
        self._notes = dict(DEFAULT_NOTES if notes is None else notes)

    @staticmethod
    def uri_for(note_id: str) -> str:
        return f"note:///{note_id}"

    @staticmethod
    def note_id_from_uri(uri: str) -> str:
        """Extract the note id from the URI path (`note:///1` -> `1`)."""
        path = urlparse(uri).path
        if path.startswith("/"):
            path = path[1:]
        return path

    def list_resources(self) -> list[types.Resource]:
        return [
            types.Resource(
                uri=self.uri_for(note_id),
                mimeType=NOTE_MIME_TYPE,
                name=note.title,
                description=f"A text note: {note.title}",
            )
            for note_id, note in self._notes.items()
        ]

    def read(self, uri: str) -> str:
        """Return the content of the note a URI points to.

        Raises:
            ResourceNotFoundError: Unknown note id
        """
        note_id = self.note_id_from_uri(uri)
        note = self._notes.get(note_id)
        if note is None:
            raise ResourceNotFoundError(f"Note {note_id} not found")
        return note.content
