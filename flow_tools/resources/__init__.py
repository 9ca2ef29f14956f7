"""Readable resources exposed next to the tools."""

from flow_tools.resources.notes import Note, NoteStore

__all__ = ["Note", "NoteStore"]
