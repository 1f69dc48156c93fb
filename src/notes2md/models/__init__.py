"""Models for notes2md."""
from .schema import (
    MarkdownMeta, MarkdownNote, NoteCollection, NoteOutcome, Partition, RawNoteRecord
)

__all__ = [
    "MarkdownMeta",
    "MarkdownNote",
    "NoteCollection",
    "NoteOutcome",
    "Partition",
    "RawNoteRecord",
]
