"""Data models for the note conversion pipeline."""
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class Partition(str, Enum):
    """Named subset of an exported note collection."""
    ACTIVE = "active"
    TRASHED = "trashed"

    @property
    def deleted(self) -> bool:
        return self is Partition.TRASHED


class RawNoteRecord(BaseModel):
    """A single note as it appears in a Simplenote JSON export."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    id: str
    content: str
    creation_date: str = Field(alias="creationDate")
    last_modified: str = Field(alias="lastModified")
    # Accepted but not used for title derivation or rendering
    markdown: Optional[bool] = None
    pinned: Optional[bool] = None
    tags: Optional[List[str]] = None


class NoteCollection(BaseModel):
    """The two partitions of a Simplenote export; either may be missing."""

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    active_notes: Optional[List[RawNoteRecord]] = Field(
        default=None,
        validation_alias=AliasChoices("activeNotes", "active", "active_notes"),
    )
    trashed_notes: Optional[List[RawNoteRecord]] = Field(
        default=None,
        validation_alias=AliasChoices("trashedNotes", "trashed", "trashed_notes"),
    )

    def partitions(self) -> Iterator[Tuple[Partition, Optional[List[RawNoteRecord]]]]:
        """Yield each partition with its records, active first."""
        yield Partition.ACTIVE, self.active_notes
        yield Partition.TRASHED, self.trashed_notes

    def count(self) -> int:
        """Total number of records across both partitions."""
        return sum(len(records) for _, records in self.partitions() if records)


class MarkdownMeta(BaseModel):
    """Front-matter of a converted note.

    Field order is the order in which keys are rendered. Optional fields are
    left as ``None`` when absent and are never rendered as ``null``.
    """

    title: str
    created: str
    modified: str
    deleted: Optional[bool] = None
    favorited: Optional[bool] = None
    pinned: Optional[bool] = None
    tags: Optional[List[str]] = None

    def to_frontmatter(self) -> Dict[str, Any]:
        """Return the mapping to render, absent fields omitted."""
        return self.model_dump(exclude_none=True)


class MarkdownNote(BaseModel):
    """A normalized note ready to be serialized."""

    meta: MarkdownMeta
    content: str


class NoteOutcome(BaseModel):
    """Result of converting one note: either a written path or an error."""

    note_id: str
    partition: Partition
    title: Optional[str] = None
    path: Optional[Path] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "NoteOutcome":
        if (self.path is None) == (self.error is None):
            raise ValueError("exactly one of path or error must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.path is not None
