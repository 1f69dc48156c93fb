"""Map raw export records onto normalized Markdown notes."""
from notes2md.conversion.title import derive_title
from notes2md.models.schema import MarkdownMeta, MarkdownNote, Partition, RawNoteRecord


def normalize_line_endings(content: str) -> str:
    return content.replace("\r\n", "\n")


def transform_note(record: RawNoteRecord, partition: Partition) -> MarkdownNote:
    """Build the Markdown representation of ``record``.

    Timestamps are carried through untouched. ``deleted`` is only set for
    trashed notes and ``favorited`` is never set, since the export has no
    such concept.
    """
    meta = MarkdownMeta(
        title=derive_title(record.content),
        created=record.creation_date,
        modified=record.last_modified,
        deleted=True if partition.deleted else None,
        pinned=record.pinned,
        tags=list(record.tags) if record.tags is not None else None,
    )
    return MarkdownNote(meta=meta, content=normalize_line_endings(record.content))
