"""Read Simplenote JSON exports and convert them into Markdown files."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from pydantic import ValidationError
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn

from notes2md.conversion.markdown import write_markdown
from notes2md.conversion.report import ConversionReport
from notes2md.conversion.transformer import transform_note
from notes2md.errors import ErrorKind, Notes2MdError
from notes2md.models.schema import NoteCollection, NoteOutcome, Partition, RawNoteRecord

console = Console()
logger = logging.getLogger(__name__)


def _format_location(loc: Sequence[Union[str, int]]) -> str:
    location = ""
    for part in loc:
        if isinstance(part, int):
            location += f"[{part}]"
        elif location:
            location += f".{part}"
        else:
            location = str(part)
    return location


def _format_validation_error(error: Dict[str, Any]) -> str:
    loc = tuple(error.get("loc", ()))
    if error.get("type") == "missing" and loc:
        parent = _format_location(loc[:-1])
        message = f"missing field `{loc[-1]}`"
    else:
        parent = _format_location(loc)
        message = error.get("msg", "invalid value")
    return f"{parent}: {message}" if parent else message


def parse_collection(data: bytes, source_path: Optional[Path] = None) -> NoteCollection:
    """Decode and validate the raw bytes of a Simplenote export.

    Raises:
        Notes2MdError: with kind ``INVALID_DATA`` when the bytes are not UTF-8,
            are not JSON, or do not match the export schema.
    """
    prefix = f"source_path: '{source_path}' " if source_path is not None else "source "
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Notes2MdError(
            ErrorKind.INVALID_DATA,
            f"{prefix}is not valid UTF-8 text ({e})",
        ) from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise Notes2MdError(
            ErrorKind.INVALID_DATA,
            f"{prefix}is not valid JSON: {e}",
        ) from e

    try:
        return NoteCollection.model_validate(raw)
    except ValidationError as e:
        details = "; ".join(_format_validation_error(err) for err in e.errors())
        raise Notes2MdError(
            ErrorKind.INVALID_DATA,
            f"{prefix}has invalid notes: {details}",
        ) from e


def load_collection(source_path: Path) -> NoteCollection:
    """Read and parse the Simplenote export at ``source_path``."""
    with open(source_path, "rb") as f:
        data = f.read()
    return parse_collection(data, source_path)


class SimplenoteConverter:
    """Convert the notes of a Simplenote export into Markdown files."""

    def __init__(self, dest_dir: Path):
        """Initialize converter with the directory notes are written to."""
        self.dest_dir = Path(dest_dir)
        self.report = ConversionReport()

    def convert_note(self, record: RawNoteRecord, partition: Partition) -> NoteOutcome:
        """Convert a single record; failures are returned, never raised."""
        title = None
        try:
            markdown = transform_note(record, partition)
            title = markdown.meta.title
            path = write_markdown(markdown, self.dest_dir)
            return NoteOutcome(note_id=record.id, partition=partition, title=title, path=path)
        except Exception as e:
            logger.error(f"Error converting {partition.value} note {record.id}: {e}")
            return NoteOutcome(
                note_id=record.id, partition=partition, title=title, error=str(e)
            )

    def convert_collection(self, collection: NoteCollection) -> ConversionReport:
        """Convert every note in ``collection``, active partition first."""
        self.report.total_notes += collection.count()

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task("Converting notes...", total=collection.count())

            for partition, records in collection.partitions():
                if records is None:
                    notice = f"No {partition.value} notes found"
                    logger.info(notice)
                    self.report.add_notice(notice)
                    continue

                for record in records:
                    progress.update(task, advance=1, description=f"Converting {record.id}")
                    self.report.add_outcome(self.convert_note(record, partition))

        return self.report

    def convert_file(self, source_path: Path) -> ConversionReport:
        """Load the export at ``source_path`` and convert all of its notes."""
        collection = load_collection(source_path)
        logger.info(f"Loaded {collection.count()} notes from {source_path}")
        return self.convert_collection(collection)
