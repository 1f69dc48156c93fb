"""Entry points that validate paths and run a full conversion."""
import logging
from pathlib import Path

from notes2md.conversion.report import ConversionReport
from notes2md.conversion.simplenote import SimplenoteConverter
from notes2md.preflight import SourceType, verify_dest, verify_source

logger = logging.getLogger(__name__)


def process_simplenote(source_file: Path, dest_dir: Path) -> ConversionReport:
    """Convert a Simplenote JSON export into Markdown files in ``dest_dir``.

    The destination and source are checked first; those errors, and errors
    reading or parsing the export, are raised before anything is written.
    Failures of individual notes are only recorded in the returned report.
    """
    source_file = Path(source_file)
    dest_dir = Path(dest_dir)

    verify_dest(dest_dir)
    verify_source(source_file, SourceType.FILE)

    converter = SimplenoteConverter(dest_dir)
    report = converter.convert_file(source_file)
    logger.info(
        f"Converted {source_file}: {report.written} written, {report.failed} failed"
    )
    return report
