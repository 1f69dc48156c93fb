"""Tests for the conversion report."""
import json
from pathlib import Path

from notes2md.conversion.report import ConversionReport
from notes2md.models.schema import NoteOutcome, Partition


class TestConversionReport:
    """Test report bookkeeping."""

    def test_report_initialization(self):
        """Test report initialization."""
        report = ConversionReport()
        assert report.total_notes == 0
        assert report.written == 0
        assert report.failed == 0
        assert report.notices == []
        assert report.errors == []

    def test_add_outcomes(self):
        """Test successes and failures are counted separately."""
        report = ConversionReport()
        report.add_outcome(NoteOutcome(note_id="1", partition=Partition.ACTIVE, path=Path("a.md")))
        report.add_outcome(NoteOutcome(note_id="2", partition=Partition.TRASHED, error="bad title"))

        assert report.written == 1
        assert report.failed == 1
        assert report.written_paths == [Path("a.md")]
        assert report.errors == [{"id": "2", "partition": "trashed", "error": "bad title"}]

    def test_save_report(self, tmp_path):
        """Test saving report to file."""
        report = ConversionReport()
        report.total_notes = 2
        report.add_outcome(NoteOutcome(note_id="1", partition=Partition.ACTIVE, path=Path("a.md")))
        report.add_outcome(NoteOutcome(note_id="2", partition=Partition.ACTIVE, error="oops"))
        report.add_notice("No trashed notes found")

        report_path = tmp_path / "report.json"
        report.save_report(report_path)

        with open(report_path) as f:
            data = json.load(f)

        assert data["statistics"] == {"total_notes": 2, "written": 1, "failed": 1}
        assert data["files"] == ["a.md"]
        assert data["notices"] == ["No trashed notes found"]
        assert data["errors"][0]["error"] == "oops"

    def test_display_summary(self, capsys):
        """Test the summary lists errors."""
        report = ConversionReport()
        report.add_outcome(NoteOutcome(note_id="x1", partition=Partition.ACTIVE, error="bad"))

        report.display_summary()

        assert "x1" in capsys.readouterr().out
