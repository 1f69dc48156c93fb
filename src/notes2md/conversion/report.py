"""Collect and present the results of a conversion run."""
import datetime
import json
from pathlib import Path
from typing import Dict, List

from rich.console import Console
from rich.table import Table

from notes2md.models.schema import NoteOutcome

console = Console()


class ConversionReport:
    """Track conversion statistics, notices and per-note failures."""

    def __init__(self):
        self.total_notes = 0
        self.outcomes: List[NoteOutcome] = []
        self.notices: List[str] = []
        self.start_time = datetime.datetime.now()

    @property
    def written(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def written_paths(self) -> List[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.succeeded]

    @property
    def errors(self) -> List[Dict[str, str]]:
        return [
            {"id": outcome.note_id, "partition": outcome.partition.value, "error": outcome.error}
            for outcome in self.outcomes
            if not outcome.succeeded
        ]

    def add_outcome(self, outcome: NoteOutcome):
        """Record the result of converting a single note."""
        self.outcomes.append(outcome)

    def add_notice(self, message: str):
        """Record an informational condition, such as an empty partition."""
        self.notices.append(message)

    def get_duration(self) -> float:
        """Get conversion duration in seconds."""
        return (datetime.datetime.now() - self.start_time).total_seconds()

    def save_report(self, report_path: Path):
        """Save conversion report to JSON file."""
        report_data = {
            "conversion_date": self.start_time.isoformat(),
            "duration_seconds": self.get_duration(),
            "statistics": {
                "total_notes": self.total_notes,
                "written": self.written,
                "failed": self.failed,
            },
            "files": [str(path) for path in self.written_paths],
            "notices": self.notices,
            "errors": self.errors,
        }

        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report_data, f, indent=2)

    def display_summary(self):
        """Display conversion summary to console."""
        console.print("\n[bold]Conversion Summary[/bold]")

        table = Table(title="Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Total Notes", str(self.total_notes))
        table.add_row("Written", str(self.written))
        table.add_row("Failed", str(self.failed))
        table.add_row("Duration", f"{self.get_duration():.2f} seconds")

        console.print(table)

        for notice in self.notices:
            console.print(f"[yellow]{notice}[/yellow]")

        errors = self.errors
        if errors:
            console.print(f"\n[red]Errors ({len(errors)}):[/red]")
            for error in errors[:5]:
                console.print(f"  • {error['id']}: {error['error']}")
            if len(errors) > 5:
                console.print(f"  ... and {len(errors) - 5} more")
