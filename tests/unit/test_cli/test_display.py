"""Tests for CLI display helpers."""

from datetime import UTC, datetime
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from depcheck.cli import display
from depcheck.models.report import OutdatedEntry, Report, ScanResults, VulnerabilityEntry


@pytest.fixture
def output(monkeypatch) -> StringIO:
    """Capture display output."""
    buffer = StringIO()
    monkeypatch.setattr(display, "console", Console(file=buffer, soft_wrap=True))
    return buffer


class TestDisplay:
    """Tests for display helpers."""

    def test_show_outdated(self, output: StringIO) -> None:
        """Test outdated entries."""
        display.show_outdated([OutdatedEntry(name="ms", installed="^1.0.0", latest="2.1.3")])
        assert "ms: ^1.0.0 -> 2.1.3" in output.getvalue()

    def test_show_unused_empty(self, output: StringIO) -> None:
        """Test the empty unused message has no note."""
        display.show_unused([])
        assert "No unused packages detected!" in output.getvalue()
        assert display.HEURISTIC_NOTE not in output.getvalue()

    def test_markup_in_names_is_escaped(self, output: StringIO) -> None:
        """Test names are printed literally."""
        display.show_vulnerabilities(
            [VulnerabilityEntry(name="[pkg]", version="1.0.0", issue="[bold]x[/bold]")]
        )
        assert "[pkg] (1.0.0): [bold]x[/bold]" in output.getvalue()

    def test_show_scan_results_sections(self, output: StringIO) -> None:
        """Test section headers."""
        display.show_scan_results(ScanResults())
        text = output.getvalue()
        assert text.index("Outdated Packages:") < text.index("Potentially Unused Packages:")
        assert text.index("Potentially Unused Packages:") < text.index("Potential Vulnerabilities:")

    def test_show_report_summary(self, output: StringIO) -> None:
        """Test summary counts."""
        report = Report(
            timestamp=datetime(2026, 1, 1, tzinfo=UTC),
            unused=["a", "b"],
        )
        display.show_report_summary(report, Path("dep-check-report.json"))

        text = output.getvalue()
        assert "Report saved to dep-check-report.json" in text
        assert "Outdated: 0 packages" in text
        assert "Potentially Unused: 2 packages" in text
        assert "Vulnerabilities: 0 issues" in text
