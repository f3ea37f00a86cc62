"""Display components for CLI using Rich."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from depcheck.models.report import OutdatedEntry, Report, ScanResults, VulnerabilityEntry

console = Console(soft_wrap=True)

HEURISTIC_NOTE = "Note: This is a heuristic check. Verify manually."


def show_error(message: str) -> None:
    """Display an error message."""
    console.print(f"[red]{escape(message)}[/]")


def show_hint(message: str) -> None:
    """Display a hint line."""
    console.print(f"[cyan]{escape(message)}[/]")


def show_outdated(outdated: list[OutdatedEntry]) -> None:
    """Display outdated packages.

    Args:
        outdated: Outdated entries.
    """
    if not outdated:
        console.print("[green]All packages are up to date![/]")
        return

    for entry in outdated:
        console.print(
            f"[yellow]{escape(entry.name)}: {escape(entry.installed)} -> "
            f"{escape(entry.latest)}[/]"
        )


def show_unused(unused: list[str]) -> None:
    """Display potentially unused packages.

    Args:
        unused: Package names.
    """
    if not unused:
        console.print("[green]No unused packages detected![/]")
        return

    for name in unused:
        console.print(f"[yellow]{escape(name)}[/]")
    console.print(f"[dim]{HEURISTIC_NOTE}[/]")


def show_vulnerabilities(vulnerabilities: list[VulnerabilityEntry]) -> None:
    """Display vulnerability matches.

    Args:
        vulnerabilities: Vulnerability entries.
    """
    if not vulnerabilities:
        console.print("[green]No known vulnerabilities detected![/]")
        return

    for vuln in vulnerabilities:
        console.print(
            f"[red]{escape(vuln.name)} ({escape(vuln.version)}): {escape(vuln.issue)}[/]"
        )


def show_scan_start() -> None:
    """Display the scan banner line."""
    console.print("[blue]Scanning project dependencies...[/]")


def show_scan_results(results: ScanResults) -> None:
    """Display all three sections of a scan.

    Args:
        results: Scan results.
    """
    console.print("\n[cyan]Outdated Packages:[/]")
    show_outdated(results.outdated)

    console.print("\n[cyan]Potentially Unused Packages:[/]")
    show_unused(results.unused)

    console.print("\n[cyan]Potential Vulnerabilities:[/]")
    show_vulnerabilities(results.vulnerabilities)


def show_report_summary(report: Report, report_path: Path) -> None:
    """Display the saved report location and finding counts.

    Args:
        report: Saved report.
        report_path: Where the report was written.
    """
    summary = report.get_summary()
    console.print(f"[green]Report saved to {escape(str(report_path))}[/]")
    console.print("[blue]Report Summary:[/]")
    console.print(f"[cyan]Outdated: {summary['outdated']} packages[/]")
    console.print(f"[cyan]Potentially Unused: {summary['unused']} packages[/]")
    console.print(f"[cyan]Vulnerabilities: {summary['vulnerabilities']} issues[/]")
