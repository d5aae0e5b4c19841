"""Diagnostics log commands for tsdecl."""

import typer
from pathlib import Path
from rich.console import Console
from rich.table import Table

from ..logging import DIAGNOSTICS_LOG_FILE, get_logs_path, parse_log_file, summarize

app = typer.Typer(help="Inspect translation diagnostics.")
console = Console()


@app.command("show")
def logs_show(
    lines: int = typer.Option(50, "--lines", "-n", help="Number of recent lines to show"),
    event: str = typer.Option("", "--event", "-e", help="Only show this event type"),
    base: Path = typer.Option(Path("."), "--base", "-b", help="Base path"),
):
    """Show recent diagnostic entries."""
    entries = parse_log_file(base)

    if event:
        entries = [e for e in entries if e["event"] == event]

    if not entries:
        console.print("[yellow]No diagnostics found.[/yellow]")
        return

    for entry in entries[-lines:]:
        ts = entry["timestamp"][:19]  # Trim microseconds
        console.print(f"[dim]{ts}[/] [yellow]{entry['event']}[/] {entry['detail']}")


@app.command("summary")
def logs_summary(
    base: Path = typer.Option(Path("."), "--base", "-b", help="Base path"),
):
    """Count diagnostics per type name.

    Useful for spotting host types that need an alias entry.
    """
    entries = parse_log_file(base)

    if not entries:
        console.print("[yellow]No diagnostics found.[/yellow]")
        return

    table = Table(title="Translation Diagnostics")
    table.add_column("Event", style="cyan")
    table.add_column("Detail")
    table.add_column("Count", style="green", justify="right")

    for event_type, counts in sorted(summarize(entries).items()):
        for detail, count in counts.most_common():
            table.add_row(event_type, detail, str(count))

    console.print(table)


@app.command("clear")
def logs_clear(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    base: Path = typer.Option(Path("."), "--base", "-b", help="Base path"),
):
    """Clear the diagnostics log file."""
    log_file = get_logs_path(base) / DIAGNOSTICS_LOG_FILE

    if not log_file.exists():
        console.print("[yellow]No log file to clear.[/yellow]")
        return

    if not force:
        confirm = typer.confirm("Clear all diagnostics?")
        if not confirm:
            raise typer.Abort()

    log_file.unlink()
    console.print("[green]Log file cleared.[/green]")
