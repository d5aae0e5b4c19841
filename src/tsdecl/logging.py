"""Diagnostic channel for type translation.

Unmapped types and unhandled kinds are reported here instead of raised.
Reports are echoed to stderr and can be persisted to a log file for later
inspection.
"""

import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

# Log file location
TSDECL_LOGS_DIR = ".tsdecl-logs"
DIAGNOSTICS_LOG_FILE = "diagnostics.log"
MAX_LOG_SIZE_MB = 10

# Diagnostic event types
UNMAPPED_TYPE = "unmapped-type"
UNHANDLED_KIND = "unhandled-kind"
UNHANDLED_LINK_KIND = "unhandled-link-kind"


@dataclass
class Diagnostic:
    """A single diagnostic report."""
    timestamp: str
    event: str
    detail: str


@dataclass
class DiagnosticLog:
    """Collects diagnostics reported during generation."""
    quiet: bool = False
    entries: list[Diagnostic] = field(default_factory=list)

    def report(self, event: str, detail: str) -> None:
        """Record a diagnostic event.

        Args:
            event: Event type (unmapped-type, unhandled-kind, ...).
            detail: The offending type or element name.
        """
        entry = Diagnostic(datetime.now().isoformat(), event, detail)
        self.entries.append(entry)
        if not self.quiet:
            print(f"[{event}] {detail}", file=sys.stderr)

    def events(self, event: Optional[str] = None) -> list[str]:
        """Get reported details, optionally filtered by event type."""
        return [e.detail for e in self.entries if event is None or e.event == event]

    def clear(self) -> None:
        self.entries.clear()

    def write_log(self, base_path: Optional[Path] = None) -> int:
        """Append collected diagnostics to the log file and clear them.

        Args:
            base_path: Base path. Defaults to cwd.

        Returns:
            Number of entries written.
        """
        if not self.entries:
            return 0

        logs_path = get_logs_path(base_path)
        log_file = logs_path / DIAGNOSTICS_LOG_FILE

        # Create directory on first write
        logs_path.mkdir(parents=True, exist_ok=True)

        # Check log rotation (simple size-based)
        if log_file.exists():
            size_mb = log_file.stat().st_size / (1024 * 1024)
            if size_mb > MAX_LOG_SIZE_MB:
                backup = logs_path / f"{DIAGNOSTICS_LOG_FILE}.1"
                if backup.exists():
                    backup.unlink()
                log_file.rename(backup)

        with log_file.open("a") as f:
            for entry in self.entries:
                f.write(f"{entry.timestamp} | {entry.event} | {entry.detail}\n")

        written = len(self.entries)
        self.entries.clear()
        return written


_default_log = DiagnosticLog()


def get_diagnostics() -> DiagnosticLog:
    """Get the process-wide diagnostic channel."""
    return _default_log


def get_logs_path(base_path: Optional[Path] = None) -> Path:
    """Get the .tsdecl-logs directory path.

    Args:
        base_path: Base path for logs. Defaults to cwd.

    Returns:
        Path to .tsdecl-logs directory.
    """
    if base_path is None:
        base_path = Path.cwd()
    return base_path / TSDECL_LOGS_DIR


def parse_log_file(base_path: Optional[Path] = None) -> list[dict]:
    """Parse the diagnostics log file into structured entries.

    Args:
        base_path: Base path. Defaults to cwd.

    Returns:
        List of log entries as dicts with keys: timestamp, event, detail.
    """
    log_file = get_logs_path(base_path) / DIAGNOSTICS_LOG_FILE

    if not log_file.exists():
        return []

    entries = []
    with log_file.open("r") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue

            parts = line.split(" | ", 2)
            if len(parts) >= 2:
                entries.append({
                    "timestamp": parts[0],
                    "event": parts[1],
                    "detail": parts[2] if len(parts) > 2 else "",
                })

    return entries


def summarize(entries: list[dict]) -> dict[str, Counter]:
    """Count occurrences of each detail per event type.

    Args:
        entries: Parsed log entries.

    Returns:
        Mapping of event type to a Counter of details.
    """
    summary: dict[str, Counter] = {}
    for entry in entries:
        summary.setdefault(entry["event"], Counter())[entry["detail"]] += 1
    return summary
