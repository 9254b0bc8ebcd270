"""Output formatters for nuget-warden results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape

from ..core.matcher import MatchReport, ParseFailure
from ..core.runner import ScanResult, ScanStatus
from ..utils.logging import get_logger


class ConsoleFormatter:
    """Rich console formatter for scan progress and results."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the console formatter.

        Args:
            console: Rich console instance
        """
        self.console = console or Console()

    def format_document(self, path: Path) -> None:
        """Announce a document about to be scanned."""
        self.console.print(f"Scanning {escape(str(path))}...")

    def format_match(self, report: MatchReport) -> None:
        self.console.print(f"[red]Blocked package:[/red] {escape(report.describe())}")

    def format_failure(self, failure: ParseFailure) -> None:
        location = failure.source_file.name if failure.source_file else "<unknown>"
        self.console.print(
            f"[yellow]Skipped comparison for {escape(failure.id)} in '{escape(location)}':[/yellow] "
            f"{escape(failure.reason)}"
        )

    def format_scan_results(self, result: ScanResult) -> None:
        """Format and display the outcome of a run.

        Args:
            result: Result returned by the scan runner
        """
        if result.status is ScanStatus.NO_RULES:
            self.console.print("[yellow]No blocked packages defined.[/yellow]")
            return

        for report in result.matches:
            self.format_match(report)

        for failure in result.failures:
            self.format_failure(failure)

        self.format_summary(result)

    def format_summary(self, result: ScanResult) -> None:
        """Print the final summary line."""
        scanned = len(result.documents)
        if result.blocked:
            self.console.print(
                f"[bold red]{len(result.matches)} blocked dependencies found "
                f"in {scanned} document(s). Build failed.[/bold red]"
            )
        elif result.document_errors:
            self.console.print(
                f"[bold red]{len(result.document_errors)} document(s) could not be read. "
                f"Build failed.[/bold red]"
            )
        else:
            self.console.print(
                f"[green]No blocked dependencies detected in {scanned} document(s).[/green]"
            )

    def format_error(self, error: str) -> None:
        """Format and display an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(error)}")


class JSONFormatter:
    """JSON formatter for nuget-warden results."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the JSON formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("JSONFormatter")

    def format_scan_results(
        self,
        result: ScanResult,
        metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Format a scan result as JSON-serializable data.

        Args:
            result: Result returned by the scan runner
            metadata: Optional additional metadata

        Returns:
            Formatted JSON data
        """
        data: Dict[str, Any] = {
            "scan_summary": {
                "status": result.status.value,
                "mode": result.mode.value if result.mode else None,
                "documents_scanned": len(result.documents),
                "blocked_dependencies": len(result.matches),
                "parse_failures": len(result.failures),
                "timestamp": datetime.now().isoformat()
            },
            "matches": [
                {
                    "id": report.id,
                    "version": str(report.version),
                    "range": report.range_text,
                    "source_file": str(report.source_file) if report.source_file else None
                }
                for report in result.matches
            ],
            "failures": [
                {
                    "id": failure.id,
                    "text": failure.text,
                    "reason": failure.reason,
                    "source_file": str(failure.source_file) if failure.source_file else None
                }
                for failure in result.failures
            ],
            "document_errors": list(result.document_errors)
        }

        if metadata:
            data["metadata"] = metadata

        return data

    def save_results(
        self,
        results: Dict[str, Any],
        output_file: Optional[Path] = None
    ) -> None:
        """Save results to a JSON file.

        Args:
            results: Results dictionary
            output_file: Output file path (uses instance default if None)
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2, ensure_ascii=False)

            self.logger.info(f"Results saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save results to {file_path}: {e}")
            raise
