"""Main CLI interface for nuget-warden."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..core.config import DEFAULT_CONFIG_FILE, ConfigurationError, load_blocked_rules
from ..core.runner import ScanRunner
from ..output.formatters import ConsoleFormatter, JSONFormatter
from ..utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="nuget-warden",
    help="Scans .NET projects for blocked NuGet packages",
    add_completion=False
)

logger = get_logger("CLI")


@app.command()
def scan(
    config: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE),
        "--config",
        "-c",
        help="Path to the blocked-packages YAML file"
    ),
    project_dir: Optional[Path] = typer.Option(
        None,
        "--project-dir",
        "-p",
        help="Directory to scan (defaults to the current directory)"
    ),
    mode: str = typer.Option(
        "direct",
        "--mode",
        "-m",
        help="Scan mode: 'direct' for .csproj PackageReference, 'central' for Directory.Packages.props"
    ),
    ignore_patterns: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Additional ignore patterns for project discovery"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for JSON results"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    )
) -> None:
    """Fail when a project declares a blocked package version."""
    setup_logging(verbose=verbose)

    console = Console()
    formatter = ConsoleFormatter(console)

    try:
        rules = load_blocked_rules(config)
        runner = ScanRunner(
            rules,
            ignore_patterns=ignore_patterns,
            on_document=formatter.format_document
        )
        result = runner.run(project_dir or Path.cwd(), mode)
    except ConfigurationError as e:
        logger.debug(f"Configuration error: {e}")
        formatter.format_error(str(e))
        raise typer.Exit(1)

    formatter.format_scan_results(result)

    if output:
        json_formatter = JSONFormatter(output)
        json_formatter.save_results(json_formatter.format_scan_results(result))

    raise typer.Exit(result.exit_code)


def main() -> None:
    """Main entry point for nuget-warden CLI."""
    app()


if __name__ == "__main__":
    main()
