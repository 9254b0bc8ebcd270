"""Tests for console and JSON output."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from nuget_warden.core.matcher import MatchReport, ParseFailure
from nuget_warden.core.parsers import ScanMode
from nuget_warden.core.runner import ScanResult, ScanStatus
from nuget_warden.core.versioning import parse_version
from nuget_warden.output.formatters import ConsoleFormatter, JSONFormatter


@pytest.fixture
def blocked_result():
    project = Path("src/App/App.csproj")
    return ScanResult(
        status=ScanStatus.BLOCKED,
        mode=ScanMode.DIRECT,
        documents=[project],
        matches=[MatchReport(
            id="Newtonsoft.Json",
            version=parse_version("12.0.3"),
            range_text="(,13.0.0)",
            source_file=project,
        )],
        failures=[ParseFailure(
            id="Broken",
            text="$(Ver)",
            reason="Invalid version: '$(Ver)'",
            source_file=project,
        )],
    )


def render(result):
    buffer = io.StringIO()
    ConsoleFormatter(Console(file=buffer, width=200)).format_scan_results(result)
    return buffer.getvalue()


class TestConsoleFormatter:
    """Test console rendering."""

    def test_blocked_output(self, blocked_result):
        """Test match lines, failure lines and the failing summary."""
        output = render(blocked_result)

        assert "Blocked package: Newtonsoft.Json 12.0.3 in 'App.csproj' (matches '(,13.0.0)')" in output
        assert "Skipped comparison for Broken" in output
        assert "Build failed." in output

    def test_clean_output(self):
        """Test the passing summary."""
        output = render(ScanResult(status=ScanStatus.CLEAN, documents=[Path("A.csproj")]))
        assert "No blocked dependencies detected in 1 document(s)." in output

    def test_document_errors_fail_summary(self):
        """Test unreadable documents replace the passing summary."""
        output = render(ScanResult(status=ScanStatus.CLEAN, document_errors=["Failed to parse A.csproj"]))

        assert "1 document(s) could not be read. Build failed." in output
        assert "No blocked dependencies" not in output

    def test_no_rules_output(self):
        """Test the no-rules notice replaces the summary."""
        output = render(ScanResult(status=ScanStatus.NO_RULES))

        assert "No blocked packages defined." in output
        assert "detected" not in output

    def test_markup_in_paths_is_escaped(self):
        """Test bracketed path segments are printed verbatim."""
        buffer = io.StringIO()
        ConsoleFormatter(Console(file=buffer, width=200)).format_document(Path("[red]x/App.csproj"))
        assert "[red]x/App.csproj" in buffer.getvalue()


class TestJSONFormatter:
    """Test JSON report generation."""

    def test_format_scan_results(self, blocked_result):
        """Test the JSON structure."""
        data = JSONFormatter().format_scan_results(blocked_result, metadata={"config": "x.yaml"})

        assert data["scan_summary"]["status"] == "blocked"
        assert data["scan_summary"]["blocked_dependencies"] == 1
        assert data["scan_summary"]["parse_failures"] == 1
        assert data["matches"][0]["version"] == "12.0.3"
        assert data["failures"][0]["text"] == "$(Ver)"
        assert data["metadata"] == {"config": "x.yaml"}

    def test_save_requires_output_file(self):
        """Test saving without a destination fails."""
        with pytest.raises(ValueError, match="No output file"):
            JSONFormatter().save_results({})

    def test_save_results(self, tmp_path, blocked_result):
        """Test results are written to disk."""
        output_file = tmp_path / "out.json"
        formatter = JSONFormatter(output_file)

        formatter.save_results(formatter.format_scan_results(blocked_result))

        assert output_file.exists()
        assert '"Newtonsoft.Json"' in output_file.read_text()
