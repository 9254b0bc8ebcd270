"""Scan orchestration: rule loading outcome, document loop and final status."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..utils.logging import get_logger
from .config import BlockedRuleSet, ConfigurationError
from .matcher import MatchReport, MatchResult, ParseFailure, PolicyMatcher
from .parsers import DocumentParseError, ParserRegistry, ScanMode, registry as default_registry


class ScanStatus(str, Enum):
    """Terminal state of a run."""

    NO_RULES = "no_rules"
    CLEAN = "clean"
    BLOCKED = "blocked"


@dataclass
class ScanResult:
    """Everything a run produced."""

    status: ScanStatus
    mode: Optional[ScanMode] = None
    documents: List[Path] = field(default_factory=list)
    matches: List[MatchReport] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)
    document_errors: List[str] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return self.status is ScanStatus.BLOCKED

    @property
    def exit_code(self) -> int:
        # Unreadable documents fail the run even though scanning continues
        return 1 if self.blocked or self.document_errors else 0


class ScanRunner:
    """Drives one extraction strategy over a project and applies the rules."""

    def __init__(
        self,
        rules: BlockedRuleSet,
        parsers: Optional[ParserRegistry] = None,
        ignore_patterns: Optional[List[str]] = None,
        on_document: Optional[Callable[[Path], None]] = None
    ) -> None:
        """Initialize the runner.

        Args:
            rules: Blocked rules for this run
            parsers: Registry of extraction strategies (defaults to the built-in one)
            ignore_patterns: Extra glob patterns skipped during discovery
            on_document: Called with each document path before it is scanned
        """
        self.rules = rules
        self.parsers = parsers or default_registry
        self.ignore_patterns = ignore_patterns
        self.on_document = on_document
        self.matcher = PolicyMatcher()
        self.logger = get_logger("ScanRunner")

    def run(self, project_dir: Union[str, Path], mode: Union[str, ScanMode] = ScanMode.DIRECT) -> ScanResult:
        """Scan a project directory.

        Args:
            project_dir: Root of the project to scan
            mode: Extraction strategy, ``direct`` or ``central``

        Returns:
            Result of the run

        Raises:
            ConfigurationError: If the mode is invalid, the project directory
                does not exist or the central manifest is missing
        """
        scan_mode = ScanMode.from_value(mode)

        if not self.rules:
            self.logger.debug("No blocked package rules loaded, skipping scan")
            return ScanResult(status=ScanStatus.NO_RULES, mode=scan_mode)

        parser = self.parsers.get_parser(scan_mode)

        root = Path(project_dir)
        if not root.is_dir():
            raise ConfigurationError(f"Project directory does not exist: {root}")

        documents = parser.discover(root, self.ignore_patterns)
        self.logger.debug(f"Found {len(documents)} documents to scan in {scan_mode.value} mode")

        result = ScanResult(status=ScanStatus.CLEAN, mode=scan_mode)
        accumulated = MatchResult()

        for document in documents:
            if self.on_document:
                self.on_document(document)

            try:
                parsed = parser.parse(document)
            except (DocumentParseError, OSError) as e:
                self.logger.error(str(e))
                result.document_errors.append(str(e))
                continue

            result.documents.append(document)
            accumulated.extend(self.matcher.evaluate(self.rules, parsed.dependencies))

        result.matches = accumulated.matches
        result.failures = accumulated.failures
        if accumulated.blocked:
            result.status = ScanStatus.BLOCKED

        return result
