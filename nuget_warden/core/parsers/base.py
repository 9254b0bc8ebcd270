"""Base parser class and data models for dependency extraction."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional


class DocumentParseError(ValueError):
    """Raised when a dependency document cannot be read as XML."""


@dataclass(frozen=True)
class DependencyDeclaration:
    """A dependency entry as found in a document.

    Both fields are raw strings; the version is not parsed until the entry
    is evaluated against the blocked rules.
    """

    id: str
    version: str
    source_file: Optional[Path] = None


@dataclass
class ParsedDependencies:
    """Container for the declarations extracted from one document."""

    dependencies: List[DependencyDeclaration] = field(default_factory=list)
    source_file: Optional[Path] = None
    parser_type: str = ""
    skipped: int = 0

    def add_dependency(self, dependency: DependencyDeclaration) -> None:
        """Add a declaration to the collection.

        Args:
            dependency: Declaration to add
        """
        self.dependencies.append(dependency)

    def __iter__(self) -> Iterator[DependencyDeclaration]:
        return iter(self.dependencies)

    def __len__(self) -> int:
        return len(self.dependencies)


class BaseParser(ABC):
    """Abstract base class for dependency extraction strategies."""

    def __init__(self) -> None:
        """Initialize the parser."""
        self.parser_type: str = ""

    @abstractmethod
    def discover(self, root_path: Path, ignore_patterns: Optional[List[str]] = None) -> List[Path]:
        """Find the documents this parser should read under a scan root.

        Args:
            root_path: Directory being scanned
            ignore_patterns: Additional glob patterns to skip

        Returns:
            Sorted list of document paths
        """

    @abstractmethod
    def parse(self, file_path: Path) -> ParsedDependencies:
        """Extract dependency declarations from a document.

        Args:
            file_path: Path to the file to parse

        Returns:
            Declarations found in the file
        """

    def validate_file(self, file_path: Path) -> None:
        """Validate that the file exists and is readable.

        Args:
            file_path: Path to validate

        Raises:
            FileNotFoundError: If file doesn't exist
            PermissionError: If file is not readable
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        if not os.access(file_path, os.R_OK):
            raise PermissionError(f"File is not readable: {file_path}")
