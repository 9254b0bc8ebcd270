"""MSBuild project and central package manifest parsers."""

from pathlib import Path
from typing import Iterator, List, Optional, Tuple
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ...utils.logging import get_logger
from ...utils.path_utils import find_project_files
from ..config import ConfigurationError
from .base import BaseParser, DependencyDeclaration, DocumentParseError, ParsedDependencies

CENTRAL_MANIFEST_NAME = "Directory.Packages.props"


def _local_name(tag: str) -> str:
    """Strip an XML namespace from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _iter_elements(root: Element, name: str) -> Iterator[Element]:
    for element in root.iter():
        if isinstance(element.tag, str) and _local_name(element.tag) == name:
            yield element


def _child_text(element: Element, name: str) -> Optional[str]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return child.text
    return None


class MSBuildParser(BaseParser):
    """Shared XML handling for MSBuild documents.

    Subclasses name the item element that carries a dependency. The version
    is read from the ``Version`` attribute or, failing that, from a nested
    ``<Version>`` element.
    """

    element_name = ""

    def __init__(self) -> None:
        super().__init__()
        self.logger = get_logger(type(self).__name__)

    def parse(self, file_path: Path) -> ParsedDependencies:
        """Parse an MSBuild document.

        Elements missing an ``Include`` id or a version are skipped.

        Args:
            file_path: Path to the document

        Returns:
            Declarations in document order

        Raises:
            DocumentParseError: If the file is not well-formed XML
        """
        self.validate_file(file_path)

        result = ParsedDependencies(source_file=file_path, parser_type=self.parser_type)

        try:
            root = ET.parse(str(file_path)).getroot()
        except (ET.ParseError, DefusedXmlException) as e:
            raise DocumentParseError(f"Failed to parse {file_path}: {e}") from e

        for element in _iter_elements(root, self.element_name):
            package_id, version = self._read_entry(element)
            if not package_id or not version:
                self.logger.debug(f"Skipping {self.element_name} without id or version in {file_path}")
                result.skipped += 1
                continue

            result.add_dependency(DependencyDeclaration(
                id=package_id,
                version=version,
                source_file=file_path
            ))

        return result

    def _read_entry(self, element: Element) -> Tuple[str, str]:
        package_id = (element.get("Include") or "").strip()
        version = element.get("Version")
        if not version:
            version = _child_text(element, "Version")
        return package_id, (version or "").strip()


class ProjectFileParser(MSBuildParser):
    """Direct mode: ``PackageReference`` items in ``*.csproj`` files."""

    element_name = "PackageReference"
    file_pattern = "*.csproj"

    def __init__(self) -> None:
        """Initialize the project file parser."""
        super().__init__()
        self.parser_type = "direct"

    def discover(self, root_path: Path, ignore_patterns: Optional[List[str]] = None) -> List[Path]:
        """Find every project file below the scan root.

        Args:
            root_path: Directory being scanned
            ignore_patterns: Additional glob patterns to skip

        Returns:
            Sorted project file paths, possibly empty
        """
        return find_project_files(root_path, self.file_pattern, ignore_patterns)


class CentralPackagesParser(MSBuildParser):
    """Central mode: ``PackageVersion`` items in ``Directory.Packages.props``."""

    element_name = "PackageVersion"

    def __init__(self) -> None:
        """Initialize the central manifest parser."""
        super().__init__()
        self.parser_type = "central"

    def discover(self, root_path: Path, ignore_patterns: Optional[List[str]] = None) -> List[Path]:
        """Locate the central manifest at the scan root.

        Args:
            root_path: Directory being scanned
            ignore_patterns: Unused, the manifest location is fixed

        Returns:
            A single-element list with the manifest path

        Raises:
            ConfigurationError: If the manifest does not exist
        """
        manifest = root_path / CENTRAL_MANIFEST_NAME
        if not manifest.is_file():
            raise ConfigurationError(f"{CENTRAL_MANIFEST_NAME} not found in {root_path}")
        return [manifest]
