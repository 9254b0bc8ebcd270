"""Dependency extraction strategies for MSBuild documents."""

from .base import BaseParser, DependencyDeclaration, DocumentParseError, ParsedDependencies
from .msbuild import CENTRAL_MANIFEST_NAME, CentralPackagesParser, MSBuildParser, ProjectFileParser
from .registry import ParserRegistry, ScanMode

# Register built-in parsers
registry = ParserRegistry()
registry.register(ScanMode.DIRECT, ProjectFileParser())
registry.register(ScanMode.CENTRAL, CentralPackagesParser())

__all__ = [
    "BaseParser",
    "CENTRAL_MANIFEST_NAME",
    "CentralPackagesParser",
    "DependencyDeclaration",
    "DocumentParseError",
    "MSBuildParser",
    "ParsedDependencies",
    "ParserRegistry",
    "ProjectFileParser",
    "ScanMode",
    "registry",
]
