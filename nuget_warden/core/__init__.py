"""Core version matching, extraction and scan orchestration for nuget-warden."""

from .config import BlockedRule, BlockedRuleSet, ConfigurationError, load_blocked_rules
from .matcher import MatchReport, MatchResult, ParseFailure, PolicyMatcher
from .parsers import DependencyDeclaration, ParsedDependencies, ScanMode
from .runner import ScanResult, ScanRunner, ScanStatus
from .versioning import SemanticVersion, VersionParseError, VersionRange, parse_range, parse_version

__all__ = [
    "BlockedRule",
    "BlockedRuleSet",
    "ConfigurationError",
    "DependencyDeclaration",
    "MatchReport",
    "MatchResult",
    "ParseFailure",
    "ParsedDependencies",
    "PolicyMatcher",
    "ScanMode",
    "ScanResult",
    "ScanRunner",
    "ScanStatus",
    "SemanticVersion",
    "VersionParseError",
    "VersionRange",
    "load_blocked_rules",
    "parse_range",
    "parse_version",
]
