"""nuget-warden - fails a build when a project declares a blocked NuGet package version."""

__version__ = "0.1.0"

from .core.config import BlockedRule, BlockedRuleSet, ConfigurationError, load_blocked_rules
from .core.matcher import MatchReport, PolicyMatcher
from .core.runner import ScanResult, ScanRunner, ScanStatus
from .core.parsers import ScanMode
from .core.versioning import SemanticVersion, VersionParseError, VersionRange, parse_range, parse_version

__all__ = [
    "BlockedRule",
    "BlockedRuleSet",
    "ConfigurationError",
    "MatchReport",
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
