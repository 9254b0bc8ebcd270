"""Core blocked-package matching logic for nuget-warden."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..utils.logging import get_logger
from .config import BlockedRule, BlockedRuleSet
from .parsers import DependencyDeclaration
from .versioning import SemanticVersion, VersionParseError, parse_range, parse_version


@dataclass(frozen=True)
class MatchReport:
    """A declared dependency that falls inside a blocked range."""

    id: str
    version: SemanticVersion
    range_text: str
    source_file: Optional[Path] = None

    def describe(self) -> str:
        location = self.source_file.name if self.source_file else "<unknown>"
        return f"{self.id} {self.version} in '{location}' (matches '{self.range_text}')"


@dataclass(frozen=True)
class ParseFailure:
    """A declaration/rule pair that could not be compared."""

    id: str
    text: str
    reason: str
    source_file: Optional[Path] = None


@dataclass
class MatchResult:
    """Outcome of evaluating declarations against a rule set."""

    matches: List[MatchReport] = field(default_factory=list)
    failures: List[ParseFailure] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return bool(self.matches)

    def extend(self, other: "MatchResult") -> None:
        """Append another result, keeping report order."""
        self.matches.extend(other.matches)
        self.failures.extend(other.failures)


class PolicyMatcher:
    """Cross-joins dependency declarations with blocked rules.

    The matcher keeps no rule state; the rule set is passed to every call.
    """

    def __init__(self) -> None:
        """Initialize the policy matcher."""
        self.logger = get_logger("PolicyMatcher")

    def evaluate(
        self,
        rules: BlockedRuleSet,
        declarations: Iterable[DependencyDeclaration]
    ) -> MatchResult:
        """Evaluate declarations against blocked rules.

        Every declaration is checked against every rule whose id matches
        case-insensitively. A declaration can produce several reports when it
        falls in more than one blocked range. Unparsable versions or ranges are
        recorded as failures and do not stop the evaluation.

        Args:
            rules: Blocked rules to apply
            declarations: Dependencies extracted from a document

        Returns:
            Matches and parse failures, in declaration then rule order
        """
        result = MatchResult()
        rules_by_id = self._index_rules(rules)

        for declaration in declarations:
            for rule in rules_by_id.get(declaration.id.casefold(), []):
                report = self._check_rule(declaration, rule, result)
                if report:
                    self.logger.debug(f"MATCH: {report.describe()}")
                    result.matches.append(report)

        return result

    def _index_rules(self, rules: BlockedRuleSet) -> Dict[str, List[BlockedRule]]:
        index: Dict[str, List[BlockedRule]] = {}
        for rule in rules:
            index.setdefault(rule.id.casefold(), []).append(rule)
        return index

    def _check_rule(
        self,
        declaration: DependencyDeclaration,
        rule: BlockedRule,
        result: MatchResult
    ) -> Optional[MatchReport]:
        """Compare one declaration with one rule of the same id.

        Args:
            declaration: Dependency declaration
            rule: Blocked rule with a matching id
            result: Result that collects parse failures

        Returns:
            MatchReport if the declared version is blocked, None otherwise
        """
        try:
            version = parse_version(declaration.version)
        except VersionParseError as e:
            self._record_failure(result, declaration, declaration.version, e)
            return None

        try:
            version_range = parse_range(rule.version)
        except VersionParseError as e:
            self._record_failure(result, declaration, rule.version, e)
            return None

        if not version_range.satisfies(version):
            self.logger.debug(f"NO MATCH: {declaration.id} {version} is outside '{rule.version}'")
            return None

        return MatchReport(
            id=declaration.id,
            version=version,
            range_text=rule.version,
            source_file=declaration.source_file
        )

    def _record_failure(
        self,
        result: MatchResult,
        declaration: DependencyDeclaration,
        text: str,
        error: VersionParseError
    ) -> None:
        self.logger.debug(f"Cannot compare {declaration.id}: {error}")
        result.failures.append(ParseFailure(
            id=declaration.id,
            text=text,
            reason=str(error),
            source_file=declaration.source_file
        ))
