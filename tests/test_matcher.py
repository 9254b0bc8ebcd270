"""Tests for blocked-package policy evaluation."""

from pathlib import Path

import pytest

from nuget_warden.core.config import BlockedRule, BlockedRuleSet
from nuget_warden.core.matcher import MatchReport, MatchResult, PolicyMatcher
from nuget_warden.core.parsers import DependencyDeclaration
from nuget_warden.core.versioning import parse_version


def rule_set(*pairs):
    return BlockedRuleSet(tuple(BlockedRule(id=package_id, version=version) for package_id, version in pairs))


def declaration(package_id, version, source="App.csproj"):
    return DependencyDeclaration(id=package_id, version=version, source_file=Path(source))


@pytest.fixture
def matcher():
    return PolicyMatcher()


class TestPolicyMatcher:
    """Test the policy evaluator."""

    def test_case_insensitive_id_match(self, matcher):
        """Test rule ids match declarations regardless of case."""
        rules = rule_set(("Foo.Bar", "[1.0,2.0)"))

        result = matcher.evaluate(rules, [declaration("foo.bar", "1.5.0")])

        assert result.blocked
        assert result.matches == [
            MatchReport(
                id="foo.bar",
                version=parse_version("1.5.0"),
                range_text="[1.0,2.0)",
                source_file=Path("App.csproj"),
            )
        ]

    def test_blocked_below_upper_bound(self, matcher):
        """Test a version below an exclusive upper bound is blocked."""
        rules = rule_set(("Newtonsoft.Json", "(,13.0.0)"))

        result = matcher.evaluate(rules, [declaration("Newtonsoft.Json", "12.0.3")])

        assert result.blocked
        assert len(result.matches) == 1
        assert str(result.matches[0].version) == "12.0.3"

    def test_allowed_above_upper_bound(self, matcher):
        """Test a version outside the range is not reported."""
        rules = rule_set(("Newtonsoft.Json", "(,13.0.0)"))

        result = matcher.evaluate(rules, [declaration("Newtonsoft.Json", "13.0.1")])

        assert not result.blocked
        assert result.matches == []
        assert result.failures == []

    def test_every_matching_rule_reported(self, matcher):
        """Test a declaration matching two rules yields two reports."""
        rules = rule_set(
            ("Serilog", "[2.0,3.0)"),
            ("Other", "[2.0,3.0)"),
            ("serilog", "2.5.0"),
        )

        result = matcher.evaluate(rules, [declaration("Serilog", "2.5.0")])

        assert [report.range_text for report in result.matches] == ["[2.0,3.0)", "2.5.0"]

    def test_report_order_is_declaration_major(self, matcher):
        """Test reports follow declaration order, then rule order."""
        rules = rule_set(("B", "[1.0,]"), ("A", "[1.0,]"), ("A", "1.0.0"))
        declarations = [declaration("A", "1.0.0"), declaration("B", "1.0.0")]

        result = matcher.evaluate(rules, declarations)

        assert [(report.id, report.range_text) for report in result.matches] == [
            ("A", "[1.0,]"),
            ("A", "1.0.0"),
            ("B", "[1.0,]"),
        ]

    def test_unrelated_ids_ignored(self, matcher):
        """Test declarations without a rule are never parsed."""
        rules = rule_set(("Foo", "[1.0,]"))

        result = matcher.evaluate(rules, [declaration("Bar", "not-a-version")])

        assert result.matches == []
        assert result.failures == []

    def test_malformed_version_does_not_hide_other_matches(self, matcher):
        """Test a bad version in one declaration is contained."""
        rules = rule_set(("Broken", "[1.0,]"), ("Newtonsoft.Json", "(,13.0.0)"))
        declarations = [
            declaration("Broken", "$(BrokenVersion)"),
            declaration("Newtonsoft.Json", "12.0.3"),
        ]

        result = matcher.evaluate(rules, declarations)

        assert result.blocked
        assert [report.id for report in result.matches] == ["Newtonsoft.Json"]
        assert len(result.failures) == 1
        assert result.failures[0].id == "Broken"
        assert result.failures[0].text == "$(BrokenVersion)"

    def test_malformed_range_skips_only_that_rule(self, matcher):
        """Test a bad range does not stop the remaining rules."""
        rules = rule_set(("Foo", "[1.0"), ("Foo", "[1.0,2.0]"))

        result = matcher.evaluate(rules, [declaration("Foo", "1.5.0")])

        assert [report.range_text for report in result.matches] == ["[1.0,2.0]"]
        assert [failure.text for failure in result.failures] == ["[1.0"]

    def test_parse_failures_do_not_block(self, matcher):
        """Test failures alone never set the blocked flag."""
        rules = rule_set(("Foo", "garbage"))

        result = matcher.evaluate(rules, [declaration("Foo", "1.0.0")])

        assert not result.blocked
        assert len(result.failures) == 1

    def test_empty_inputs(self, matcher):
        """Test evaluating nothing."""
        assert not matcher.evaluate(BlockedRuleSet(), [declaration("Foo", "1.0")]).blocked
        assert not matcher.evaluate(rule_set(("Foo", "1.0")), []).blocked

    def test_matcher_holds_no_rule_state(self, matcher):
        """Test the same matcher can be reused with different rules."""
        first = matcher.evaluate(rule_set(("Foo", "1.0.0")), [declaration("Foo", "1.0.0")])
        second = matcher.evaluate(rule_set(("Bar", "1.0.0")), [declaration("Foo", "1.0.0")])

        assert first.blocked
        assert not second.blocked

    def test_prerelease_declaration(self, matcher):
        """Test pre-release versions are compared by the ordering contract."""
        rules = rule_set(("Foo", "[1.0.0-alpha,1.0.0)"))

        result = matcher.evaluate(rules, [
            declaration("Foo", "1.0.0-beta"),
            declaration("Foo", "1.0.0"),
        ])

        assert [str(report.version) for report in result.matches] == ["1.0.0-beta"]


class TestMatchResult:
    """Test result aggregation."""

    def test_extend_keeps_order(self):
        """Test merging results appends in order."""
        first = MatchResult(matches=[
            MatchReport(id="A", version=parse_version("1.0"), range_text="1.0")
        ])
        second = MatchResult(matches=[
            MatchReport(id="B", version=parse_version("2.0"), range_text="2.0")
        ])

        first.extend(second)

        assert [report.id for report in first.matches] == ["A", "B"]
        assert first.blocked

    def test_describe(self):
        """Test the human-readable report line."""
        report = MatchReport(
            id="Newtonsoft.Json",
            version=parse_version("12.0.3"),
            range_text="(,13.0.0)",
            source_file=Path("src/App/App.csproj"),
        )
        assert report.describe() == "Newtonsoft.Json 12.0.3 in 'App.csproj' (matches '(,13.0.0)')"
