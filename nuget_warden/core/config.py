"""Blocked-package configuration for nuget-warden."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Tuple, Union

import yaml

from ..utils.logging import get_logger

DEFAULT_CONFIG_FILE = "blocked-packages.yaml"

logger = get_logger("Config")


class ConfigurationError(Exception):
    """Raised for problems that must stop a run before any scanning."""


@dataclass(frozen=True)
class BlockedRule:
    """A package id and the version range of it that is not allowed."""

    id: str
    version: str

    def __post_init__(self) -> None:
        """Validate rule data."""
        if not self.id or not self.id.strip():
            raise ValueError("Blocked package id cannot be empty")


@dataclass(frozen=True)
class BlockedRuleSet:
    """Ordered, read-only collection of blocked rules."""

    rules: Tuple[BlockedRule, ...] = ()

    def __iter__(self) -> Iterator[BlockedRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)

    @classmethod
    def from_dict(cls, data: Any, source: str = "<config>") -> "BlockedRuleSet":
        """Build a rule set from deserialized configuration data.

        Args:
            data: Parsed document, expected shape ``{packages: [{id, version}]}``
            source: Name of the document, used in messages

        Returns:
            Rule set, possibly empty

        Raises:
            ConfigurationError: If the document has the wrong shape
        """
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ConfigurationError(f"{source}: top-level value must be a mapping")

        packages = data.get("packages")
        if packages is None:
            return cls()

        if not isinstance(packages, list):
            raise ConfigurationError(f"{source}: 'packages' must be a list")

        rules = []
        for index, entry in enumerate(packages):
            if not isinstance(entry, dict):
                logger.warning(f"{source}: skipping packages[{index}], expected a mapping")
                continue

            package_id = _as_text(entry.get("id"))
            version = _as_text(entry.get("version"))
            if not package_id or not version:
                logger.warning(f"{source}: skipping packages[{index}], 'id' and 'version' are required")
                continue

            rules.append(BlockedRule(id=package_id, version=version))

        return cls(tuple(rules))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def load_blocked_rules(path: Union[str, Path]) -> BlockedRuleSet:
    """Load the blocked-package list from a YAML file.

    A missing file is not an error: it yields an empty rule set.

    Args:
        path: Path to the YAML file

    Returns:
        Loaded rule set

    Raises:
        ConfigurationError: If the file is not valid YAML or has the wrong shape
    """
    config_path = Path(path)
    if not config_path.is_file():
        logger.debug(f"No configuration file at {config_path}")
        return BlockedRuleSet()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse {config_path}: {e}") from e

    rule_set = BlockedRuleSet.from_dict(data, source=str(config_path))
    logger.debug(f"Loaded {len(rule_set)} blocked package rules from {config_path}")
    return rule_set
