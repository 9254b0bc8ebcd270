"""Registry mapping scan modes to dependency extraction strategies."""

from enum import Enum
from typing import Dict, Union

from ..config import ConfigurationError
from .base import BaseParser


class ScanMode(str, Enum):
    """Supported extraction strategies."""

    DIRECT = "direct"
    CENTRAL = "central"

    @classmethod
    def from_value(cls, value: Union[str, "ScanMode"]) -> "ScanMode":
        """Resolve a mode from user input.

        Args:
            value: Mode name, matched exactly

        Returns:
            The matching scan mode

        Raises:
            ConfigurationError: If the value names no supported mode
        """
        if isinstance(value, ScanMode):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigurationError(f"Invalid mode '{value}'. Expected one of: {choices}") from None


class ParserRegistry:
    """Registry holding exactly one parser per scan mode."""

    def __init__(self) -> None:
        """Initialize the parser registry."""
        self._parsers: Dict[ScanMode, BaseParser] = {}

    def register(self, mode: ScanMode, parser: BaseParser) -> None:
        """Register the parser used for a scan mode.

        Args:
            mode: Scan mode
            parser: Parser instance to register
        """
        self._parsers[ScanMode.from_value(mode)] = parser

    def get_parser(self, mode: Union[str, "ScanMode"]) -> BaseParser:
        """Get the parser for a scan mode.

        Args:
            mode: Scan mode or its name

        Returns:
            Registered parser

        Raises:
            ConfigurationError: If the mode is unknown or has no parser
        """
        resolved = ScanMode.from_value(mode)
        parser = self._parsers.get(resolved)
        if parser is None:
            raise ConfigurationError(f"No parser registered for mode '{resolved.value}'")
        return parser
