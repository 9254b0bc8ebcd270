"""NuGet-style semantic versions and version ranges."""

import functools
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

_VERSION_PATTERN = re.compile(
    r"""
    (?P<numbers>[0-9]+(?:\.[0-9]+){0,3})
    (?:-(?P<release>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+(?P<metadata>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    """,
    re.VERBOSE,
)
_NUMERIC_LABEL = re.compile(r"[0-9]+")


class VersionParseError(ValueError):
    """Raised when a version or version range string cannot be parsed."""


def _compare_labels(left: Tuple[str, ...], right: Tuple[str, ...]) -> int:
    """Compare two pre-release label sequences.

    Numeric labels compare by value and sort before alphanumeric labels.
    Alphanumeric labels compare case-insensitively. A sequence that is a
    strict prefix of the other sorts first.

    Returns:
        Negative, zero or positive, like ``cmp``
    """
    for a, b in zip(left, right):
        a_numeric = _NUMERIC_LABEL.fullmatch(a) is not None
        b_numeric = _NUMERIC_LABEL.fullmatch(b) is not None

        if a_numeric and b_numeric:
            diff = int(a) - int(b)
        elif a_numeric != b_numeric:
            diff = -1 if a_numeric else 1
        else:
            a_key, b_key = a.casefold(), b.casefold()
            diff = (a_key > b_key) - (a_key < b_key)

        if diff:
            return diff

    return len(left) - len(right)


def _label_key(label: str) -> Any:
    """Hash key consistent with ``_compare_labels`` equality."""
    if _NUMERIC_LABEL.fullmatch(label):
        return int(label)
    return label.casefold()


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class SemanticVersion:
    """A parsed ``MAJOR.MINOR.PATCH[.REVISION][-labels][+metadata]`` version.

    Build metadata is kept for display but never takes part in equality,
    ordering or hashing.
    """

    major: int
    minor: int = 0
    patch: int = 0
    revision: int = 0
    release_labels: Tuple[str, ...] = ()
    metadata: Optional[str] = None

    @property
    def numbers(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.revision)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.release_labels)

    def compare(self, other: "SemanticVersion") -> int:
        """Compare against another version.

        Args:
            other: Version to compare with

        Returns:
            Negative if this version sorts first, zero if equal, positive otherwise
        """
        if self.numbers != other.numbers:
            return -1 if self.numbers < other.numbers else 1

        if self.is_prerelease != other.is_prerelease:
            # A pre-release sorts below the release of the same numbers
            return -1 if self.is_prerelease else 1

        return _compare_labels(self.release_labels, other.release_labels)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.numbers, tuple(_label_key(label) for label in self.release_labels)))

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text += f".{self.revision}"
        if self.release_labels:
            text += "-" + ".".join(self.release_labels)
        return text


@dataclass(frozen=True)
class VersionRange:
    """A version predicate made of an optional lower and an optional upper bound.

    A missing bound leaves that side unconstrained. An exact range has both
    bounds set to the same version, both inclusive.
    """

    min_version: Optional[SemanticVersion] = None
    max_version: Optional[SemanticVersion] = None
    include_min: bool = False
    include_max: bool = False
    original: str = ""

    @classmethod
    def exact(cls, version: SemanticVersion, original: str = "") -> "VersionRange":
        """Build a range satisfied only by ``version``."""
        return cls(
            min_version=version,
            max_version=version,
            include_min=True,
            include_max=True,
            original=original or str(version),
        )

    @property
    def is_exact(self) -> bool:
        return (
            self.min_version is not None
            and self.min_version == self.max_version
            and self.include_min
            and self.include_max
        )

    def satisfies(self, version: SemanticVersion) -> bool:
        """Check whether a version falls inside this range.

        Args:
            version: Parsed version to test

        Returns:
            True if the version satisfies both bounds that are present
        """
        if self.min_version is not None:
            cmp = version.compare(self.min_version)
            if cmp < 0 or (cmp == 0 and not self.include_min):
                return False

        if self.max_version is not None:
            cmp = version.compare(self.max_version)
            if cmp > 0 or (cmp == 0 and not self.include_max):
                return False

        return True

    def __str__(self) -> str:
        if self.original:
            return self.original
        if self.is_exact:
            return f"[{self.min_version}]"
        lower = str(self.min_version) if self.min_version is not None else ""
        upper = str(self.max_version) if self.max_version is not None else ""
        return (
            f"{'[' if self.include_min else '('}{lower}, "
            f"{upper}{']' if self.include_max else ')'}"
        )


def parse_version(text: Optional[str]) -> SemanticVersion:
    """Parse a version string.

    Missing minor, patch and revision segments default to 0, so ``"13"`` and
    ``"13.0.0"`` are the same version.

    Args:
        text: Version string such as ``"1.2.3-beta.1+build.5"``

    Returns:
        Parsed semantic version

    Raises:
        VersionParseError: If the text is not a valid version
    """
    if text is None:
        raise VersionParseError("Version text is missing")

    stripped = text.strip()
    match = _VERSION_PATTERN.fullmatch(stripped)
    if not match:
        raise VersionParseError(f"Invalid version: '{text}'")

    numbers = [int(part) for part in match.group("numbers").split(".")]
    numbers.extend([0] * (4 - len(numbers)))
    release = match.group("release")

    return SemanticVersion(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        revision=numbers[3],
        release_labels=tuple(release.split(".")) if release else (),
        metadata=match.group("metadata"),
    )


def parse_range(text: Optional[str]) -> VersionRange:
    """Parse a version range specifier.

    Supported forms are a bare version (exact match), ``[1.0]`` (exact match)
    and interval notation such as ``[1.0,2.0)``, ``(,2.0]`` or ``[1.0,]``
    where ``[``/``]`` are inclusive, ``(``/``)`` exclusive and an empty side
    is unbounded.

    Args:
        text: Range specifier

    Returns:
        Parsed version range

    Raises:
        VersionParseError: If the specifier is malformed
    """
    if text is None or not text.strip():
        raise VersionParseError("Version range is empty")

    original = text.strip()

    if original[0] not in "[(":
        return VersionRange.exact(_parse_bound(original, original), original)

    if original[-1] not in "])" or len(original) < 2:
        raise VersionParseError(f"Unbalanced brackets in version range: '{original}'")

    include_min = original[0] == "["
    include_max = original[-1] == "]"
    inner = original[1:-1].strip()

    if "," not in inner:
        if not (include_min and include_max) or not inner:
            raise VersionParseError(f"Invalid version range: '{original}'")
        return VersionRange.exact(_parse_bound(inner, original), original)

    parts = inner.split(",")
    if len(parts) != 2:
        raise VersionParseError(f"Too many commas in version range: '{original}'")

    lower_text, upper_text = (part.strip() for part in parts)
    if not lower_text and not upper_text:
        raise VersionParseError(f"Version range has no bounds: '{original}'")

    min_version = _parse_bound(lower_text, original) if lower_text else None
    max_version = _parse_bound(upper_text, original) if upper_text else None

    if min_version is not None and max_version is not None:
        cmp = min_version.compare(max_version)
        if cmp > 0 or (cmp == 0 and not (include_min and include_max)):
            raise VersionParseError(f"Version range is empty: '{original}'")

    return VersionRange(
        min_version=min_version,
        max_version=max_version,
        include_min=include_min,
        include_max=include_max,
        original=original,
    )


def _parse_bound(text: str, range_text: str) -> SemanticVersion:
    try:
        return parse_version(text)
    except VersionParseError as exc:
        raise VersionParseError(f"Invalid bound in version range '{range_text}': {exc}") from exc
