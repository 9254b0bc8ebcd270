"""Path utilities for finding project files and filtering paths."""

import fnmatch
from pathlib import Path
from typing import Iterator, List, Optional


class PathFilter:
    """Filters paths against caller-supplied glob patterns."""

    def __init__(self, ignore_patterns: Optional[List[str]] = None) -> None:
        """Initialize path filter.

        Args:
            ignore_patterns: Glob patterns to ignore, matched
                against the path relative to the scan root
        """
        self.ignore_patterns = list(ignore_patterns or [])

    def is_ignored(self, path: Path, root_path: Optional[Path] = None) -> bool:
        """Check if a path should be ignored.

        Args:
            path: Path to check
            root_path: Scan root the path is relative to

        Returns:
            True if path should be ignored
        """
        relative = path.relative_to(root_path) if root_path is not None else path
        relative_str = relative.as_posix()
        for pattern in self.ignore_patterns:
            if fnmatch.fnmatch(relative_str, pattern) or fnmatch.fnmatch("/" + relative_str, pattern):
                return True

        return False

    def filter_paths(self, paths: Iterator[Path], root_path: Optional[Path] = None) -> Iterator[Path]:
        """Filter paths based on ignore rules.

        Args:
            paths: Iterator of paths to filter
            root_path: Scan root the paths are relative to

        Yields:
            Paths that should not be ignored
        """
        for path in paths:
            if not self.is_ignored(path, root_path):
                yield path


def find_project_files(
    root_path: Path,
    pattern: str,
    ignore_patterns: Optional[List[str]] = None
) -> List[Path]:
    """Recursively find files whose name matches a glob pattern.

    Args:
        root_path: Root directory to search
        pattern: File name pattern such as ``*.csproj``
        ignore_patterns: Glob patterns to skip

    Returns:
        Sorted list of matching files
    """
    if not root_path.is_dir():
        raise ValueError(f"Root path is not a directory: {root_path}")

    path_filter = PathFilter(ignore_patterns)
    candidates = (path for path in root_path.rglob(pattern) if path.is_file())
    return sorted(path_filter.filter_paths(candidates, root_path))

