"""Utility functions and helpers for nuget-warden."""

from .logging import setup_logging, get_logger
from .path_utils import find_project_files

__all__ = [
    "setup_logging",
    "get_logger",
    "find_project_files",
]
