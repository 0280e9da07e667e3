"""Data models for dfstat.

This module exports the core data structures used throughout the application.
"""

from dfstat.models.display import DisplayConfig, OutputMode
from dfstat.models.mount import MountEntry
from dfstat.models.selector import Selector
from dfstat.models.stats import FilesystemStats

__all__ = [
    "DisplayConfig",
    "FilesystemStats",
    "MountEntry",
    "OutputMode",
    "Selector",
]
