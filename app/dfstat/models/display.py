"""Display configuration models."""

from dataclasses import dataclass
from enum import Enum


class OutputMode(str, Enum):
    """Report output formats.

    Attributes:
        VERBOSE: Multi-line text block per mount.
        QUIET: One line per mount with block usage only.
        JSON: Single JSON array with one object per mount.
    """

    VERBOSE = "verbose"
    QUIET = "quiet"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """Run configuration built once from command-line flags.

    Attributes:
        output_mode: Output format to render.
        color_enabled: Whether dynamic fields are colorized.
        include_pseudo_filesystems: Whether pseudo filesystems are listed.
    """

    output_mode: OutputMode = OutputMode.VERBOSE
    color_enabled: bool = False
    include_pseudo_filesystems: bool = False

    def __post_init__(self) -> None:
        """Reject flag combinations that cannot be rendered."""
        if self.output_mode == OutputMode.JSON and self.color_enabled:
            msg = "JSON output cannot be colorized"
            raise ValueError(msg)
