"""Abstract base class for report renderers.

This module defines the ReportRenderer interface that every output
format implements, plus the usage line shared by the text formats.

Reports are written straight to the console file so device and mount
point strings reach stdout byte for byte. Rich only supplies the ANSI
codes for styled fields.
"""

from abc import ABC, abstractmethod

from rich.console import COLOR_SYSTEMS, Console

from dfstat.models.mount import MountEntry
from dfstat.models.stats import FilesystemStats
from dfstat.utils.formatting import format_percent, format_size

# Theme style applied to dynamic fields when color is enabled
VALUE_STYLE = "value"


class ReportRenderer(ABC):
    """Abstract base class for all report renderers.

    A renderer is driven once per run: :meth:`begin` before the first
    entry, :meth:`render` for every displayed mount, :meth:`finish` after
    the mount table is exhausted.

    Args:
        console: Console the report is written to.
        color: If True, dynamic fields are styled with the theme's
            ``value`` style.

    Example:
        >>> renderer = VerboseRenderer(create_report_console())
        >>> renderer.begin()
        >>> renderer.render(entry, stats)
        >>> renderer.finish()
    """

    def __init__(self, console: Console, *, color: bool = False) -> None:
        self._console = console
        self._color = color

    @property
    def color(self) -> bool:
        """Check if dynamic fields are colorized."""
        return self._color

    def begin(self) -> None:  # noqa: B027
        """Emit anything that precedes the first entry."""

    @abstractmethod
    def render(self, entry: MountEntry, stats: FilesystemStats) -> None:
        """Emit one mount entry.

        Args:
            entry: Mount table entry.
            stats: Statistics for the entry. ``blocks_total`` is non-zero.
        """

    def finish(self) -> None:  # noqa: B027
        """Emit anything that follows the last entry."""

    def value(self, text: str) -> str:
        """Wrap a dynamic field in the ANSI codes of the value style."""
        color_system = self._console.color_system
        if not self._color or color_system is None:
            return text
        style = self._console.get_style(VALUE_STYLE)
        return style.render(text, color_system=COLOR_SYSTEMS[color_system])

    def write(self, text: str) -> None:
        """Write report text to the console file without any processing."""
        self._console.file.write(text)

    def write_line(self, line: str = "") -> None:
        """Write one report line."""
        self.write(line + "\n")

    def usage_line(self, used: int, total: int, free: int, avail: int, unit_size: int) -> str:
        """Build the usage line shared by block and file usage output.

        Format: ``<used>/<total> (<percent>%), <total> total, <free> free,
        <avail> available``.

        Args:
            used: Used units.
            total: Total units. Must be non-zero.
            free: Free units.
            avail: Units available to unprivileged users.
            unit_size: Bytes per unit (1 for inode counts).

        Returns:
            Line with dynamic fields styled when color is enabled.
        """
        total_str = self.value(format_size(total, unit_size))
        return (
            f"{self.value(format_size(used, unit_size))}/{total_str} "
            f"({self.value(format_percent(used, total) + '%')}), "
            f"{total_str} total, "
            f"{self.value(format_size(free, unit_size))} free, "
            f"{self.value(format_size(avail, unit_size))} available"
        )

    def block_usage(self, stats: FilesystemStats) -> str:
        """Build the usage line for block (space) usage."""
        return self.usage_line(
            stats.blocks_used,
            stats.blocks_total,
            stats.blocks_free,
            stats.blocks_available,
            stats.block_size,
        )

    def file_usage(self, stats: FilesystemStats) -> str:
        """Build the usage line for inode (file count) usage."""
        return self.usage_line(
            stats.inodes_used,
            stats.inodes_total,
            stats.inodes_free,
            stats.inodes_available,
            1,
        )

    def mount_header(self, entry: MountEntry) -> str:
        """Build the ``<device> mounted at <mount point>`` text."""
        return f"{self.value(entry.device)} mounted at {self.value(entry.mount_point)}"
