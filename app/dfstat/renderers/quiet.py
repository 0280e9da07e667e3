"""Quiet text renderer: a single line per mount."""

from dfstat.models.mount import MountEntry
from dfstat.models.stats import FilesystemStats
from dfstat.renderers.base import ReportRenderer


class QuietRenderer(ReportRenderer):
    """Renders each mount as one line with its block usage.

    Example line::

        /dev/sda1 mounted at /, 6.50G/20.00G (32.50%), 20.00G total, 13.50G free, 12.50G available
    """

    def render(self, entry: MountEntry, stats: FilesystemStats) -> None:
        line = f"{self.mount_header(entry)}, "
        if stats.blocks_total > 0:
            line += self.block_usage(stats)
        self.write_line(line)
