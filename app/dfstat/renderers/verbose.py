"""Verbose text renderer: one block of lines per mount."""

from dfstat.models.mount import MountEntry
from dfstat.models.stats import FilesystemStats
from dfstat.renderers.base import ReportRenderer


class VerboseRenderer(ReportRenderer):
    """Renders each mount as a block of lines followed by a blank line.

    Output per mount::

        /dev/sda1 mounted at /
        type: ext4, opts: rw,relatime
        block usage: 6.50G/20.00G (32.50%), 20.00G total, 13.50G free, 12.50G available
        files usage: 303.44K/1.25M (23.71%), 1.25M total, 976.56K free, 976.56K available

    The block line is omitted when the filesystem has no blocks, the
    files line when it has no inodes.
    """

    def render(self, entry: MountEntry, stats: FilesystemStats) -> None:
        self.write_line(self.mount_header(entry))
        self.write_line(f"type: {self.value(entry.fs_type)}, opts: {self.value(entry.options)}")
        if stats.blocks_total > 0:
            self.write_line(f"block usage: {self.block_usage(stats)}")
        if stats.inodes_total > 0:
            self.write_line(f"files usage: {self.file_usage(stats)}")
        self.write_line()
