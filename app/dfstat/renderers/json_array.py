"""JSON renderer: a single compact array of mount objects.

Each element has the shape::

    {"mnt":{"dir":...,"fsname":...,"type":...,"opts":...,"freq":0,"passno":0},
     "vfs":{"file":{"total":...,"free":...,"avail":...,"used":...}|null,
            "block":{"total":...,"free":...,"avail":...,"used":...}|null}}

``block.total`` carries the block size rather than the block count;
consumers rely on this layout, so it is kept as is.
"""

from rich.console import Console

from dfstat.models.mount import MountEntry
from dfstat.models.stats import FilesystemStats
from dfstat.renderers.base import ReportRenderer
from dfstat.utils.formatting import escape_json


def _counts(total: int, free: int, avail: int, used: int) -> str:
    return f'{{"total":{total},"free":{free},"avail":{avail},"used":{used}}}'


def format_json_entry(entry: MountEntry, stats: FilesystemStats) -> str:
    """Serialize one mount and its statistics as a compact JSON object.

    Args:
        entry: Mount table entry.
        stats: Statistics for the entry.

    Returns:
        JSON object text without whitespace.
    """
    mnt = (
        f'{{"dir":"{escape_json(entry.mount_point)}",'
        f'"fsname":"{escape_json(entry.device)}",'
        f'"type":"{escape_json(entry.fs_type)}",'
        f'"opts":"{escape_json(entry.options)}",'
        f'"freq":{entry.dump_frequency},'
        f'"passno":{entry.pass_number}}}'
    )

    if stats.inodes_total:
        file_usage = _counts(
            stats.inodes_total,
            stats.inodes_free,
            stats.inodes_available,
            stats.inodes_used,
        )
    else:
        file_usage = "null"

    if stats.block_size:
        block_usage = _counts(
            stats.block_size,
            stats.blocks_free,
            stats.blocks_available,
            stats.blocks_used,
        )
    else:
        block_usage = "null"

    return f'{{"mnt":{mnt},"vfs":{{"file":{file_usage},"block":{block_usage}}}}}'


class JsonRenderer(ReportRenderer):
    """Renders all mounts as one JSON array terminated by a newline.

    Elements are written as they arrive, separated by commas.
    """

    def __init__(self, console: Console) -> None:
        super().__init__(console, color=False)
        self._first = True

    def begin(self) -> None:
        self._first = True
        self.write("[")

    def render(self, entry: MountEntry, stats: FilesystemStats) -> None:
        separator = "" if self._first else ","
        self._first = False
        self.write(separator + format_json_entry(entry, stats))

    def finish(self) -> None:
        self.write_line("]")
