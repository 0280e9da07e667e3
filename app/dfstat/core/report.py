"""Report pipeline.

Walks the mount table once, filters entries through the selectors,
queries statistics for the survivors and hands displayable mounts to
a renderer.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from dfstat.core.matching import SelectorSet
from dfstat.core.mounts import MountTable
from dfstat.core.stats import collect_stats
from dfstat.models.stats import FilesystemStats
from dfstat.renderers.base import ReportRenderer

logger = logging.getLogger(__name__)

StatsCollector = Callable[[str], FilesystemStats]


@dataclass(frozen=True, slots=True)
class ReportResult:
    """Outcome of a report run.

    Attributes:
        displayed: Number of mounts handed to the renderer.
        unmatched: Selectors that matched no mount entry, in caller order.
    """

    displayed: int
    unmatched: tuple[str, ...]

    @property
    def success(self) -> bool:
        """Check if every selector was found."""
        return not self.unmatched


def generate_report(
    table: MountTable,
    selectors: SelectorSet,
    renderer: ReportRenderer,
    collect: StatsCollector | None = None,
) -> ReportResult:
    """Render a report for every selected, non-empty mount.

    Selectors are marked as found before the zero-block check, so a
    selector satisfied only by an empty filesystem is not reported as
    missing even though that filesystem is not displayed.

    Args:
        table: Mount table to enumerate.
        selectors: Selectors for this run (mutated: matched flags).
        renderer: Renderer receiving the displayable mounts.
        collect: Statistics query for a mount point. Defaults to statvfs.

    Returns:
        ReportResult with the display count and unmatched selectors.

    Raises:
        MountTableError: If the mount table cannot be read. Nothing has
            been rendered at that point.
        StatsQueryError: If statistics for a selected mount cannot be
            queried. Output rendered so far is left as is.
    """
    collect = collect or collect_stats
    entries = table.entries()
    displayed = 0

    renderer.begin()
    for entry in entries:
        if not selectors.should_include(entry):
            continue

        stats = collect(entry.mount_point)
        if not stats.has_capacity:
            logger.debug("Skipping %s on %s: no blocks", entry.device, entry.mount_point)
            continue

        renderer.render(entry, stats)
        displayed += 1
    renderer.finish()

    unmatched = tuple(s.text for s in selectors.unmatched())
    return ReportResult(displayed=displayed, unmatched=unmatched)
