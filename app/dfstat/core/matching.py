"""Selector matching for mount entries.

Decides which mount entries are reported when the caller names
specific filesystems, and remembers which names were ever found.
"""

import logging
from collections.abc import Iterable, Iterator

from dfstat.models.mount import MountEntry
from dfstat.models.selector import Selector

logger = logging.getLogger(__name__)


class SelectorSet:
    """Ordered, owned collection of selectors for a single run.

    An empty set includes every entry. Otherwise an entry is included
    when at least one selector equals its device or mount point, and
    every such selector is marked as matched.

    Args:
        texts: Selector strings in the order given by the caller.

    Example:
        >>> selectors = SelectorSet(["/", "/dev/sdb1"])
        >>> selectors.should_include(entry)
        True
        >>> [s.text for s in selectors.unmatched()]
        ['/dev/sdb1']
    """

    def __init__(self, texts: Iterable[str] = ()) -> None:
        self._selectors: list[Selector] = [Selector(text=t) for t in texts]

    def __iter__(self) -> Iterator[Selector]:
        return iter(self._selectors)

    def __len__(self) -> int:
        return len(self._selectors)

    def __bool__(self) -> bool:
        return bool(self._selectors)

    def should_include(self, entry: MountEntry) -> bool:
        """Check an entry against all selectors, marking every match.

        Args:
            entry: Mount entry to test.

        Returns:
            True if the set is empty or any selector matches the entry.
        """
        if not self._selectors:
            return True

        included = False
        for selector in self._selectors:
            if not selector.matches(entry.device, entry.mount_point):
                continue
            if not selector.matched:
                logger.debug(
                    "Selector %s matched %s on %s", selector.text, entry.device, entry.mount_point
                )
            selector.matched = True
            included = True

        return included

    def unmatched(self) -> list[Selector]:
        """Return selectors that never matched, in original order."""
        return [s for s in self._selectors if not s.matched]
