"""Mount table reader.

Parses the kernel mount table (``/proc/self/mounts``) the same way
getmntent(3) does and yields one MountEntry per line.
"""

import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from dfstat.core.errors import MountTableError
from dfstat.models.mount import MountEntry

logger = logging.getLogger(__name__)

DEFAULT_MOUNT_TABLE = Path("/proc/self/mounts")

# Escapes getmntent(3) decodes; any other backslash sequence is kept as is
_OCTAL_ESCAPE = re.compile(r"\\(040|011|012|134)|\\\\")


def _unescape_field(field: str) -> str:
    """Decode octal escapes (\\040, \\011, \\012, \\134) and \\\\ in a field."""
    if "\\" not in field:
        return field

    def _replace(match: re.Match[str]) -> str:
        octal = match.group(1)
        if octal is None:
            return "\\"
        return chr(int(octal, 8))

    return _OCTAL_ESCAPE.sub(_replace, field)


def _parse_int(value: str) -> int:
    """Parse freq/passno like sscanf("%d"): leading digits, else 0."""
    match = re.match(r"[+-]?\d+", value)
    return int(match.group()) if match else 0


def parse_mount_line(line: str) -> MountEntry | None:
    """Parse a single mount table line.

    Args:
        line: Raw line from the mount table (trailing newline allowed).

    Returns:
        MountEntry if the line holds an entry, None for blank lines,
        comments and malformed lines.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    parts = stripped.split()
    if len(parts) < 4:
        logger.debug("Skipping malformed mount line (parts=%d): %r", len(parts), line[:100])
        return None

    device, mount_point, fs_type, options = (_unescape_field(p) for p in parts[:4])
    dump_frequency = _parse_int(parts[4]) if len(parts) > 4 else 0
    pass_number = _parse_int(parts[5]) if len(parts) > 5 else 0

    return MountEntry(
        device=device,
        mount_point=mount_point,
        fs_type=fs_type,
        options=options,
        dump_frequency=dump_frequency,
        pass_number=pass_number,
    )


class MountTable:
    """Reader for the system mount table.

    Every call to :meth:`entries` re-reads the live table, so two
    passes may legitimately see different mounts.

    Args:
        path: Mount table file. Defaults to /proc/self/mounts.
        include_pseudo: If True, also yield pseudo filesystems (entries
            whose device or mount point is not an absolute path).

    Example:
        >>> table = MountTable()
        >>> for entry in table.entries():
        ...     print(entry.device, entry.mount_point)
    """

    def __init__(
        self,
        path: Path = DEFAULT_MOUNT_TABLE,
        *,
        include_pseudo: bool = False,
    ) -> None:
        self._path = path
        self._include_pseudo = include_pseudo

    @property
    def path(self) -> Path:
        """Return the mount table file being read."""
        return self._path

    def entries(self) -> Iterator[MountEntry]:
        """Open the mount table and return an iterator over its entries.

        The table is opened eagerly so that an unreadable table is
        reported before any entry is consumed.

        Returns:
            Lazy iterator of MountEntry in table order.

        Raises:
            MountTableError: If the mount table cannot be opened.
        """
        try:
            handle = open(self._path, encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            msg = f"Cannot read mount table {self._path}: {e.strerror or e}"
            raise MountTableError(msg) from e

        return self._iter_entries(handle)

    def _iter_entries(self, handle: TextIO) -> Iterator[MountEntry]:
        with handle:
            for line in handle:
                entry = parse_mount_line(line)
                if entry is None:
                    continue

                if not self._include_pseudo and entry.is_pseudo:
                    logger.debug(
                        "Skipping pseudo filesystem %s on %s", entry.device, entry.mount_point
                    )
                    continue

                yield entry
