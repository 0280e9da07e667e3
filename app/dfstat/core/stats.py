"""Filesystem statistics collection via statvfs(2)."""

import os

from dfstat.core.errors import StatsQueryError
from dfstat.models.stats import FilesystemStats


def collect_stats(mount_point: str) -> FilesystemStats:
    """Query block and inode statistics for a mount point.

    Args:
        mount_point: Absolute path of the mounted filesystem.

    Returns:
        FilesystemStats snapshot for the mount point.

    Raises:
        StatsQueryError: If the statvfs call fails (permission denied,
            stale NFS handle, unsupported filesystem, ...).
    """
    try:
        vfs = os.statvfs(mount_point)
    except OSError as e:
        raise StatsQueryError(mount_point, e.strerror or str(e)) from e

    return FilesystemStats(
        block_size=vfs.f_bsize,
        blocks_total=vfs.f_blocks,
        blocks_free=vfs.f_bfree,
        blocks_available=vfs.f_bavail,
        inodes_total=vfs.f_files,
        inodes_free=vfs.f_ffree,
        inodes_available=vfs.f_favail,
    )
