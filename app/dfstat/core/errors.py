"""Exceptions raised while building a filesystem report."""


class DfstatError(Exception):
    """Base exception for dfstat errors."""


class UsageError(DfstatError):
    """Raised when command-line flags conflict."""


class MountTableError(DfstatError):
    """Raised when the mount table cannot be read."""


class StatsQueryError(DfstatError):
    """Raised when filesystem statistics cannot be queried for a mount point."""

    def __init__(self, mount_point: str, reason: str) -> None:
        self.mount_point = mount_point
        self.reason = reason
        super().__init__(f"statvfs {mount_point}: {reason}")
