"""Filesystem statistics model."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FilesystemStats:
    """Snapshot of block and inode usage for one mount point.

    Block counts are in units of ``block_size`` bytes. Inode counts
    are raw object counts.

    Attributes:
        block_size: Filesystem block size in bytes.
        blocks_total: Total number of blocks.
        blocks_free: Free blocks (including those reserved for root).
        blocks_available: Blocks available to unprivileged users.
        inodes_total: Total number of inodes.
        inodes_free: Free inodes.
        inodes_available: Inodes available to unprivileged users.
    """

    block_size: int
    blocks_total: int
    blocks_free: int
    blocks_available: int
    inodes_total: int
    inodes_free: int
    inodes_available: int

    @property
    def blocks_used(self) -> int:
        """Number of blocks in use."""
        return self.blocks_total - self.blocks_free

    @property
    def inodes_used(self) -> int:
        """Number of inodes in use."""
        return self.inodes_total - self.inodes_free

    @property
    def has_capacity(self) -> bool:
        """Check if the filesystem reports any blocks at all."""
        return self.blocks_total > 0
