"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from dfstat.models.stats import FilesystemStats


@pytest.fixture
def mock_mounts_output() -> str:
    """Sample /proc/self/mounts content for testing."""
    return """/dev/sda1 / ext4 rw,relatime 0 1
proc /proc proc rw,nosuid,nodev,noexec,relatime 0 0
tmpfs /run tmpfs rw,nosuid,nodev,mode=755 0 0
/dev/sdb1 /mnt/data\\040disk ext4 rw,noatime 0 2
/dev/loop0 /snap/core squashfs ro,nodev,relatime 0 0
/dev/sda1 /srv/bind ext4 rw,relatime 0 0
"""


@pytest.fixture
def mount_table_path(tmp_path: Path, mock_mounts_output: str) -> Path:
    """Write the sample mount table to a temporary file."""
    path = tmp_path / "mounts"
    path.write_text(mock_mounts_output)
    return path


@pytest.fixture
def root_stats() -> FilesystemStats:
    """20 GiB ext4 root filesystem, 6.5 GiB used."""
    return FilesystemStats(
        block_size=4096,
        blocks_total=5_242_880,
        blocks_free=3_538_944,
        blocks_available=3_276_800,
        inodes_total=1_310_720,
        inodes_free=1_000_000,
        inodes_available=1_000_000,
    )


@pytest.fixture
def data_stats() -> FilesystemStats:
    """Small filesystem with 1 KiB blocks and no inode information."""
    return FilesystemStats(
        block_size=1024,
        blocks_total=1000,
        blocks_free=500,
        blocks_available=400,
        inodes_total=0,
        inodes_free=0,
        inodes_available=0,
    )


@pytest.fixture
def empty_stats() -> FilesystemStats:
    """Filesystem that reports no blocks at all."""
    return FilesystemStats(
        block_size=4096,
        blocks_total=0,
        blocks_free=0,
        blocks_available=0,
        inodes_total=10,
        inodes_free=0,
        inodes_available=0,
    )


@pytest.fixture
def run_stats() -> FilesystemStats:
    """1 MiB tmpfs, half used."""
    return FilesystemStats(
        block_size=4096,
        blocks_total=256,
        blocks_free=128,
        blocks_available=128,
        inodes_total=1024,
        inodes_free=1000,
        inodes_available=1000,
    )


@pytest.fixture
def stats_by_mount(
    root_stats: FilesystemStats,
    data_stats: FilesystemStats,
    empty_stats: FilesystemStats,
    run_stats: FilesystemStats,
) -> dict[str, FilesystemStats]:
    """Statistics for every mount point in the sample mount table."""
    return {
        "/": root_stats,
        "/proc": empty_stats,
        "/run": run_stats,
        "/mnt/data disk": data_stats,
        "/snap/core": empty_stats,
        "/srv/bind": root_stats,
    }


@pytest.fixture
def fake_collector(
    stats_by_mount: dict[str, FilesystemStats],
) -> Callable[[str], FilesystemStats]:
    """Statistics query backed by stats_by_mount."""
    return stats_by_mount.__getitem__
