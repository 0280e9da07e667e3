"""Mount table models.

This module defines the data structure for a single entry of the
system mount table.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MountEntry:
    """Represents one line of the system mount table.

    Attributes:
        device: Mount source (e.g., '/dev/sda1', 'proc', 'tmpfs').
        mount_point: Absolute path the filesystem is mounted at.
        fs_type: Filesystem type (e.g., 'ext4', 'nfs4').
        options: Comma-separated mount options as listed in the table.
        dump_frequency: Dump frequency field (fs_freq).
        pass_number: fsck pass number field (fs_passno).
    """

    device: str
    mount_point: str
    fs_type: str
    options: str
    dump_frequency: int = 0
    pass_number: int = 0

    @property
    def is_pseudo(self) -> bool:
        """Check if this entry looks like a pseudo filesystem.

        Real block and network filesystems are mounted from a path-like
        source onto an absolute path. Anything else (proc, sysfs, tmpfs
        mounted from a bare name) is treated as pseudo.
        """
        return not (self.device.startswith("/") and self.mount_point.startswith("/"))
