"""Selector model for picking mounts to report on."""

from dataclasses import dataclass


@dataclass(slots=True)
class Selector:
    """A caller-supplied device path or mount point.

    The ``matched`` flag starts out False and is set the first time a
    mount entry satisfies the selector. It is never cleared.

    Attributes:
        text: Device path (e.g., '/dev/sda1') or mount point (e.g., '/').
        matched: Whether any mount entry has matched this selector.
    """

    text: str
    matched: bool = False

    def matches(self, device: str, mount_point: str) -> bool:
        """Check for an exact match against either field."""
        return self.text in (device, mount_point)
