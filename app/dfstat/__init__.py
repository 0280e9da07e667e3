"""dfstat - Filesystem space and inode usage reporter.

Lists mounted filesystems with their block and inode usage as
human-readable text, one line per mount, or JSON.
"""

__version__ = "0.3.0"
