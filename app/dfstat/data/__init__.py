"""Bundled data files for dfstat (default theme)."""
