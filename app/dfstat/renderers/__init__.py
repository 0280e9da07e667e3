"""Report renderers for the supported output modes.

This module exports the renderer classes and a factory that picks
one from the run configuration.
"""

from rich.console import Console

from dfstat.models.display import DisplayConfig, OutputMode
from dfstat.renderers.base import ReportRenderer
from dfstat.renderers.json_array import JsonRenderer, format_json_entry
from dfstat.renderers.quiet import QuietRenderer
from dfstat.renderers.verbose import VerboseRenderer


def create_renderer(config: DisplayConfig, console: Console) -> ReportRenderer:
    """Get the renderer for the configured output mode.

    Args:
        config: Run configuration.
        console: Console the report is written to.

    Returns:
        Renderer instance for ``config.output_mode``.
    """
    if config.output_mode == OutputMode.JSON:
        return JsonRenderer(console)
    if config.output_mode == OutputMode.QUIET:
        return QuietRenderer(console, color=config.color_enabled)
    return VerboseRenderer(console, color=config.color_enabled)


__all__ = [
    "JsonRenderer",
    "QuietRenderer",
    "ReportRenderer",
    "VerboseRenderer",
    "create_renderer",
    "format_json_entry",
]
