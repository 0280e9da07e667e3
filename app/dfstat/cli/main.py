"""Main CLI application entry point.

Defines the Typer application, its flags, and the translation of
report errors into exit codes.
"""

import logging
from typing import Annotated

import click
import typer
from rich.logging import RichHandler
from typer.core import TyperCommand

from dfstat import __version__
from dfstat.core.errors import MountTableError, StatsQueryError, UsageError
from dfstat.core.matching import SelectorSet
from dfstat.core.mounts import MountTable
from dfstat.core.report import generate_report
from dfstat.models.display import DisplayConfig, OutputMode
from dfstat.renderers import create_renderer
from dfstat.utils.formatting import create_report_console, err_console, print_error

app = typer.Typer(
    name="dfstat",
    help="Report space and inode usage of mounted filesystems.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class InvalidUsageError(click.UsageError):
    """Command-line usage error reported with exit code 1."""

    exit_code = 1


class DfstatCommand(TyperCommand):
    """Command that rejects repeated flags and exits 1 on any usage error."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            self._reject_repeated_flags(ctx, args)
            return super().parse_args(ctx, args)
        except InvalidUsageError:
            raise
        except click.UsageError as e:
            raise InvalidUsageError(f"Invalid usage: {e.format_message()}", ctx=ctx) from e

    def _reject_repeated_flags(self, ctx: click.Context, args: list[str]) -> None:
        """Raise if any flag is given twice, in any of its spellings."""
        names: dict[str, str] = {}
        for param in self.params:
            if isinstance(param, click.Option) and param.name:
                for opt in (*param.opts, *param.secondary_opts):
                    names[opt] = param.name

        seen: set[str] = set()
        for arg in args:
            if arg == "--":
                break
            if arg.startswith("--"):
                flags = [arg.split("=", 1)[0]]
            elif arg.startswith("-") and len(arg) > 1:
                flags = [f"-{c}" for c in arg[1:]]
            else:
                continue
            for flag in flags:
                name = names.get(flag)
                if name is None:
                    continue
                if name in seen:
                    msg = f"Invalid usage: option {flag} given more than once"
                    raise InvalidUsageError(msg, ctx=ctx)
                seen.add(name)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dfstat {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route debug logging to stderr when verbose output is requested."""
    if not verbose:
        return
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[handler], force=True)


def build_display_config(
    *,
    color: bool,
    json_output: bool,
    quiet: bool,
    pseudo: bool,
) -> DisplayConfig:
    """Build the run configuration from command-line flags.

    Args:
        color: --color was given.
        json_output: --json was given.
        quiet: --quiet was given.
        pseudo: --psuedofs was given.

    Returns:
        Frozen DisplayConfig for the run.

    Raises:
        UsageError: If --json is combined with --color or --quiet.
    """
    if json_output and color:
        msg = "--json cannot be combined with --color"
        raise UsageError(msg)
    if json_output and quiet:
        msg = "--json cannot be combined with --quiet"
        raise UsageError(msg)

    if json_output:
        mode = OutputMode.JSON
    elif quiet:
        mode = OutputMode.QUIET
    else:
        mode = OutputMode.VERBOSE

    return DisplayConfig(
        output_mode=mode,
        color_enabled=color,
        include_pseudo_filesystems=pseudo,
    )


@app.command(cls=DfstatCommand)
def main(
    filesystems: Annotated[
        list[str] | None,
        typer.Argument(
            help=(
                "Filesystems to show: the mount directory (e.g. /) or the disk file "
                "(e.g. /dev/sda1). Omit to list all filesystems."
            ),
            show_default=False,
        ),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", "--colour", "-c", help="Add color to the output."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output in JSON."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show mount and block usage on 1 line."),
    ] = False,
    pseudo: Annotated[
        bool,
        typer.Option("--psuedofs", "-p", help="Output pseudo filesystems too."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug information to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Show space and inode usage of mounted filesystems.

    Examples:
        dfstat                    # All real filesystems
        dfstat / /dev/sdb1        # Only the given mounts
        dfstat --quiet            # One line per mount
        dfstat --json --psuedofs  # Everything, as JSON
    """
    configure_logging(verbose)

    try:
        config = build_display_config(
            color=color,
            json_output=json_output,
            quiet=quiet,
            pseudo=pseudo,
        )
    except UsageError as e:
        print_error(f"Invalid usage: {e}. Try --help.")
        raise typer.Exit(code=1) from e

    table = MountTable(include_pseudo=config.include_pseudo_filesystems)
    selectors = SelectorSet(filesystems or [])
    renderer = create_renderer(config, create_report_console(config.color_enabled))

    try:
        result = generate_report(table, selectors, renderer)
    except (MountTableError, StatsQueryError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for text in result.unmatched:
        print_error(f"Filesystem {text} not found")

    if not result.success:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
