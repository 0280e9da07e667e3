"""Unit tests for the dfstat command.

Runs the Typer application against a sample mount table with
statistics supplied by a fake statvfs.
"""

import json
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from dfstat import __version__
from dfstat.cli.main import app, build_display_config
from dfstat.core.errors import StatsQueryError, UsageError
from dfstat.core.mounts import MountTable
from dfstat.models.display import OutputMode
from dfstat.models.stats import FilesystemStats
from typer.testing import CliRunner

runner = CliRunner()

_ANSI = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def system(
    mount_table_path: Path, fake_collector: Callable[[str], FilesystemStats]
) -> Iterator[None]:
    """Replace the live mount table and statvfs with the sample data."""

    def _table(**kwargs: Any) -> MountTable:
        return MountTable(mount_table_path, **kwargs)

    with (
        patch("dfstat.cli.main.MountTable", side_effect=_table),
        patch("dfstat.core.report.collect_stats", side_effect=fake_collector),
    ):
        yield


class TestBuildDisplayConfig:
    """Tests for build_display_config function."""

    def test_default_is_verbose(self) -> None:
        """No flags select plain verbose output."""
        config = build_display_config(color=False, json_output=False, quiet=False, pseudo=False)
        assert config.output_mode == OutputMode.VERBOSE
        assert config.color_enabled is False

    def test_quiet_with_color(self) -> None:
        """Quiet output can be colored."""
        config = build_display_config(color=True, json_output=False, quiet=True, pseudo=True)
        assert config.output_mode == OutputMode.QUIET
        assert config.color_enabled is True
        assert config.include_pseudo_filesystems is True

    def test_json_with_color_rejected(self) -> None:
        """JSON and color are mutually exclusive."""
        with pytest.raises(UsageError, match="--color"):
            build_display_config(color=True, json_output=True, quiet=False, pseudo=False)

    def test_json_with_quiet_rejected(self) -> None:
        """JSON and quiet are mutually exclusive."""
        with pytest.raises(UsageError, match="--quiet"):
            build_display_config(color=False, json_output=True, quiet=True, pseudo=False)


class TestGlobalOptions:
    """Tests for help and version flags."""

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help(self, flag: str) -> None:
        """Help is shown and exits successfully."""
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        assert "Usage" in result.stdout
        assert "--psuedofs" in result.stdout

    @pytest.mark.parametrize("flag", ["--version", "-V"])
    def test_version(self, flag: str) -> None:
        """Version prints name and version."""
        result = runner.invoke(app, [flag])
        assert result.exit_code == 0
        assert result.stdout.strip() == f"dfstat {__version__}"


@pytest.mark.usefixtures("system")
class TestReportOutput:
    """Tests for the three output modes."""

    def test_verbose_lists_real_filesystems(self) -> None:
        """Default output shows every real filesystem with blocks."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        headers = [line for line in result.stdout.splitlines() if " mounted at " in line]
        assert headers == [
            "/dev/sda1 mounted at /",
            "/dev/sdb1 mounted at /mnt/data disk",
            "/dev/sda1 mounted at /srv/bind",
        ]
        assert result.stdout.count("\n\n") == 3

    def test_quiet(self) -> None:
        """Quiet output has one line per mount."""
        result = runner.invoke(app, ["-q", "/mnt/data disk"])

        assert result.exit_code == 0
        assert result.stdout == (
            "/dev/sdb1 mounted at /mnt/data disk, 500.00K/1000.00K (50.00%), "
            "1000.00K total, 500.00K free, 400.00K available\n"
        )

    def test_json(self) -> None:
        """JSON output is a parseable array of the displayed mounts."""
        result = runner.invoke(app, ["--json"])

        assert result.exit_code == 0
        assert result.stdout.startswith("[{")
        assert result.stdout.endswith("}]\n")
        parsed = json.loads(result.stdout)
        assert [m["mnt"]["dir"] for m in parsed] == ["/", "/mnt/data disk", "/srv/bind"]
        assert parsed[0]["mnt"]["passno"] == 1

    def test_json_with_no_matching_mounts(self) -> None:
        """A selector matching only an empty filesystem yields an empty array."""
        result = runner.invoke(app, ["-j", "/snap/core"])

        assert result.exit_code == 0
        assert result.stdout == "[]\n"

    def test_psuedofs_includes_pseudo_filesystems(self) -> None:
        """-p adds pseudo filesystems that report blocks."""
        result = runner.invoke(app, ["-j", "-p"])

        assert result.exit_code == 0
        dirs = [m["mnt"]["dir"] for m in json.loads(result.stdout)]
        assert dirs == ["/", "/run", "/mnt/data disk", "/srv/bind"]

    def test_without_psuedofs_only_absolute_sources(self) -> None:
        """Without -p every mount has an absolute device and mount point."""
        result = runner.invoke(app, ["--json"])

        for mount in json.loads(result.stdout):
            assert mount["mnt"]["fsname"].startswith("/")
            assert mount["mnt"]["dir"].startswith("/")

    @pytest.mark.parametrize("flag", ["--color", "--colour", "-c"])
    def test_color(self, flag: str) -> None:
        """Color flags add ANSI codes without changing the text."""
        plain = runner.invoke(app, ["-q", "/"])
        colored = runner.invoke(app, ["-q", flag, "/"])

        assert colored.exit_code == 0
        assert "\x1b[" in colored.stdout
        assert _ANSI.sub("", colored.stdout) == plain.stdout


@pytest.mark.usefixtures("system")
class TestErrors:
    """Tests for exit codes and error messages."""

    def test_unmatched_selector(self) -> None:
        """A selector matching nothing is reported once and exits 1."""
        result = runner.invoke(app, ["-q", "/", "/nonexistent"])

        assert result.exit_code == 1
        assert "/dev/sda1 mounted at /, " in result.output
        not_found = [line for line in result.output.splitlines() if "not found" in line]
        assert not_found == ["Error: Filesystem /nonexistent not found"]

    def test_every_unmatched_selector_reported_in_order(self) -> None:
        """Each missing selector gets its own line."""
        result = runner.invoke(app, ["-q", "/b", "/", "/a"])

        assert result.exit_code == 1
        not_found = [line for line in result.output.splitlines() if "not found" in line]
        assert not_found == [
            "Error: Filesystem /b not found",
            "Error: Filesystem /a not found",
        ]

    def test_zero_block_selector_is_found(self) -> None:
        """A selector matched only by an empty filesystem is not an error."""
        result = runner.invoke(app, ["/dev/loop0"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_pseudo_selector_needs_flag(self) -> None:
        """Pseudo filesystems can only be selected with -p."""
        without = runner.invoke(app, ["-q", "/run"])
        with_flag = runner.invoke(app, ["-q", "-p", "/run"])

        assert without.exit_code == 1
        assert "Filesystem /run not found" in without.output
        assert with_flag.exit_code == 0
        assert with_flag.stdout.startswith("tmpfs mounted at /run, 512.00K/1.00M (50.00%)")

    @pytest.mark.parametrize(
        "args",
        [["-j", "-c"], ["--json", "--colour"], ["-j", "-q"], ["-q", "--json"]],
    )
    def test_conflicting_flags(self, args: list[str]) -> None:
        """JSON combined with color or quiet is a usage error."""
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Invalid usage" in result.output
        assert "mounted at" not in result.output

    def test_unreadable_mount_table(self, tmp_path: Path) -> None:
        """A missing mount table aborts before any output."""

        def _missing(**kwargs: Any) -> MountTable:
            return MountTable(tmp_path / "missing", **kwargs)

        with patch("dfstat.cli.main.MountTable", side_effect=_missing):
            result = runner.invoke(app, ["--json"])

        assert result.exit_code == 1
        assert "Cannot read mount table" in result.output
        assert not result.output.startswith("[")

    def test_statvfs_failure_aborts(self) -> None:
        """A failing statistics query stops the run with exit code 1."""
        with patch(
            "dfstat.core.report.collect_stats",
            side_effect=StatsQueryError("/", "Permission denied"),
        ):
            result = runner.invoke(app, ["-q"])

        assert result.exit_code == 1
        assert "statvfs /: Permission denied" in result.output
        assert "mounted at" not in result.output

    @pytest.mark.parametrize("args", [["-x"], ["--bogus"], ["-qx", "/"]])
    def test_unknown_flag(self, args: list[str]) -> None:
        """Unknown flags are usage errors with exit code 1."""
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Invalid usage" in result.output
        assert "mounted at" not in result.output

    @pytest.mark.parametrize(
        "args", [["-c", "-c"], ["-p", "--psuedofs"], ["-qq"], ["--colour", "-c"]]
    )
    def test_repeated_flag(self, args: list[str]) -> None:
        """Giving the same flag twice, in any spelling, is a usage error."""
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "given more than once" in result.output

    def test_selector_after_double_dash(self) -> None:
        """Arguments after -- are selectors even if they look like flags."""
        result = runner.invoke(app, ["-q", "--", "-c"])

        assert result.exit_code == 1
        assert "Filesystem -c not found" in result.output

    def test_empty_selector_is_not_found(self) -> None:
        """An empty selector is reported like any other missing filesystem."""
        result = runner.invoke(app, ["-q", "", "/"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "/dev/sda1 mounted at /, " in result.output
        assert "Error: Filesystem  not found" in result.output
