"""Integration tests for the `kvconf` CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kvconf.cli.app import app
from kvconf.logging import LOGGER_NAME
from kvconf.meta import __version__

# Mark all tests in this module as CLI tests
# Run with: pytest -m cli
pytestmark = pytest.mark.cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logger() -> Generator[None, None, None]:
    """Drop handlers installed by ``-v`` runs."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(level)


class TestRoot:
    """Tests for the application callback."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self) -> None:
        """--help lists the commands."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("sections", "show", "get"):
            assert command in result.output


class TestSections:
    """Tests for `kvconf sections`."""

    def test_lists_sections(self, sample_file: Path) -> None:
        """Show every section with key counts."""
        result = runner.invoke(app, ["sections", str(sample_file)])
        assert result.exit_code == 0
        assert "(default)" in result.output
        assert "database" in result.output
        assert "log" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Report read failures and exit 1."""
        result = runner.invoke(app, ["sections", str(tmp_path / "nope.conf")])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_parse_error(self, write_config: Callable[[str, str], Path]) -> None:
        """Report the offending line and exit 1."""
        path = write_config("a=1\n???\n", "bad.conf")
        result = runner.invoke(app, ["sections", str(path)])
        assert result.exit_code == 1
        assert "unrecognized input at line 2" in result.output


class TestShow:
    """Tests for `kvconf show`."""

    def test_all_sections(self, sample_file: Path) -> None:
        """List pairs from every section."""
        result = runner.invoke(app, ["show", str(sample_file)])
        assert result.exit_code == 0
        assert "number" in result.output
        assert "admin" in result.output
        assert "fatal" in result.output

    def test_one_section(self, sample_file: Path) -> None:
        """Restrict output to one section."""
        result = runner.invoke(app, ["show", str(sample_file), "--section", "database"])
        assert result.exit_code == 0
        assert "admin" in result.output
        assert "fatal" not in result.output

    def test_unknown_section(self, sample_file: Path) -> None:
        """Unknown sections exit 1 and list available ones."""
        result = runner.invoke(app, ["show", str(sample_file), "-s", "cache"])
        assert result.exit_code == 1
        assert "Section 'cache' not found" in result.output

    def test_empty_file(self, write_config: Callable[[str, str], Path]) -> None:
        """Empty documents report no pairs."""
        path = write_config("# nothing here\n", "empty.conf")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 0
        assert "No key/value pairs found" in result.output


class TestGet:
    """Tests for `kvconf get`."""

    def test_string_default_section(self, sample_file: Path) -> None:
        """Read a raw string from the default section."""
        result = runner.invoke(app, ["get", str(sample_file), "every"])
        assert result.exit_code == 0
        assert result.output.strip() == "3m20s"

    def test_typed_value(self, sample_file: Path) -> None:
        """Convert with the requested accessor."""
        result = runner.invoke(app, ["get", str(sample_file), "port", "-s", "database", "-t", "uint32"])
        assert result.exit_code == 0
        assert result.output.strip() == "5432"

    def test_duration(self, sample_file: Path) -> None:
        """Durations print as timedelta text."""
        result = runner.invoke(app, ["get", str(sample_file), "every", "--type", "duration"])
        assert result.exit_code == 0
        assert result.output.strip() == "0:03:20"

    def test_time_of_day(self, write_config: Callable[[str, str], Path]) -> None:
        """Times print as HH:MM."""
        path = write_config("backup = 3:05\n", "times.conf")
        result = runner.invoke(app, ["get", str(path), "backup", "--type", "time"])
        assert result.exit_code == 0
        assert result.output.strip() == "03:05"

    def test_missing_key(self, sample_file: Path) -> None:
        """A missing key exits 1."""
        result = runner.invoke(app, ["get", str(sample_file), "number", "-s", "database"])
        assert result.exit_code == 1
        assert "key not found" in result.output

    def test_malformed_value(self, sample_file: Path) -> None:
        """A malformed value exits 1."""
        result = runner.invoke(app, ["get", str(sample_file), "username", "-s", "database", "-t", "int"])
        assert result.exit_code == 1
        assert "failed to parse" in result.output

    def test_default_used(self, sample_file: Path) -> None:
        """--default replaces missing or malformed values."""
        missing = runner.invoke(app, ["get", str(sample_file), "number", "-s", "database", "-t", "int", "-d", "8086"])
        malformed = runner.invoke(app, ["get", str(sample_file), "username", "-s", "database", "-t", "int", "-d", "0"])
        assert missing.exit_code == 0
        assert missing.output.strip() == "8086"
        assert malformed.exit_code == 0
        assert malformed.output.strip() == "0"

    def test_invalid_type_choice(self, sample_file: Path) -> None:
        """Unknown --type values are rejected by the option parser."""
        result = runner.invoke(app, ["get", str(sample_file), "number", "-t", "complex"])
        assert result.exit_code != 0

    def test_verbose_installs_handler(self, sample_file: Path) -> None:
        """-vv configures the package logger."""
        result = runner.invoke(app, ["-vv", "get", str(sample_file), "number", "-t", "int"])
        assert result.exit_code == 0
        assert logging.getLogger(LOGGER_NAME).handlers
