"""Unit tests for utility functions (expo_boilerplate.utils).

Tests cover:
- run_command (success, failure, timeout, cwd, env vars, capture=False, missing program)
- format_duration
- Rich output helpers
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from expo_boilerplate.utils import (
    format_duration,
    print_error,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)

PY = sys.executable


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command([PY, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    async def test_failed_command(self):
        returncode, _, _ = await run_command([PY, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    @pytest.mark.unit
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [PY, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_command_timeout(self):
        returncode, stdout, stderr = await run_command(
            [PY, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert stdout == ""
        assert "timed out" in stderr

    @pytest.mark.unit
    async def test_command_with_env(self):
        returncode, stdout, _ = await run_command(
            [PY, "-c", "import os; print(os.environ['EXPO_BP_TEST_VAR'])"],
            env={"EXPO_BP_TEST_VAR": "test_value"},
        )
        assert returncode == 0
        assert stdout == "test_value"

    @pytest.mark.unit
    async def test_command_returns_stderr(self):
        _, _, stderr = await run_command(
            [PY, "-c", "import sys; sys.stderr.write('error_msg\\n')"]
        )
        assert stderr == "error_msg"

    @pytest.mark.unit
    async def test_no_capture(self):
        returncode, stdout, stderr = await run_command(
            [PY, "-c", "print('visible')"], capture=False
        )
        assert returncode == 0
        assert stdout == ""
        assert stderr == ""

    @pytest.mark.unit
    async def test_missing_program(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["nonexistent-binary-12345-xyz"])


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0.0s"),
            (3.7, "3.7s"),
            (59.94, "59.9s"),
            (65.2, "1m 5s"),
            (3600, "1h 0s"),
            (3661.0, "1h 1m 1s"),
            (-5, "0.0s"),
        ],
    )
    def test_format(self, seconds: float, expected: str):
        assert format_duration(seconds) == expected


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_success(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_success("Project created")
        mock_console.print.assert_called_once_with("[bold green]Project created[/bold green]")

    @pytest.mark.unit
    def test_print_error_escapes_markup(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_error("bad value [red]")
        printed = mock_console.print.call_args[0][0]
        assert printed.startswith("[bold red]")
        assert "\\[red]" in printed

    @pytest.mark.unit
    def test_print_warning(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_warning("careful")
        mock_console.print.assert_called_once_with("[bold yellow]careful[/bold yellow]")

    @pytest.mark.unit
    def test_print_step(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_step(2, "Installing packages")
        mock_console.print.assert_called_once_with(
            "[bold cyan]Step 2:[/bold cyan] Installing packages"
        )

    @pytest.mark.unit
    def test_print_summary_table(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_summary_table({"Primary": "#3B82F6", "Font": "Inter"}, title="Theme")
        table = mock_console.print.call_args_list[0][0][0]
        assert table.title == "Theme"
        assert table.row_count == 2

    @pytest.mark.unit
    def test_print_summary_table_headers(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_summary_table({"Primary": "#3B82F6"}, title="Theme", columns=("Slot", "Value"))
        table = mock_console.print.call_args[0][0]
        assert [column.header for column in table.columns] == ["Slot", "Value"]
        assert list(table.columns[1].cells) == ["#3B82F6"]

    @pytest.mark.unit
    def test_print_summary_table_stringifies_values(self):
        with patch("expo_boilerplate.utils.console") as mock_console:
            print_summary_table({"Files": 20})
        table = mock_console.print.call_args[0][0]
        assert table.title == "Summary"
        assert [column.header for column in table.columns] == ["Item", "Value"]
        assert list(table.columns[1].cells) == ["20"]
