"""Tests for setup_wizard.runner."""

import sys
from pathlib import Path

import pytest

from setup_wizard.errors import CommandFailedError, CommandNotFoundError
from setup_wizard.runner import RecordingRunner, SubprocessRunner


def test_subprocess_runner_success(tmp_path: Path) -> None:
    """Commands run in cwd with extra env overlaid on the process env."""
    marker = tmp_path / "out.txt"
    script = (
        "import os, pathlib; "
        f"pathlib.Path({str(marker)!r}).write_text(os.environ['SETUP_TEST_VAR'] + ':' + os.getcwd())"
    )
    SubprocessRunner(tmp_path).run([sys.executable, "-c", script], env={"SETUP_TEST_VAR": "x"})
    value, cwd = marker.read_text().split(":", 1)
    assert value == "x"
    assert Path(cwd).resolve() == tmp_path.resolve()


def test_subprocess_runner_nonzero_exit(tmp_path: Path) -> None:
    args = [sys.executable, "-c", "import sys; sys.exit(3)"]
    with pytest.raises(CommandFailedError) as exc_info:
        SubprocessRunner(tmp_path).run(args)
    assert exc_info.value.returncode == 3
    assert exc_info.value.command == args


def test_subprocess_runner_missing_binary(tmp_path: Path) -> None:
    with pytest.raises(CommandNotFoundError, match="definitely-not-a-real-binary"):
        SubprocessRunner(tmp_path).run(["definitely-not-a-real-binary-42", "install"])


def test_recording_runner_records_without_running() -> None:
    runner = RecordingRunner()
    runner.run(["npm", "install"])
    runner.run(["psql", "-f", "a.sql"], env={"PGPASSWORD": "pw"})
    assert runner.commands == [["npm", "install"], ["psql", "-f", "a.sql"]]
    assert runner.invocations[1].env == {"PGPASSWORD": "pw"}
