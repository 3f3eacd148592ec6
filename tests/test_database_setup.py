"""Tests for setup_wizard.database."""

import logging
from pathlib import Path

import pytest

from setup_wizard.config import SetupConfig
from setup_wizard.database import ConnectionConfig, run_database_setup
from setup_wizard.errors import CommandFailedError, ConnectionConfigError
from setup_wizard.runner import RecordingRunner

DB_ENV = {
    "DATABASE_HOST": "localhost",
    "DATABASE_USER": "app",
    "DATABASE_PASSWORD": "secret",
    "DATABASE_NAME": "appdb",
}


def _sql_dir(root: Path, *names: str) -> Path:
    sql = root / "sql"
    sql.mkdir()
    for name in names:
        (sql / name).write_text("SELECT 1;")
    return sql


class TestConnectionConfig:
    def test_from_env(self) -> None:
        conn = ConnectionConfig.from_env(DB_ENV)
        assert conn == ConnectionConfig("localhost", "app", "secret", "appdb")

    def test_missing_vars_are_all_named(self) -> None:
        with pytest.raises(ConnectionConfigError) as exc_info:
            ConnectionConfig.from_env({"DATABASE_HOST": "db", "DATABASE_USER": ""})
        assert exc_info.value.missing == (
            "DATABASE_USER",
            "DATABASE_PASSWORD",
            "DATABASE_NAME",
        )
        assert "DATABASE_PASSWORD" in str(exc_info.value)

    def test_psql_args(self, tmp_path: Path) -> None:
        conn = ConnectionConfig.from_env({**DB_ENV, "DATABASE_PORT": "5433"})
        args = conn.psql_args(tmp_path / "a.sql")
        assert args == [
            "psql",
            "-h",
            "localhost",
            "-p",
            "5433",
            "-U",
            "app",
            "-d",
            "appdb",
            "-v",
            "ON_ERROR_STOP=1",
            "-f",
            str(tmp_path / "a.sql"),
        ]
        assert conn.psql_env() == {"PGPASSWORD": "secret"}

    def test_psql_args_without_port(self, tmp_path: Path) -> None:
        args = ConnectionConfig.from_env(DB_ENV).psql_args(tmp_path / "a.sql")
        assert "-p" not in args


def test_no_sql_dir_warns_and_runs_nothing(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    runner = RecordingRunner()
    config = SetupConfig(sql_files=("a.sql",))
    with caplog.at_level(logging.WARNING):
        executed = run_database_setup(config, runner, tmp_path, DB_ENV)
    assert executed == []
    assert runner.commands == []
    assert "No sql/ directory found" in caplog.text


def test_empty_file_list_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    _sql_dir(tmp_path, "a.sql")
    runner = RecordingRunner()
    with caplog.at_level(logging.WARNING):
        executed = run_database_setup(SetupConfig(), runner, tmp_path, {})
    assert executed == []
    assert runner.commands == []
    assert "No SQL files defined" in caplog.text


def test_missing_file_is_skipped_in_order(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """a.sql and b.sql run in order; missing.sql only produces a warning."""
    sql = _sql_dir(tmp_path, "a.sql", "b.sql")
    runner = RecordingRunner()
    config = SetupConfig(sql_files=("a.sql", "missing.sql", "b.sql"))
    with caplog.at_level(logging.WARNING):
        executed = run_database_setup(config, runner, tmp_path, DB_ENV)

    assert executed == ["a.sql", "b.sql"]
    assert [cmd[-1] for cmd in runner.commands] == [str(sql / "a.sql"), str(sql / "b.sql")]
    assert all(inv.env == {"PGPASSWORD": "secret"} for inv in runner.invocations)
    assert "SQL file not found: missing.sql" in caplog.text


def test_incomplete_connection_fails_before_executing(tmp_path: Path) -> None:
    _sql_dir(tmp_path, "a.sql")
    runner = RecordingRunner()
    with pytest.raises(ConnectionConfigError):
        run_database_setup(SetupConfig(sql_files=("a.sql",)), runner, tmp_path, {})
    assert runner.commands == []


def test_failing_file_stops_the_batch(tmp_path: Path) -> None:
    _sql_dir(tmp_path, "a.sql", "b.sql")

    class _FailFirst(RecordingRunner):
        def run(self, args, *, env=None):
            super().run(args, env=env)
            raise CommandFailedError(args, 3)

    runner = _FailFirst()
    with pytest.raises(CommandFailedError):
        run_database_setup(
            SetupConfig(sql_files=("a.sql", "b.sql")), runner, tmp_path, DB_ENV
        )
    assert len(runner.commands) == 1


def test_custom_sql_dir(tmp_path: Path) -> None:
    (tmp_path / "db").mkdir()
    (tmp_path / "db" / "init.sql").write_text("SELECT 1;")
    runner = RecordingRunner()
    config = SetupConfig(sql_files=("init.sql",), sql_dir="db")
    assert run_database_setup(config, runner, tmp_path, DB_ENV) == ["init.sql"]
