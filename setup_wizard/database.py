"""Run the configured SQL files against PostgreSQL with psql."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from setup_wizard.config import SetupConfig
from setup_wizard.errors import ConnectionConfigError
from setup_wizard.runner import CommandRunner

logger = logging.getLogger(__name__)

_REQUIRED_VARS = {
    "host": "DATABASE_HOST",
    "user": "DATABASE_USER",
    "password": "DATABASE_PASSWORD",
    "name": "DATABASE_NAME",
}


@dataclass(frozen=True)
class ConnectionConfig:
    """Validated psql connection parameters."""

    host: str
    user: str
    password: str
    name: str
    port: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ConnectionConfig":
        """Build from DATABASE_* variables. Raises ConnectionConfigError naming every missing one."""
        missing = [var for var in _REQUIRED_VARS.values() if not environ.get(var)]
        if missing:
            raise ConnectionConfigError(missing)
        values = {field: environ[var] for field, var in _REQUIRED_VARS.items()}
        return cls(port=environ.get("DATABASE_PORT") or None, **values)

    def psql_args(self, sql_path: Path) -> list[str]:
        args = ["psql", "-h", self.host]
        if self.port:
            args += ["-p", self.port]
        args += ["-U", self.user, "-d", self.name, "-v", "ON_ERROR_STOP=1", "-f", str(sql_path)]
        return args

    def psql_env(self) -> dict[str, str]:
        return {"PGPASSWORD": self.password}


def run_database_setup(
    config: SetupConfig,
    runner: CommandRunner,
    project_root: Path,
    environ: Mapping[str, str],
) -> list[str]:
    """Execute config.sql_files in order. Returns the names actually executed.

    A missing SQL directory or an empty file list is a warning, not an error.
    Individual missing files are skipped with a warning. A failing psql call
    raises CommandFailedError and stops the batch.
    """
    print("\n📂 Checking for SQL files...")
    sql_dir = project_root / config.sql_dir
    if not sql_dir.is_dir():
        logger.warning("No %s/ directory found. Skipping database setup.", config.sql_dir)
        return []

    if not config.sql_files:
        logger.warning("No SQL files defined in setup config. Skipping database setup.")
        return []

    connection = ConnectionConfig.from_env(environ)

    print("📂 Running SQL files in order...")
    executed: list[str] = []
    for name in config.sql_files:
        sql_path = sql_dir / name
        if not sql_path.is_file():
            logger.warning("SQL file not found: %s", name)
            continue
        print(f"📑 Executing {name}...")
        runner.run(connection.psql_args(sql_path), env=connection.psql_env())
        executed.append(name)

    print("✅ Database setup complete!")
    return executed
