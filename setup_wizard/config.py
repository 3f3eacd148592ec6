"""Load the setup configuration from setup.config.json (or YAML)."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from setup_wizard.constants import (
    DEFAULT_PACKAGE_MANAGER,
    ENV_FILE,
    SCRIPT_FILE,
    SQL_DIR,
)
from setup_wizard.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupConfig:
    """Immutable setup configuration, passed explicitly to every step."""

    package_managers: tuple[str, ...] = (DEFAULT_PACKAGE_MANAGER,)
    environments: dict[str, list[dict[str, Any]]] = field(default_factory=dict)
    sql_files: tuple[str, ...] = ()
    cleanup_after_production: bool = False
    docker_compose: bool = False
    sql_dir: str = SQL_DIR
    env_file: str = ENV_FILE
    script: str = SCRIPT_FILE
    logging: dict[str, Any] = field(default_factory=dict)


def _read_raw(path: Path) -> Any:
    """Parse the file as YAML when the suffix says so, JSON otherwise."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigError(f"{path.name} not found") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path.name}: {e}") from e

    if path.suffix in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path.name} parse error: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path.name} parse error: {e}") from e


def _string_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key!r} must be a list of strings")
    return tuple(value)


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{key!r} must be true or false")
    return value


def _environments(data: dict[str, Any]) -> dict[str, list[dict[str, Any]]]:
    value = data.get("environments") or {}
    if not isinstance(value, dict):
        raise ConfigError("'environments' must map environment names to prompt lists")
    out: dict[str, list[dict[str, Any]]] = {}
    for name, questions in value.items():
        questions = questions or []
        if not isinstance(questions, list) or not all(
            isinstance(q, dict) for q in questions
        ):
            raise ConfigError(f"Prompts for environment {name!r} must be a list of objects")
        out[str(name)] = questions
    return out


def _text(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{key!r} must be a non-empty string")
    return value


def parse_config(data: Any) -> SetupConfig:
    """Validate a decoded config object and build a SetupConfig."""
    if not isinstance(data, dict):
        raise ConfigError("Setup config must be an object")

    logging_cfg = data.get("logging") or {}
    if not isinstance(logging_cfg, dict):
        raise ConfigError("'logging' must be an object")

    return SetupConfig(
        package_managers=_string_list(data, "packageManager") or (DEFAULT_PACKAGE_MANAGER,),
        environments=_environments(data),
        sql_files=_string_list(data, "sql_files"),
        cleanup_after_production=_flag(data, "cleanup_after_production"),
        docker_compose=_flag(data, "docker_compose"),
        sql_dir=_text(data, "sql_dir", SQL_DIR),
        env_file=_text(data, "env_file", ENV_FILE),
        script=_text(data, "script", SCRIPT_FILE),
        logging=logging_cfg,
    )


def load_config(path: Path) -> SetupConfig:
    """Load and validate the setup config file. Raises ConfigError."""
    config = parse_config(_read_raw(path))
    logger.debug(
        "Loaded %s: %d environment(s), %d SQL file(s)",
        path.name,
        len(config.environments),
        len(config.sql_files),
    )
    return config
