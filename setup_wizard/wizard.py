"""Setup orchestration: the fixed sequence of bootstrap steps."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from setup_wizard.config import SetupConfig
from setup_wizard.constants import CONFIG_FILE, PRODUCTION_ENVIRONMENTS
from setup_wizard.prompter import Prompter
from setup_wizard.runner import CommandRunner
from setup_wizard.steps import (
    cleanup_setup_files,
    detect_package_manager,
    initialize_project,
    run_docker_compose,
    select_environment,
    setup_wizard,
)

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Result of running the setup sequence."""

    package_manager: str
    environment: str
    env_written: bool = False
    sql_executed: list[str] = field(default_factory=list)
    compose_started: bool = False
    removed: list[Path] = field(default_factory=list)


def is_production(environment: str) -> bool:
    return environment in PRODUCTION_ENVIRONMENTS


def run_setup(
    config: SetupConfig,
    runner: CommandRunner,
    prompter: Prompter,
    project_root: Path | None = None,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SetupResult:
    """Run every setup step in order.

    The environment is resolved once and reused for both the env file and
    the cleanup decision. Any SetupError or KeyboardInterrupt propagates to
    the caller; steps already completed are not rolled back.
    """
    root = project_root or Path.cwd()
    cfg_path = config_path or (root / CONFIG_FILE)
    env = os.environ if environ is None else environ

    package_manager = detect_package_manager(config, prompter)
    initialize_project(package_manager, runner)

    environment = select_environment(config, prompter)
    logger.info("Setting up %s environment", environment)
    result = SetupResult(package_manager=package_manager, environment=environment)

    step = setup_wizard(config, environment, prompter, runner, root, env)
    result.env_written = step.env_written
    result.sql_executed = step.sql_executed

    result.compose_started = run_docker_compose(config, runner)

    if is_production(environment):
        result.removed = cleanup_setup_files(config, root, cfg_path)

    return result
