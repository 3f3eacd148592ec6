"""Environment file wizard step: ask the environment's prompts, write .env."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from setup_wizard.config import SetupConfig
from setup_wizard.database import run_database_setup
from setup_wizard.env_file import answer_values, write_env_file
from setup_wizard.prompter import Prompter
from setup_wizard.runner import CommandRunner

logger = logging.getLogger(__name__)


@dataclass
class EnvStepResult:
    """What the wizard step changed."""

    env_written: bool = False
    sql_executed: list[str] = field(default_factory=list)


def setup_wizard(
    config: SetupConfig,
    environment: str,
    prompter: Prompter,
    runner: CommandRunner,
    project_root: Path,
    environ: Mapping[str, str],
) -> EnvStepResult:
    """Write the env file for ``environment`` and then run the SQL files.

    An existing env file means setup already ran: nothing is asked, written
    or executed. Database variables are taken from the answers as written,
    with the process environment taking precedence.
    """
    env_path = project_root / config.env_file
    if env_path.exists():
        logger.warning("%s file already exists! Skipping setup wizard.", config.env_file)
        return EnvStepResult()

    questions = config.environments.get(environment) or []
    if not questions:
        logger.warning("No questions defined for %s. Skipping setup wizard.", environment)
        return EnvStepResult()

    answers = prompter.prompt(questions)
    write_env_file(env_path, answers)
    print(f"✅ {config.env_file} file created for {environment} environment!")

    db_environ = {**answer_values(answers), **environ}
    executed = run_database_setup(config, runner, project_root, db_environ)
    return EnvStepResult(env_written=True, sql_executed=executed)
