"""Entry point: ``python -m setup_wizard`` or the ``project-setup`` script."""

import logging
import os
import sys
from pathlib import Path

from setup_wizard.config import load_config
from setup_wizard.constants import (
    CONFIG_FILE,
    SETUP_CANCELLED,
    SETUP_COMMAND_FAILED,
    SETUP_CONFIG_INVALID,
    SETUP_FAILED,
    SETUP_SUCCESS,
)
from setup_wizard.errors import CommandFailedError, ConfigError, SetupCancelled
from setup_wizard.logging_config import setup_logging
from setup_wizard.prompter import (
    Prompter,
    QuestionaryPrompter,
    ScriptedPrompter,
    load_answers,
)
from setup_wizard.runner import CommandRunner, RecordingRunner, SubprocessRunner
from setup_wizard.wizard import run_setup

logger = logging.getLogger("setup_wizard")


def exit_code_for(exc: BaseException) -> int:
    """Map a failure to the process exit status."""
    if isinstance(exc, (KeyboardInterrupt, SetupCancelled)):
        return SETUP_CANCELLED
    if isinstance(exc, ConfigError):
        return SETUP_CONFIG_INVALID
    if isinstance(exc, CommandFailedError):
        return SETUP_COMMAND_FAILED
    return SETUP_FAILED


def build_prompter(environ: dict[str, str], project_root: Path) -> Prompter:
    answers_file = environ.get("SETUP_ANSWERS_FILE")
    if answers_file:
        return ScriptedPrompter(load_answers(project_root / answers_file))
    return QuestionaryPrompter()


def build_runner(environ: dict[str, str], project_root: Path) -> CommandRunner:
    if environ.get("SETUP_DRY_RUN", "").lower() in ("1", "true", "yes"):
        return RecordingRunner()
    return SubprocessRunner(project_root)


def main(project_root: Path | None = None) -> int:
    """Run the setup wizard. Returns the process exit code."""
    root = (project_root or Path.cwd()).resolve()
    environ = dict(os.environ)
    setup_logging(root)

    try:
        config_path = root / environ.get("SETUP_CONFIG", CONFIG_FILE)
        config = load_config(config_path)
        setup_logging(root, config.logging)

        run_setup(
            config,
            build_runner(environ, root),
            build_prompter(environ, root),
            project_root=root,
            config_path=config_path,
            environ=environ,
        )
        print("\n✅ Setup complete!")
        return SETUP_SUCCESS

    except KeyboardInterrupt:
        print("\n\nSetup cancelled.")
        return SETUP_CANCELLED

    except SetupCancelled as e:
        print(f"\nSetup cancelled: {e}")
        return SETUP_CANCELLED

    except Exception as e:
        expected = isinstance(e, (ConfigError, CommandFailedError))
        logger.error("❌ Error during setup: %s", e, exc_info=not expected)
        return exit_code_for(e)


if __name__ == "__main__":
    sys.exit(main())
