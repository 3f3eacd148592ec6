"""Target environment selection step."""

from setup_wizard.config import SetupConfig
from setup_wizard.errors import ConfigError
from setup_wizard.prompter import Prompter, select_one


def select_environment(config: SetupConfig, prompter: Prompter) -> str:
    """Return the environment to set up; prompts only when there is a choice."""
    choices = list(config.environments)
    if not choices:
        raise ConfigError("No environments defined in setup config")
    if len(choices) == 1:
        return choices[0]
    return select_one(prompter, "environment", "Select the environment:", choices)
