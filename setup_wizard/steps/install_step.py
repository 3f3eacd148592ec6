"""Package manager selection and dependency install step."""

from setup_wizard.config import SetupConfig
from setup_wizard.constants import DEFAULT_PACKAGE_MANAGER
from setup_wizard.prompter import Prompter, select_one
from setup_wizard.runner import CommandRunner


def detect_package_manager(config: SetupConfig, prompter: Prompter) -> str:
    """Return the package manager to install with.

    A single configured option is returned without prompting.
    """
    managers = list(config.package_managers) or [DEFAULT_PACKAGE_MANAGER]
    if len(managers) == 1:
        return managers[0]
    return select_one(
        prompter,
        "packageManager",
        "Which package manager do you want to use?",
        managers,
    )


def initialize_project(package_manager: str, runner: CommandRunner) -> None:
    """Run ``<package_manager> install``. Raises CommandFailedError on failure."""
    print(f"📦 Installing dependencies using {package_manager}...")
    runner.run([package_manager, "install"])
    print("✅ Dependencies installed!")
