"""Setup wizard steps."""

from setup_wizard.steps.cleanup_step import cleanup_setup_files
from setup_wizard.steps.docker_step import run_docker_compose
from setup_wizard.steps.env_step import setup_wizard
from setup_wizard.steps.environment_step import select_environment
from setup_wizard.steps.install_step import detect_package_manager, initialize_project

__all__ = [
    "cleanup_setup_files",
    "detect_package_manager",
    "initialize_project",
    "run_docker_compose",
    "select_environment",
    "setup_wizard",
]
