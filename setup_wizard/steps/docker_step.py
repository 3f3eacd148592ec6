"""Docker Compose startup step."""

from setup_wizard.config import SetupConfig
from setup_wizard.runner import CommandRunner

COMPOSE_UP = ["docker", "compose", "up", "-d"]


def run_docker_compose(config: SetupConfig, runner: CommandRunner) -> bool:
    """Start the compose stack detached when enabled. Returns True if started."""
    if not config.docker_compose:
        return False
    print("🐳 Running Docker Compose...")
    runner.run(COMPOSE_UP)
    print("✅ Docker Compose started!")
    return True
