"""Exit codes and default file names for the setup wizard."""

SETUP_SUCCESS = 0  # All steps finished (or the wizard was skipped on an existing .env)
SETUP_CANCELLED = 1  # User cancelled a prompt (Ctrl+C)
SETUP_CONFIG_INVALID = 2  # Config file, answers file or database variables invalid
SETUP_COMMAND_FAILED = 3  # An external command exited non-zero or was not found
SETUP_FAILED = 4  # Anything else

CONFIG_FILE = "setup.config.json"
ENV_FILE = ".env"
SQL_DIR = "sql"
SCRIPT_FILE = "setup_project.py"
DEFAULT_PACKAGE_MANAGER = "npm"

PRODUCTION_ENVIRONMENTS = frozenset({"production", "prod"})
