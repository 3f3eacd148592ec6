"""Post-production cleanup step: delete setup-only artifacts."""

import logging
import shutil
from pathlib import Path

from setup_wizard.config import SetupConfig

logger = logging.getLogger(__name__)


def cleanup_setup_files(
    config: SetupConfig,
    project_root: Path,
    config_path: Path,
) -> list[Path]:
    """Remove the launcher script, the config file and the SQL directory.

    No-op unless cleanup_after_production is enabled. Targets that are
    already gone are ignored; a failed removal raises OSError. Returns the
    paths actually removed.
    """
    if not config.cleanup_after_production:
        return []

    print("🗑️ Cleaning up setup files...")
    removed: list[Path] = []
    for path in (project_root / config.script, config_path):
        if path.is_file():
            path.unlink()
            logger.info("Removed: %s", path.name)
            removed.append(path)

    sql_dir = project_root / config.sql_dir
    if sql_dir.is_dir():
        shutil.rmtree(sql_dir)
        logger.info("Removed directory: %s", config.sql_dir)
        removed.append(sql_dir)

    print("✅ Cleanup complete!")
    return removed
