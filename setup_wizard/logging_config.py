"""Logging configuration for the setup process."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _file_handler(project_root: Path, cfg: dict[str, Any], level: int) -> logging.Handler:
    log_path = project_root / cfg["file"]
    max_bytes = int(cfg.get("max_bytes", 1024 * 1024))
    backup_count = int(cfg.get("backup_count", 1))
    log_path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    h.setLevel(level)
    return h


def _console_handler(level: int) -> logging.Handler:
    h = logging.StreamHandler()
    h.setLevel(level)
    return h


def setup_logging(project_root: Path, cfg: dict[str, Any] | None = None) -> None:
    """Configure the root logger from the config's ``logging`` section.

    Console output is on unless ``log_to_console`` is false; a rotating file
    handler is added only when ``file`` is set. Existing root handlers are
    replaced, so calling this again after the config is loaded is safe.
    """
    cfg = cfg or {}
    level_name = str(cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()

    handlers: list[logging.Handler] = []
    if cfg.get("log_to_console", True):
        handlers.append(_console_handler(level))
    if cfg.get("file"):
        handlers.append(_file_handler(project_root, cfg, level))
    for h in handlers:
        h.setFormatter(formatter)
        root.addHandler(h)
