"""Write wizard answers to the project's .env file."""

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def format_value(value: Any) -> str:
    """Render an answer as written after ``KEY=``, without quoting."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(v) for v in value)
    return str(value)


def render_env(answers: Mapping[str, Any]) -> str:
    """One KEY=VALUE line per answer, in answer order, no trailing newline."""
    return "\n".join(f"{k}={format_value(v)}" for k, v in answers.items())


def answer_values(answers: Mapping[str, Any]) -> dict[str, str]:
    """Answers as the exact strings written to the env file."""
    return {k: format_value(v) for k, v in answers.items()}


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_env_file(env_path: Path, answers: Mapping[str, Any]) -> None:
    """Replace env_path atomically via temp file + rename.

    The file gets the umask-derived mode a plain open() would give it, not
    the 0600 of the temp file.
    """
    env_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(suffix=".env", prefix="env_", dir=env_path.parent)
    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(render_env(answers))
        os.chmod(tmp, _default_file_mode())
        Path(tmp).replace(env_path)
    except Exception:
        Path(tmp).unlink(missing_ok=True)
        raise
