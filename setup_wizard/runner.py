"""External command execution for setup steps."""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from setup_wizard.errors import CommandFailedError, CommandNotFoundError

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Runs one external command to completion or raises CommandFailedError."""

    def run(self, args: Sequence[str], *, env: Mapping[str, str] | None = None) -> None: ...


class SubprocessRunner:
    """Runs commands in the project root with the wizard's stdio inherited."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = (cwd or Path.cwd()).resolve()

    def run(self, args: Sequence[str], *, env: Mapping[str, str] | None = None) -> None:
        child_env = os.environ.copy()
        if env:
            child_env.update(env)
        logger.debug("Running %s in %s", " ".join(args), self._cwd)
        try:
            result = subprocess.run(
                list(args),
                cwd=str(self._cwd),
                env=child_env,
                check=False,
            )
        except FileNotFoundError as e:
            raise CommandNotFoundError(args) from e
        if result.returncode != 0:
            raise CommandFailedError(args, result.returncode)


@dataclass
class Invocation:
    """One recorded command."""

    args: list[str]
    env: dict[str, str] = field(default_factory=dict)


class RecordingRunner:
    """Records commands instead of running them (dry run)."""

    def __init__(self) -> None:
        self.invocations: list[Invocation] = []

    def run(self, args: Sequence[str], *, env: Mapping[str, str] | None = None) -> None:
        logger.info("[dry-run] %s", " ".join(args))
        self.invocations.append(Invocation(list(args), dict(env or {})))

    @property
    def commands(self) -> list[list[str]]:
        return [inv.args for inv in self.invocations]
