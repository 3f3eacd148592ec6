"""Exception hierarchy for the setup wizard."""

from collections.abc import Sequence


class SetupError(Exception):
    """Base class for every failure the wizard reports."""


class ConfigError(SetupError):
    """Setup configuration is missing, unreadable or malformed."""


class ConnectionConfigError(ConfigError):
    """Database connection variables are incomplete."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Missing database connection variables: " + ", ".join(self.missing)
        )


class MissingAnswerError(ConfigError):
    """A scripted answer is absent or not one of the allowed choices."""


class CommandFailedError(SetupError):
    """An external command exited with a non-zero status."""

    def __init__(
        self, args: Sequence[str], returncode: int, message: str | None = None
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        super().__init__(
            message
            or f"Command {' '.join(self.command)!r} exited with code {returncode}"
        )


class CommandNotFoundError(CommandFailedError):
    """The executable for an external command is not on PATH."""

    def __init__(self, args: Sequence[str]) -> None:
        super().__init__(args, 127, f"Command not found: {args[0]!r}")


class SetupCancelled(SetupError):
    """User aborted an interactive prompt."""
