"""Exception hierarchy shared by clients, helpers and commands."""

from __future__ import annotations


class LycheeError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class MissingSettingError(LycheeError):
    """A command needs an environment variable that is not set."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"Missing required environment variable: {env_name}")
        self.env_name = env_name


class ShellCommandError(LycheeError):
    """A local process exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str) -> None:
        message = stderr.strip() or f"{' '.join(cmd)} exited with status {returncode}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr


class PromptAborted(LycheeError):
    """The user cancelled an interactive prompt."""


class MihomoError(LycheeError):
    """The Mihomo external controller rejected a request or was unreachable."""


class LinearError(LycheeError):
    """The Linear GraphQL API returned errors."""


class VercelError(LycheeError):
    """The Vercel REST API rejected a request."""
