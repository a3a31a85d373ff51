"""Local process helpers: git, clipboard and browser."""

from __future__ import annotations

import logging
import subprocess
import webbrowser

from lychee_quick.errors import ShellCommandError

logger = logging.getLogger(__name__)


def run_command(cmd: list[str], *, input_text: str | None = None) -> str:
    """Run `cmd` without a shell and return its stdout.

    Raises:
        ShellCommandError: the process exited with a non-zero status.
    """

    logger.debug("Running command", extra={"cmd": cmd})
    proc = subprocess.run(cmd, input=input_text, capture_output=True, text=True, check=False)
    if proc.returncode != 0:
        logger.error("Command failed", extra={"cmd": cmd, "returncode": proc.returncode})
        raise ShellCommandError(cmd, proc.returncode, proc.stderr or "")
    return proc.stdout


def git_show_ref(ref: str) -> str:
    """Return `git show-ref <ref>` output, or "" when the ref does not exist."""

    cmd = ["git", "show-ref", ref]
    proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    # show-ref exits 1 with no output for a missing ref.
    if proc.returncode == 1 and not proc.stdout.strip():
        return ""
    if proc.returncode != 0:
        logger.error("Command failed", extra={"cmd": cmd, "returncode": proc.returncode})
        raise ShellCommandError(cmd, proc.returncode, proc.stderr or "")
    return proc.stdout.strip()


def branch_exists(branch: str) -> bool:
    return bool(run_command(["git", "branch", "--list", branch]).strip())


def find_next_branch(branch: str, version: int = 1) -> str:
    """First free name among `branch`, `branch-2`, `branch-3`, ..."""

    while True:
        candidate = f"{branch}-{version}" if version > 1 else branch
        if not branch_exists(candidate):
            return candidate
        version += 1


def git_checkout(branch: str) -> None:
    run_command(["git", "checkout", branch])


def git_pull() -> None:
    run_command(["git", "pull"])


def git_checkout_branch(branch: str) -> None:
    run_command(["git", "checkout", "-b", branch])


def copy_to_clipboard(text: str, *, command: list[str] | None = None) -> None:
    run_command(command or ["pbcopy"], input_text=text)


def open_url(url: str) -> None:
    logger.debug("Opening URL", extra={"url": url})
    webbrowser.open(url)
