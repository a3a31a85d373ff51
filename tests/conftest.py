"""Test configuration and fixtures."""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import Any

import pytest
from rich.console import Console

from lychee_quick.cache import ResponseCache
from lychee_quick.config import LycheeSettings
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import set_locale
from lychee_quick.prompts import Choice, SearchCompleter, only_choices

CHECKED = "<checked>"

_ENV_VARS = (
    "MIHOMO_URL",
    "MIHOMO_TOKEN",
    "MIHOMO_TOP_PROXY",
    "MIHOMO_BOARD",
    "VERCEL_PERSONAL_TOKEN",
    "VERCEL_TEAM",
    "REDIS_URL",
    "REDIS_TOKEN",
    "LINEAR_API_KEY",
    "LINEAR_TEAM",
    "GIT_TOKEN",
    "GIT_ORGANIZATION",
    "GIT_REPO",
    "GITHUB_BASE_URL",
    "GIT_BASE_BRANCH",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "CLI_NAME",
    "LOCALE",
    "RELEASE_NOTE_PAGE",
    "PREVIEWS_COMMENT_MENTIONS",
    "PREVIEWS_COMMENT_FOOTER",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own environment out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_locale("en")


class FakePrompter:
    """Scripted stand-in for `Prompter`.

    Answers are consumed in order:
    - search: `(term, pick)` or just `pick`; the source is called with `term`,
      `pick` (a choice name, a choice value, or an index) selects a row, and
      that row's label is resolved the way the real prompt resolves it;
    - select: the value to return;
    - checkbox: a list of choice names, or "<checked>" for the preselected ones;
    - confirm: a bool.
    """

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.messages: list[str] = []
        self.last_entries: Sequence[Any] = []
        self.last_choices: Sequence[Choice[Any]] = []

    def _next(self, message: str) -> Any:
        self.messages.append(message)
        assert self.answers, f"unexpected prompt: {message}"
        return self.answers.pop(0)

    def search(self, message: str, source: Any) -> Any:
        answer = self._next(message)
        term, pick = answer if isinstance(answer, tuple) else ("", answer)
        completer = SearchCompleter(source)
        self.last_entries = completer.entries(term)
        choices = only_choices(self.last_entries)
        if isinstance(pick, int):
            label = choices[pick].name
        else:
            label = next((c.name for c in choices if c.name == pick or c.value == pick), None)
            assert label is not None, f"{pick!r} not among {[c.name for c in choices]}"
        # Accepting a row submits its label, exactly as the completion menu does.
        chosen = completer.resolve(label)
        assert chosen is not None
        return chosen.value

    def select(self, message: str, choices: Sequence[Choice[Any]], default: Any = None) -> Any:
        self.last_choices = choices
        return self._next(message)

    def checkbox(self, message: str, choices: Sequence[Choice[Any]]) -> list[Any]:
        self.last_choices = choices
        answer = self._next(message)
        if answer == CHECKED:
            return [c.value for c in choices if c.checked]
        return [c.value for c in choices if c.name in answer]

    def confirm(self, message: str) -> bool:
        return bool(self._next(message))


@pytest.fixture
def settings() -> LycheeSettings:
    """Provide settings with every service configured."""
    return LycheeSettings(
        _env_file=None,
        MIHOMO_URL="http://127.0.0.1:9090",
        MIHOMO_TOKEN="mihomo-secret",
        MIHOMO_TOP_PROXY="Proxy",
        MIHOMO_BOARD="https://board.example.com/",
        VERCEL_PERSONAL_TOKEN="vercel-token",
        VERCEL_TEAM="acme",
        LINEAR_API_KEY="lin_api_test",
        LINEAR_TEAM="ENG",
        GIT_TOKEN="gh-token",
        GIT_ORGANIZATION="acme",
        GIT_REPO="web",
        PREVIEWS_COMMENT_MENTIONS="alice@example.com, not-an-email,bob@example.com",
    )


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def ctx(settings: LycheeSettings, prompter: FakePrompter, console: Console) -> CommandContext:
    """A command context with caching disabled; assign Mock clients as needed."""
    context = CommandContext(settings=settings, prompter=prompter, console=console)  # type: ignore[arg-type]
    context.cache = ResponseCache(None)
    return context

