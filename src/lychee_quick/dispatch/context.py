"""What a command handler receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from rich.console import Console

from lychee_quick.cache import ResponseCache
from lychee_quick.config import LycheeSettings
from lychee_quick.github.client import GitHubClient
from lychee_quick.linear.client import LinearClient
from lychee_quick.mihomo.client import MihomoClient
from lychee_quick.prompts import Prompter
from lychee_quick.vercel.client import VercelClient


@dataclass
class CommandContext:
    """Settings, UI and lazily built API clients for one command run.

    Clients are created on first access so a command only needs the
    credentials of the services it actually talks to.
    """

    settings: LycheeSettings
    prompter: Prompter = field(default_factory=Prompter)
    console: Console = field(default_factory=Console)
    cli_name: str = "ly"
    args: list[str] = field(default_factory=list)
    force: bool = False
    source: str = "cli"

    @cached_property
    def cache(self) -> ResponseCache:
        return ResponseCache.from_settings(self.settings)

    @cached_property
    def mihomo(self) -> MihomoClient:
        return MihomoClient(
            base_url=self.settings.require("mihomo_url"),
            token=self.settings.require("mihomo_token"),
        )

    @cached_property
    def linear(self) -> LinearClient:
        return LinearClient(api_key=self.settings.require("linear_api_key"))

    @cached_property
    def github(self) -> GitHubClient:
        return GitHubClient(
            token=self.settings.require("git_token"),
            repository=self.settings.github_repository,
            base_url=self.settings.github_base_url,
        )

    @cached_property
    def vercel(self) -> VercelClient:
        return VercelClient(token=self.settings.require("vercel_personal_token"))
