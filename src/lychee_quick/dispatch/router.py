"""Resolve argv words to a command node and run it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from rich.console import Console

from lychee_quick.dispatch.registry import CommandRegistry

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")
FORCE_FLAGS = ("-f", "--force")

ContextFactory = Callable[[list[str], bool], Any]


class Router:
    """Maps `ly <group> <command> [flags]` onto the command registry."""

    def __init__(
        self,
        registry: CommandRegistry,
        context_factory: ContextFactory,
        *,
        cli_name: str = "ly",
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.registry = registry
        self.context_factory = context_factory
        self.cli_name = cli_name
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def _print(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def expand_alias(self, alias: str) -> list[str] | None:
        """Expand `c-c` to `["clash", "check"]` by unique prefix per level."""

        if "-" not in alias:
            return None

        result: list[str] = []
        for part in alias.split("-"):
            matches = [name for name in self.registry.children(result) if name.startswith(part)]
            if len(matches) != 1:
                if matches:
                    logger.debug(
                        f'Alias "{part}" matches several commands: {", ".join(matches)}; '
                        "use a longer prefix"
                    )
                return None
            result.append(matches[0])
        return result or None

    def show_available_actions(self) -> None:
        self._print(f"Usage: {self.cli_name} <command> [subcommand] [options]\n")
        self._print("Available commands:\n")
        for name in self.registry.children():
            meta = self.registry.load_meta([name])
            desc = f" - {meta.completion}" if meta and meta.completion else ""
            self._print(f"  {name}{desc}")
        self._print(f"\nRun '{self.cli_name} <command>' to see available subcommands.")

    def show_subcommands(self, action: Sequence[str]) -> None:
        meta = self.registry.load_meta(action)
        self._print(f"Usage: {self.cli_name} {' '.join(action)} <subcommand>\n")
        if meta and meta.completion:
            self._print(f"{meta.completion}\n")
        self._print("Available subcommands:\n")
        for name in self.registry.children(action):
            child = self.registry.load_meta([*action, name])
            desc = f" - {child.completion}" if child and child.completion else ""
            self._print(f"  {name}{desc}")

    def show_help(self, action: Sequence[str]) -> int:
        words = " ".join(action)
        meta = self.registry.load_meta(action)
        if meta is None:
            logger.error(f'Can\'t find help for "{words}"')
            return 2
        if meta.help:
            self._print(self._render(meta.help))
        elif meta.completion:
            self._print(meta.completion)
        else:
            self._print(f'No help available for "{words}"')
        return 0

    def _render(self, text: str) -> str:
        return text.replace("<cli>", self.cli_name)

    def _show_root_help(self) -> None:
        meta = self.registry.load_meta([])
        if meta and (meta.help or meta.completion):
            self._print(self._render(meta.help or meta.completion))
        else:
            self.show_available_actions()

    def run(self, argv: Sequence[str]) -> int:
        tokens = [token for token in argv if token]
        has_help = any(token in HELP_FLAGS for token in tokens)
        action = [token for token in tokens if not token.startswith("-")]
        flags = [token for token in tokens if token.startswith("-")]
        force = any(token in FORCE_FLAGS for token in flags)

        if len(action) == 1 and "-" in action[0]:
            expanded = self.expand_alias(action[0])
            if expanded:
                self.err_console.print(
                    f"→ {self.cli_name} {' '.join(expanded)}", markup=False, highlight=False
                )
                action = expanded

        if has_help:
            if not action:
                self._show_root_help()
                return 0
            return self.show_help(action)

        if not action:
            self.show_available_actions()
            return 0

        words = " ".join(action)
        handler = self.registry.load_handler(action)
        if handler is not None:
            ctx = self.context_factory(flags, force)
            logger.debug(f'Start run "{words}"')
            result = handler(ctx)
            logger.debug(f'End run "{words}"')
            return result if isinstance(result, int) else 0

        if self.registry.has_meta(action):
            self.show_subcommands(action)
            return 0

        logger.error(f'Can\'t find action "{words}"')
        return 2
