"""Command tree discovered from the `lychee_quick.commands` package.

Every sub-package holding a `meta` module is a command node. Nodes that can
run also hold a `handler` module exposing `handle(ctx)`.
"""

from __future__ import annotations

import importlib
import importlib.util
import pkgutil
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import ModuleType
from typing import Any

COMMANDS_PACKAGE = "lychee_quick.commands"

Handler = Callable[[Any], Any]


@dataclass(frozen=True)
class CommandMeta:
    completion: str = ""
    help: str | None = None


class CommandRegistry:
    def __init__(self, package: str = COMMANDS_PACKAGE) -> None:
        self.package = package

    def _module_name(self, path: Sequence[str], leaf: str | None = None) -> str | None:
        parts = list(path) + ([leaf] if leaf else [])
        if not all(part.isidentifier() for part in parts):
            return None
        return ".".join([self.package, *parts])

    def _find(self, name: str) -> bool:
        try:
            return importlib.util.find_spec(name) is not None
        except ModuleNotFoundError as exc:
            # Only a missing parent package along our own path means "absent".
            if exc.name and name.startswith(exc.name):
                return False
            raise

    def _import(self, path: Sequence[str], leaf: str) -> ModuleType | None:
        name = self._module_name(path, leaf)
        if name is None or not self._find(name):
            return None
        return importlib.import_module(name)

    def has_meta(self, path: Sequence[str]) -> bool:
        name = self._module_name(path, "meta")
        return name is not None and self._find(name)

    def children(self, path: Sequence[str] = ()) -> list[str]:
        name = self._module_name(path)
        if name is None or not self._find(name):
            return []
        package = importlib.import_module(name)
        search_path = getattr(package, "__path__", None)
        if search_path is None:
            return []
        return sorted(
            info.name
            for info in pkgutil.iter_modules(search_path)
            if info.ispkg and self.has_meta([*path, info.name])
        )

    def load_meta(self, path: Sequence[str]) -> CommandMeta | None:
        module = self._import(path, "meta")
        if module is None:
            return None
        return CommandMeta(
            completion=getattr(module, "COMPLETION", "") or "",
            help=getattr(module, "HELP", None),
        )

    def load_handler(self, path: Sequence[str]) -> Handler | None:
        if not path:
            return None
        module = self._import(path, "handler")
        if module is None:
            return None
        handle = getattr(module, "handle", None)
        return handle if callable(handle) else None
