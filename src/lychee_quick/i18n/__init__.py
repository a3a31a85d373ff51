"""Message catalogue lookup.

Messages live in `en.json` and `zh.json` next to this module. Keys are dotted
paths into the nested catalogue, e.g. `prompt.linear.releaseIssue`.
"""

from __future__ import annotations

import json
import re
from functools import lru_cache
from importlib import resources
from typing import Any, Union

NestedMessages = dict[str, Union[str, "NestedMessages"]]

SUPPORTED_LOCALES = ("en", "zh")
_PLACEHOLDER = re.compile(r"{(\w+)}")

_locale = "en"


def set_locale(locale: str) -> None:
    """Select the catalogue used by `t`. Unknown locales fall back to English."""

    global _locale
    _locale = locale if locale in SUPPORTED_LOCALES else "en"


def get_locale() -> str:
    return _locale


@lru_cache(maxsize=None)
def load_messages(locale: str) -> NestedMessages:
    text = resources.files(__name__).joinpath(f"{locale}.json").read_text(encoding="utf-8")
    data: NestedMessages = json.loads(text)
    return data


def get_nested_value(messages: NestedMessages, path: str) -> str | None:
    """Resolve a dotted path; returns None for missing or non-string nodes."""

    current: Any = messages
    for key in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current if isinstance(current, str) else None


def t(key: str, **args: object) -> str:
    """Translate `key`, substituting `{name}` placeholders from `args`.

    Missing keys return the key itself; placeholders without a value are kept.
    """

    message = get_nested_value(load_messages(_locale), key)
    if message is None:
        return key

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(args[name]) if name in args else match.group(0)

    return _PLACEHOLDER.sub(_substitute, message)
