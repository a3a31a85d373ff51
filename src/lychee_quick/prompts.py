"""Interactive prompt widgets built on prompt_toolkit.

Commands only talk to `Prompter`, so tests can swap in a scripted fake.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.shortcuts import checkboxlist_dialog, confirm, radiolist_dialog
from prompt_toolkit.validation import Validator

from lychee_quick.errors import PromptAborted
from lychee_quick.i18n import t

T = TypeVar("T")


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A selectable entry. `name` is what the user sees and types."""

    name: str
    value: T
    description: str | None = None
    checked: bool = False
    short: str | None = None  # echoed after a dialog instead of the full name


@dataclass(frozen=True)
class Separator:
    """A non-selectable group heading inside a search result list."""

    label: str


SearchSource = Callable[[str], Sequence[Union[Choice[T], Separator]]]


def only_choices(entries: Iterable[Choice[T] | Separator]) -> list[Choice[T]]:
    return [entry for entry in entries if isinstance(entry, Choice)]


def resolve_search_answer(text: str, entries: Sequence[Choice[T] | Separator]) -> Choice[T] | None:
    """Map typed text to a choice: an exact name match, else the first one listed."""

    choices = only_choices(entries)
    for choice in choices:
        if choice.name == text:
            return choice
    return choices[0] if choices else None


class SearchCompleter(Completer):
    """Completion menu fed by a search source; separators label their group.

    Every row handed to the menu is remembered by its label. Accepting a
    completion puts that label in the buffer, and sources filter on bare
    names, so the label is looked up here instead of being searched again.
    """

    def __init__(self, source: SearchSource[Any]) -> None:
        self._source = source
        self.shown: dict[str, Choice[Any]] = {}

    def entries(self, text: str) -> Sequence[Choice[Any] | Separator]:
        entries = self._source(text)
        for choice in only_choices(entries):
            self.shown.setdefault(choice.name, choice)
        return entries

    def resolve(self, text: str) -> Choice[Any] | None:
        choice = self.shown.get(text)
        if choice is not None:
            return choice
        return resolve_search_answer(text, self.entries(text))

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text
        group = ""
        for entry in self.entries(text):
            if isinstance(entry, Separator):
                group = entry.label
                continue
            yield Completion(
                entry.name,
                start_position=-len(text),
                display=entry.name,
                display_meta=entry.description or group,
            )


class Prompter:
    """prompt_toolkit implementation of the four widgets commands use."""

    def search(self, message: str, source: SearchSource[T]) -> T:
        session: PromptSession[str] = PromptSession()
        completer = SearchCompleter(source)
        completer.entries("")

        text = session.prompt(
            f"{message} ",
            completer=completer,
            complete_while_typing=True,
            validator=Validator.from_callable(
                lambda text: completer.resolve(text) is not None,
                error_message=t("prompt.noMatch"),
            ),
            validate_while_typing=False,
            pre_run=lambda: session.default_buffer.start_completion(select_first=False),
        )
        choice = completer.resolve(text)
        if choice is None:
            raise PromptAborted(message)
        return choice.value

    def select(self, message: str, choices: Sequence[Choice[T]], default: T | None = None) -> T:
        default_index = next((i for i, c in enumerate(choices) if c.value == default), None)
        index = radiolist_dialog(
            title=message,
            values=[(i, _label(c)) for i, c in enumerate(choices)],
            default=default_index,
        ).run()
        if index is None:
            raise PromptAborted(message)
        _echo_answer(message, [choices[index]])
        return choices[index].value

    def checkbox(self, message: str, choices: Sequence[Choice[T]]) -> list[T]:
        indexes = checkboxlist_dialog(
            title=message,
            values=[(i, _label(c)) for i, c in enumerate(choices)],
            default_values=[i for i, c in enumerate(choices) if c.checked],
        ).run()
        if indexes is None:
            raise PromptAborted(message)
        picked = [choices[i] for i in sorted(indexes)]
        _echo_answer(message, picked)
        return [c.value for c in picked]

    def confirm(self, message: str) -> bool:
        return bool(confirm(message))


def _echo_answer(message: str, picked: Sequence[Choice[Any]]) -> None:
    # Dialogs clear the screen on exit; leave the answer behind like a prompt line.
    print_formatted_text(f"{message} {', '.join(c.short or c.name for c in picked)}")


def _label(choice: Choice[Any]) -> str:
    if choice.description:
        return f"{choice.name}  ({choice.description})"
    return choice.name
