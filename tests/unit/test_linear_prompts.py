"""Unit tests for Linear issue pickers."""

from __future__ import annotations

from typing import Any

import pytest

from lychee_quick.format import icon
from lychee_quick.linear.client import Issue, PreviewLink
from lychee_quick.linear.prompts import (
    PreviewTarget,
    branch_entries,
    confirm_send_comment,
    pick_issue_for_branch,
    pick_issue_for_preview,
    pick_issue_for_release,
    preview_entries,
    select_preview_links,
)
from lychee_quick.prompts import Separator


def issue(identifier: str, title: str, assignee: dict[str, Any] | None, state: str = "started", attachments: list[str] | None = None) -> Issue:
    return Issue.model_validate(
        {
            "id": identifier,
            "identifier": identifier,
            "title": title,
            "url": f"https://linear.app/acme/issue/{identifier}",
            "branchName": identifier.lower(),
            "updatedAt": "2025-01-01T00:00:00Z",
            "assignee": assignee,
            "state": {"type": state},
            "attachments": {
                "nodes": [
                    {"id": f"{identifier}-{t}", "metadata": {"title": t, "status": "open"}}
                    for t in attachments or []
                ]
            },
        }
    )


ME = {"displayName": "me", "isMe": True}
BOB = {"displayName": "bob", "isMe": False}
CAROL = {"displayName": "carol", "isMe": False}


@pytest.fixture
def issues() -> list[Issue]:
    return [
        issue("ENG-1", "Bob one", BOB),
        issue("ENG-2", "Nobody", None, state="backlog"),
        issue("ENG-3", "Carol one", CAROL),
        issue("ENG-4", "Mine", ME, attachments=["Login PR"]),
        issue("ENG-5", "Carol two", CAROL, state="completed"),
    ]


def _layout(entries: list) -> list[str]:
    return [e.label if isinstance(e, Separator) else e.value.identifier for e in entries]


def test_branch_entries_grouping(issues: list[Issue]) -> None:
    entries = branch_entries(issues, "")

    assert _layout(entries) == ["Me", "ENG-4", "carol", "ENG-3", "ENG-5", "bob", "ENG-1", "None", "ENG-2"]
    assert entries[1].name == f"{icon('started')}[ENG-4] Mine"


def test_branch_entries_filters(issues: list[Issue]) -> None:
    assert _layout(branch_entries(issues, "M")) == ["Me", "ENG-4"]
    assert _layout(branch_entries(issues, "N")) == ["None", "ENG-2"]
    assert _layout(branch_entries(issues, "ENG-3")) == ["carol", "ENG-3"]
    assert _layout(branch_entries(issues, "Carol t")) == ["carol", "ENG-5"]


def test_pick_issue_for_branch_loads_once(prompter, issues: list[Issue]) -> None:
    calls = []

    def load() -> list[Issue]:
        calls.append(1)
        return issues

    prompter.answers.append(("M", 0))

    picked = pick_issue_for_branch(prompter, load)

    assert picked.identifier == "ENG-4"
    assert prompter.messages == ["Checkout branch from which issue?"]
    assert len(calls) == 1


def test_preview_entries(issues: list[Issue]) -> None:
    entries = preview_entries(issues, "")

    assert isinstance(entries[0], Separator) and entries[0].label == "ENG-4"
    assert entries[1].name == f"{icon('open')} Login PR"
    assert preview_entries(issues, "Login") == entries
    assert preview_entries(issues, "nothing") == []


def test_pick_issue_for_preview(prompter, issues: list[Issue]) -> None:
    prompter.answers.append(0)

    target = pick_issue_for_preview(prompter, lambda: issues)

    assert isinstance(target, PreviewTarget)
    assert target.issue.identifier == "ENG-4"
    assert target.attachment.metadata.title == "Login PR"


def test_pick_issue_for_release_offers_started_and_completed(prompter, issues: list[Issue]) -> None:
    prompter.answers.append([f"{icon('completed')}[ENG-5] Carol two"])

    picked = pick_issue_for_release(prompter, issues)

    assert [i.identifier for i in picked] == ["ENG-5"]
    assert [c.short for c in prompter.last_choices] == ["ENG-1", "ENG-3", "ENG-4", "ENG-5"]


def test_select_preview_links_preselects_all(prompter) -> None:
    links = [PreviewLink(url="https://a.vercel.app"), PreviewLink(url="https://b.vercel.app")]
    prompter.answers.append("<checked>")

    assert select_preview_links(prompter, links) == links
    assert prompter.messages == ["Send which preview link?"]


def test_confirm_send_comment(prompter) -> None:
    prompter.answers.append(False)

    assert confirm_send_comment(prompter, "ENG-1") is False
    assert prompter.messages == ["Send preview comment to Linear issue ENG-1?"]
