"""Linear issue pickers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from lychee_quick.format import icon
from lychee_quick.i18n import t
from lychee_quick.linear.client import Attachment, Issue, PreviewLink
from lychee_quick.prompts import Choice, Prompter, Separator

ME = "Me"
UNASSIGNED = "None"

RELEASABLE_STATES = ("started", "completed")


@dataclass(frozen=True)
class PreviewTarget:
    issue: Issue
    attachment: Attachment


def _issue_name(issue: Issue) -> str:
    return f"{icon(issue.state.type)}[{issue.identifier}] {issue.title}"


def _assignee_group(issue: Issue) -> str:
    if issue.assignee is None:
        return UNASSIGNED
    if issue.assignee.is_me:
        return ME
    return issue.assignee.display_name


def _matches_branch_filter(issue: Issue, term: str) -> bool:
    if term == "M":
        return bool(issue.assignee and issue.assignee.is_me)
    if term == "N":
        return issue.assignee is None
    if not term:
        return True
    return term in issue.identifier or term in issue.title


def branch_entries(issues: Sequence[Issue], term: str) -> list[Choice[Issue] | Separator]:
    """Search rows grouped by assignee: mine first, unassigned last."""

    groups: dict[str, list[Issue]] = {}
    for issue in issues:
        if _matches_branch_filter(issue, term):
            groups.setdefault(_assignee_group(issue), []).append(issue)

    def rank(item: tuple[str, list[Issue]]) -> int:
        name, members = item
        if name == ME:
            return 10000
        if name == UNASSIGNED:
            return -1
        return len(members)

    entries: list[Choice[Issue] | Separator] = []
    for name, members in sorted(groups.items(), key=rank, reverse=True):
        entries.append(Separator(name))
        entries.extend(Choice(name=_issue_name(issue), value=issue) for issue in members)
    return entries


def preview_entries(issues: Sequence[Issue], term: str) -> list[Choice[PreviewTarget] | Separator]:
    entries: list[Choice[PreviewTarget] | Separator] = []
    for issue in issues:
        if not issue.attachments:
            continue
        if term and not (
            term in issue.title
            or term in issue.identifier
            or any(term in a.metadata.title for a in issue.attachments)
        ):
            continue
        entries.append(Separator(issue.identifier))
        entries.extend(
            Choice(
                name=f"{icon(a.metadata.status)} {a.metadata.title}",
                value=PreviewTarget(issue=issue, attachment=a),
            )
            for a in issue.attachments
        )
    return entries


def _lazy(load: Callable[[], list[Issue]]) -> Callable[[], list[Issue]]:
    loaded: list[list[Issue]] = []

    def get() -> list[Issue]:
        if not loaded:
            loaded.append(load())
        return loaded[0]

    return get


def pick_issue_for_branch(prompter: Prompter, load: Callable[[], list[Issue]]) -> Issue:
    issues = _lazy(load)
    return prompter.search(
        t("prompt.linear.checkoutBranch"), lambda term: branch_entries(issues(), term)
    )


def pick_issue_for_preview(prompter: Prompter, load: Callable[[], list[Issue]]) -> PreviewTarget:
    issues = _lazy(load)
    return prompter.search(
        t("prompt.linear.sendPreviewComment"), lambda term: preview_entries(issues(), term)
    )


def pick_issue_for_release(prompter: Prompter, issues: Sequence[Issue]) -> list[Issue]:
    choices = [
        Choice(name=_issue_name(issue), value=issue, short=issue.identifier)
        for issue in issues
        if issue.state.type in RELEASABLE_STATES
    ]
    return prompter.checkbox(t("prompt.linear.releaseIssue"), choices)


def select_preview_links(prompter: Prompter, links: Sequence[PreviewLink]) -> list[PreviewLink]:
    choices = [Choice(name=link.url, value=link, short=link.url, checked=True) for link in links]
    return prompter.checkbox(t("prompt.linear.sendPreviewLink"), choices)


def confirm_send_comment(prompter: Prompter, identifier: str) -> bool:
    return prompter.confirm(t("prompt.linear.confirmSendComment", identifier=identifier))
