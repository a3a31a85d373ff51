"""Vercel branch and project pickers."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from lychee_quick.github.client import PullRequestBranch
from lychee_quick.i18n import t
from lychee_quick.prompts import Choice, Prompter
from lychee_quick.vercel.client import Project
from lychee_quick.vercel.service import ProjectHook, group_deploy_hooks


def pick_branch_for_check(
    prompter: Prompter, load: Callable[[], Sequence[PullRequestBranch]]
) -> PullRequestBranch:
    cached: list[Sequence[PullRequestBranch]] = []

    def source(term: str) -> list[Choice[PullRequestBranch]]:
        if not cached:
            cached.append(load())
        return [
            Choice(name=pr.head_ref_name, value=pr, description=pr.title)
            for pr in cached[0]
            if term in pr.head_ref_name
        ]

    return prompter.search(t("prompt.vercel.checkBranch"), source)


def pick_project_for_release(
    prompter: Prompter, load: Callable[[], Sequence[Project]]
) -> list[ProjectHook]:
    groups: dict[str, list[ProjectHook]] = {}

    def source(term: str) -> list[Choice[str]]:
        if not groups:
            groups.update(group_deploy_hooks(load()))
        needle = term.lower()
        return [
            Choice(
                name=branch,
                value=branch,
                description=", ".join(h.project_name for h in hooks),
            )
            for branch, hooks in groups.items()
            if needle in branch.lower()
        ]

    branch = prompter.search(t("prompt.vercel.releaseBranch"), source)
    choices = sorted(
        (Choice(name=h.project_name, value=h, checked=True) for h in groups[branch]),
        key=lambda c: c.name,
    )
    return prompter.checkbox(t("prompt.vercel.releaseProject"), choices)
