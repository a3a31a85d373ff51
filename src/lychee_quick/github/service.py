"""Cached GitHub listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lychee_quick.cache import MINUTE_MS, CachedQuery
from lychee_quick.github.client import PullRequestBranch

if TYPE_CHECKING:
    from lychee_quick.dispatch.context import CommandContext

PULL_REQUESTS_TTL_MS = MINUTE_MS


def pull_request_query(ctx: CommandContext) -> CachedQuery[PullRequestBranch]:
    owner = ctx.settings.require("git_organization")
    repo = ctx.settings.require("git_repo")
    return CachedQuery(
        cache=ctx.cache,
        key=f"github-{owner}-{repo}-pr-branches",
        ttl_ms=PULL_REQUESTS_TTL_MS,
        fetch=ctx.github.list_open_pull_requests,
        item_type=PullRequestBranch,
        force=ctx.force,
    )
