"""Vercel workflows: deploy-hook grouping, deployment tables, hook triggering."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from lychee_quick.cache import MINUTE_MS, CachedQuery
from lychee_quick.format import icon
from lychee_quick.vercel.client import Deployment, Project, VercelClient

if TYPE_CHECKING:
    from lychee_quick.dispatch.context import CommandContext

logger = logging.getLogger(__name__)

PROJECTS_TTL_MS = 30 * MINUTE_MS
DEPLOYMENTS_TTL_MS = MINUTE_MS
DASHBOARD_WINDOW = timedelta(minutes=10)


@dataclass(frozen=True)
class ProjectHook:
    """A deploy hook tagged with the project it belongs to."""

    ref: str
    url: str
    project_name: str


def project_query(ctx: CommandContext) -> CachedQuery[Project]:
    team = ctx.settings.require("vercel_team")
    return CachedQuery(
        cache=ctx.cache,
        key=f"vercel-{team}-projects",
        ttl_ms=PROJECTS_TTL_MS,
        fetch=lambda: ctx.vercel.list_projects(team),
        item_type=Project,
        force=ctx.force,
    )


def deployment_query(ctx: CommandContext, branch: str, sha: str | None = None) -> CachedQuery[Deployment]:
    team = ctx.settings.require("vercel_team")
    return CachedQuery(
        cache=ctx.cache,
        key=f"vercel-{team}-{branch}-deployments",
        ttl_ms=DEPLOYMENTS_TTL_MS,
        fetch=lambda: ctx.vercel.list_deployments(team, branch, sha),
        item_type=Deployment,
        force=ctx.force,
    )


def group_deploy_hooks(projects: Sequence[Project]) -> dict[str, list[ProjectHook]]:
    groups: dict[str, list[ProjectHook]] = {}
    for project in projects:
        if project.link is None:
            continue
        for hook in project.link.deploy_hooks:
            groups.setdefault(hook.ref, []).append(
                ProjectHook(ref=hook.ref, url=hook.url, project_name=project.name)
            )
    return groups


def _iso(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def deployments_url(team: str, now: datetime) -> str:
    """Dashboard link filtered to deployments around `now`."""

    window = {"start": _iso(now - DASHBOARD_WINDOW), "end": _iso(now + DASHBOARD_WINDOW)}
    query = urlencode({"range": json.dumps(window, separators=(",", ":"))})
    return f"https://vercel.com/{team}/~/deployments?{query}"


def format_relative(then: datetime, now: datetime) -> str:
    seconds = int((now - then).total_seconds())
    if seconds < 0:
        return "just now"
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if seconds >= size:
            return f"{seconds // size}{unit} ago"
    return f"{seconds}s ago"


def deployment_rows(deployments: Sequence[Deployment], now: datetime) -> list[list[str]]:
    rows = []
    for deployment in deployments:
        state = (deployment.state or "").lower()
        alias = deployment.meta.branch_alias
        created = datetime.fromtimestamp(deployment.created / 1000, tz=timezone.utc)
        rows.append(
            [
                icon(f"vercel_{state}"),
                f"https://{alias}" if alias else "-",
                format_relative(created, now),
            ]
        )
    return rows


def trigger_deploy_hooks(client: VercelClient, hooks: Sequence[ProjectHook]) -> int:
    """Fire every hook at once; returns how many were triggered."""

    if not hooks:
        return 0
    with ThreadPoolExecutor(max_workers=len(hooks)) as pool:
        # list() re-raises the first VercelError from a worker.
        list(pool.map(lambda hook: client.trigger_deploy_hook(hook.url), hooks))
    logger.info("Triggered deploy hooks", extra={"projects": [h.project_name for h in hooks]})
    return len(hooks)
