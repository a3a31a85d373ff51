"""`vercel release`: trigger deploy hooks."""

from datetime import datetime, timezone

from lychee_quick import shell
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t
from lychee_quick.vercel.prompts import pick_project_for_release
from lychee_quick.vercel.service import deployments_url, project_query, trigger_deploy_hooks


def handle(ctx: CommandContext) -> None:
    hooks = pick_project_for_release(ctx.prompter, project_query(ctx).get)
    count = trigger_deploy_hooks(ctx.vercel, hooks)
    ctx.console.print(t("app.vercel.release.triggered", count=count))

    team = ctx.settings.require("vercel_team")
    shell.open_url(deployments_url(team, datetime.now(timezone.utc)))
