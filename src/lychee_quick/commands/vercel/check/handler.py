"""`vercel check`: list the deployments of a PR branch."""

from datetime import datetime, timezone

from rich.table import Table
from rich.text import Text

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.github.service import pull_request_query
from lychee_quick.i18n import t
from lychee_quick.vercel.prompts import pick_branch_for_check
from lychee_quick.vercel.service import deployment_query, deployment_rows


def handle(ctx: CommandContext) -> None:
    pr = pick_branch_for_check(ctx.prompter, pull_request_query(ctx).get)
    deployments = deployment_query(ctx, pr.head_ref_name, pr.head_ref_oid).get()

    ctx.console.rule()
    ctx.console.print(t("app.vercel.check.branch", branch=pr.head_ref_name), markup=False)
    if not deployments:
        ctx.console.print(t("app.vercel.check.empty", branch=pr.head_ref_name), markup=False)
        return

    table = Table(show_header=False, box=None)
    for _ in range(3):
        table.add_column()
    for row in deployment_rows(deployments, datetime.now(timezone.utc)):
        table.add_row(*(Text(cell) for cell in row))
    ctx.console.print(table)
