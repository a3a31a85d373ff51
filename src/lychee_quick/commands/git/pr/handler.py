"""`git pr`: list open pull requests."""

from rich.table import Table
from rich.text import Text

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.format import icon
from lychee_quick.github.service import pull_request_query
from lychee_quick.i18n import t


def handle(ctx: CommandContext) -> None:
    prs = pull_request_query(ctx).get()
    if not prs:
        ctx.console.print(t("app.git.pr.empty"))
        return

    table = Table(title=ctx.settings.github_repository)
    table.add_column("#", justify="right")
    table.add_column("")
    table.add_column("Title")
    table.add_column("Branch")
    table.add_column("Author")
    table.add_column("URL", overflow="fold")
    for pr in prs:
        table.add_row(
            str(pr.number),
            icon("draft" if pr.draft else "open"),
            Text(pr.title),
            Text(pr.head_ref_name),
            pr.author or "",
            Text(pr.url),
        )
    ctx.console.print(table)
