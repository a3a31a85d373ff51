"""`linear release`: copy a release note for finished issues."""

from lychee_quick import shell
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.linear.prompts import pick_issue_for_release
from lychee_quick.linear.service import issue_query, release_issues


def handle(ctx: CommandContext) -> None:
    issues = issue_query(ctx).get()
    selected = pick_issue_for_release(ctx.prompter, issues)
    release_issues(ctx, selected)

    if ctx.settings.release_note_page:
        shell.open_url(ctx.settings.release_note_page)
