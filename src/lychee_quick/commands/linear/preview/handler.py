"""`linear preview`: comment a PR's preview links on its issue."""

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.linear.prompts import pick_issue_for_preview
from lychee_quick.linear.service import issue_query, send_preview


def handle(ctx: CommandContext) -> None:
    target = pick_issue_for_preview(ctx.prompter, issue_query(ctx).get)
    send_preview(ctx, target.issue, target.attachment)
