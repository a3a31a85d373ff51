"""`linear branch`: create a git branch for a Linear issue."""

import logging

from lychee_quick import shell
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.linear.prompts import pick_issue_for_branch
from lychee_quick.linear.service import issue_query

logger = logging.getLogger(__name__)


def handle(ctx: CommandContext) -> None:
    issue = pick_issue_for_branch(ctx.prompter, issue_query(ctx).get)
    branch = shell.find_next_branch(issue.branch_name)

    shell.git_checkout(ctx.settings.git_base_branch)
    shell.git_pull()
    shell.git_checkout_branch(branch)
    logger.info("Switched to new branch", extra={"branch": branch, "issue": issue.identifier})
