"""Linear workflows shared by the `linear` commands."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import TYPE_CHECKING

from pydantic import validate_email

from lychee_quick import shell
from lychee_quick.cache import MINUTE_MS, CachedQuery
from lychee_quick.i18n import t
from lychee_quick.linear.client import Attachment, Issue
from lychee_quick.linear.content import Mention, build_comment_body
from lychee_quick.linear.prompts import confirm_send_comment, select_preview_links

if TYPE_CHECKING:
    from lychee_quick.dispatch.context import CommandContext

logger = logging.getLogger(__name__)

ISSUES_TTL_MS = 30 * MINUTE_MS


def issue_query(ctx: CommandContext) -> CachedQuery[Issue]:
    team = ctx.settings.require("linear_team")
    return CachedQuery(
        cache=ctx.cache,
        key=f"linear-{team}-issues",
        ttl_ms=ISSUES_TTL_MS,
        fetch=lambda: ctx.linear.issues(team=team),
        item_type=Issue,
        force=ctx.force,
    )


def parse_mention_emails(raw: str) -> list[str]:
    emails: list[str] = []
    for part in raw.split(","):
        candidate = part.strip()
        if not candidate:
            continue
        try:
            _, email = validate_email(candidate)
        except ValueError:
            logger.debug("Ignoring invalid mention email", extra={"value": candidate})
            continue
        emails.append(email)
    return emails


def send_preview(ctx: CommandContext, issue: Issue, attachment: Attachment) -> str | None:
    """Post a comment listing the chosen preview links; returns its URL."""

    emails = parse_mention_emails(ctx.settings.previews_comment_mentions)
    mentions = [Mention(id=u.id, label=u.name) for u in ctx.linear.users_by_email(emails)]

    previews = select_preview_links(ctx.prompter, attachment.metadata.preview_links)
    body = build_comment_body(
        issue.identifier,
        mentions,
        previews,
        ctx.settings.previews_comment_footer,
    )
    for line in body.markdown:
        ctx.console.print(line, markup=False)

    if not confirm_send_comment(ctx.prompter, issue.identifier):
        return None

    url = ctx.linear.create_comment(issue_id=issue.id, body_data=body.linear)
    shell.open_url(url)
    return url


def build_release_note(issues: Sequence[Issue], today: date) -> str:
    sections = []
    for issue in sorted(issues, key=lambda i: i.updated_at, reverse=True):
        # The PR line block is kept even when empty, so every heading ends with a newline.
        prs = "\n".join(f"- [{a.metadata.title}]({a.metadata.url})" for a in issue.attachments)
        sections.append(f"## [{issue.identifier} {issue.title}]({issue.url})\n{prs}")
    return "\n".join(["", f"# Release note: {today.isoformat()}", *sections])


def release_issues(ctx: CommandContext, issues: Sequence[Issue], today: date | None = None) -> str | None:
    if not issues:
        return None
    note = build_release_note(issues, today or date.today())
    shell.copy_to_clipboard(note)
    ctx.console.print(note, markup=False)
    ctx.console.print(t("app.linear.release.copied"))
    return note
