"""`clash board`: open the Mihomo web dashboard after a delay test."""

from urllib.parse import urlencode, urlsplit, urlunsplit

from lychee_quick import shell
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t


def board_url(board: str, controller: str, secret: str) -> str:
    """The web board URL pre-filled with the controller address and secret."""

    target = urlsplit(controller)
    parts = urlsplit(board)
    query = urlencode(
        {
            "hostname": target.hostname or "",
            "port": "" if target.port is None else str(target.port),
            "secret": secret,
        }
    )
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, "/proxies"))


def handle(ctx: CommandContext) -> None:
    settings = ctx.settings
    url = board_url(
        settings.require("mihomo_board"),
        settings.require("mihomo_url"),
        settings.require("mihomo_token"),
    )
    ctx.console.print(t("app.clash.openingBoard", url=url), markup=False)
    ctx.mihomo.group_delay()
    shell.open_url(url)
