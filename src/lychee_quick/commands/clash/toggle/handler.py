"""`clash toggle`: switch the proxy mode."""

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t
from lychee_quick.mihomo.prompts import pick_mode, pick_proxy


def handle(ctx: CommandContext) -> None:
    client = ctx.mihomo
    mode = pick_mode(ctx.prompter, client)
    client.set_mode(mode)

    config = client.get_config()
    if config.mode == "rule":
        pick_proxy(ctx.prompter, client, top_proxy=ctx.settings.require("mihomo_top_proxy"), refresh=True)
    else:
        ctx.console.print(t("app.clash.modeChanged", mode=config.mode))
