"""`clash now`: show the proxy chain and offer to switch it."""

import logging

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t
from lychee_quick.mihomo.prompts import pick_proxy
from lychee_quick.mihomo.proxies import find_current_proxy, format_chain, get_proxy_delay

logger = logging.getLogger(__name__)


def handle(ctx: CommandContext) -> int:
    client = ctx.mihomo
    top_proxy = ctx.settings.require("mihomo_top_proxy")

    config = client.get_config()
    if config.mode != "rule":
        if ctx.prompter.confirm(t("prompt.mihomo.switchToRule")):
            client.set_mode("rule")
            pick_proxy(ctx.prompter, client, top_proxy=top_proxy, refresh=True)
        return 0

    chain = find_current_proxy(client, top_proxy)
    if not chain:
        logger.error(t("app.clash.noProxy"))
        return 1

    last = chain[-1]
    if not last.alive:
        pick_proxy(ctx.prompter, client, top_proxy=top_proxy, refresh=True)
        return 0

    delay = get_proxy_delay(last)
    message = t(
        "prompt.mihomo.switchProxy",
        chain=format_chain(chain),
        delay="-" if delay is None else delay,
    )
    if ctx.prompter.confirm(message):
        pick_proxy(ctx.prompter, client, top_proxy=top_proxy, refresh=True)
    return 0
