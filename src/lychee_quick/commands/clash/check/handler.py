"""`clash check`: print the proxy chain and a fresh delay."""

import logging

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t
from lychee_quick.mihomo.proxies import find_current_proxy, format_chain

logger = logging.getLogger(__name__)


def handle(ctx: CommandContext) -> int:
    client = ctx.mihomo
    chain = find_current_proxy(client, ctx.settings.require("mihomo_top_proxy"))
    if not chain:
        logger.error(t("app.clash.noProxy"))
        return 1

    delay = client.proxy_delay(chain[-1].name)
    ctx.console.print(f"proxy: {format_chain(chain)}", markup=False)
    ctx.console.print(f"delay: {delay}ms", markup=False)
    return 0
