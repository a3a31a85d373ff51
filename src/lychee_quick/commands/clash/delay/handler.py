"""`clash delay`: print the delay of the active proxy."""

import logging

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.i18n import t
from lychee_quick.mihomo.proxies import find_current_proxy

logger = logging.getLogger(__name__)

DELAY_TIMEOUT_MS = 5000


def handle(ctx: CommandContext) -> int:
    client = ctx.mihomo
    chain = find_current_proxy(client, ctx.settings.require("mihomo_top_proxy"))
    if not chain:
        logger.error(t("app.clash.noProxy"))
        return 1

    last = chain[-1]
    delay = client.proxy_delay(last.name, timeout_ms=DELAY_TIMEOUT_MS)
    ctx.console.print(f"{last.name} -> {delay}ms", markup=False)
    return 0
