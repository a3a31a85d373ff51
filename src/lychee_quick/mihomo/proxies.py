"""Proxy-chain traversal and the rows shown in the proxy picker."""

from __future__ import annotations

from dataclasses import dataclass

from lychee_quick.format import icon
from lychee_quick.i18n import t
from lychee_quick.mihomo.client import MihomoClient, MihomoConfig, MihomoProxy
from lychee_quick.prompts import Choice

REFRESH = "REFRESH"
RESET = "RESET"


@dataclass(frozen=True)
class ProxyChild:
    proxy: MihomoProxy
    delay: int | None
    index: int


def find_proxy_chain(current: MihomoProxy, proxies: dict[str, MihomoProxy]) -> list[MihomoProxy]:
    """Follow `now` from `current` down to the proxy actually carrying traffic.

    Stops at a proxy without `now`, at a name the controller did not report,
    or when a group points back into the chain.
    """

    chain = [current]
    seen = {current.name}
    while chain[-1].now:
        nxt = proxies.get(chain[-1].now)
        if nxt is None or nxt.name in seen:
            break
        chain.append(nxt)
        seen.add(nxt.name)
    return chain


def find_current_proxy(client: MihomoClient, top_proxy: str) -> list[MihomoProxy]:
    proxies = client.get_proxies()
    top = proxies.get(top_proxy)
    if top is None:
        return []
    return find_proxy_chain(top, proxies)


def get_proxy_delay(proxy: MihomoProxy) -> int | None:
    if not proxy.history:
        return None
    return proxy.history[-1].delay


def delay_level(delay: int | None) -> str:
    if not delay:
        return "mihomo_delay_very_bad"
    if delay < 100:
        return "mihomo_delay_good"
    if delay < 300:
        return "mihomo_delay_normal"
    return "mihomo_delay_bad"


def get_children(group: MihomoProxy, proxies: dict[str, MihomoProxy]) -> list[ProxyChild]:
    children: list[ProxyChild] = []
    for index, name in enumerate(group.all or []):
        proxy = proxies.get(name)
        if proxy is None:
            continue
        children.append(ProxyChild(proxy=proxy, delay=get_proxy_delay(proxy), index=index))
    return children


def filter_children(children: list[ProxyChild], term: str) -> list[ProxyChild]:
    """Empty term keeps all; a number selects by index; anything else matches names."""

    term = term.strip()
    if not term:
        return children
    if term.isdecimal():
        return [c for c in children if c.index == int(term)]
    return [c for c in children if term in c.proxy.name]


def _format_delay(delay: int | None) -> str:
    return f"{delay}ms" if delay is not None else "-"


def proxy_choices(children: list[ProxyChild]) -> list[Choice[str]]:
    choices: list[Choice[str]] = []
    for child in children:
        proxy = child.proxy
        marker = icon(delay_level(child.delay))
        if proxy.is_url_test:
            name = f"[{child.index}] {marker}{proxy.name} -> {proxy.now} ({_format_delay(child.delay)})"
        else:
            name = f"[{child.index}] {marker}{proxy.name} ({_format_delay(child.delay)})"
        choices.append(Choice(name=name, value=proxy.name))
    choices.append(Choice(name=f"{icon('mihomo_refresh')} {t('prompt.mihomo.refresh')}", value=REFRESH))
    choices.append(Choice(name=f"{icon('mihomo_reset')} {t('prompt.mihomo.reset')}", value=RESET))
    return choices


def format_mode(mode: str, config: MihomoConfig) -> Choice[str]:
    active = icon("mihomo_active") if mode == config.mode else ""
    return Choice(name=f"{icon(f'mihomo_{mode}')}{mode}{active}", value=mode)


def format_chain(chain: list[MihomoProxy]) -> str:
    return " -> ".join(p.name for p in chain)
