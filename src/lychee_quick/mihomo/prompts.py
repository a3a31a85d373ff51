"""Interactive proxy and mode pickers."""

from __future__ import annotations

from dataclasses import dataclass, field

from lychee_quick.errors import MihomoError
from lychee_quick.i18n import t
from lychee_quick.mihomo.client import MODES, MihomoClient, MihomoConfig, MihomoProxy
from lychee_quick.mihomo.proxies import (
    REFRESH,
    RESET,
    filter_children,
    format_mode,
    get_children,
    proxy_choices,
)
from lychee_quick.prompts import Choice, Prompter


@dataclass
class ProxySearchState:
    """Proxies loaded so far and the group being browsed."""

    proxies: dict[str, MihomoProxy] | None = None
    current: MihomoProxy | None = None
    group_name: str | None = None
    refreshed: bool = field(default=False, repr=False)


def _load(client: MihomoClient, state: ProxySearchState, top_proxy: str) -> None:
    proxies = client.get_proxies()
    name = state.group_name or (state.current.name if state.current else top_proxy)
    current = proxies.get(name)
    if current is None:
        raise MihomoError(t("error.mihomo.notFound", uri=f"proxies/{name}"))
    state.proxies = proxies
    state.current = current
    state.group_name = current.name


def search_proxy(
    prompter: Prompter,
    client: MihomoClient,
    state: ProxySearchState,
    *,
    top_proxy: str,
    refresh: bool = False,
) -> str:
    """Ask for a member of the current group; returns its name or REFRESH/RESET.

    The delay test and the proxy listing run on first use of the search source
    and are reused for every keystroke after that.
    """

    def source(term: str) -> list[Choice[str]]:
        if refresh and not state.refreshed:
            client.group_delay()
            state.refreshed = True
            state.proxies = None
        if state.proxies is None or state.current is None:
            _load(client, state, top_proxy)
        assert state.proxies is not None and state.current is not None
        children = get_children(state.current, state.proxies)
        return proxy_choices(filter_children(children, term))

    group = state.current.name if state.current else (state.group_name or top_proxy)
    return prompter.search(t("prompt.mihomo.pickProxy", group=group), source)


def pick_proxy(
    prompter: Prompter,
    client: MihomoClient,
    *,
    top_proxy: str,
    refresh: bool = False,
    state: ProxySearchState | None = None,
) -> MihomoProxy | None:
    """Walk down selector groups until a leaf proxy (or URLTest group) is chosen.

    Returns the last proxy selected.
    """

    state = state or ProxySearchState()
    selected: MihomoProxy | None = None
    while True:
        answer = search_proxy(prompter, client, state, top_proxy=top_proxy, refresh=refresh)
        if answer == RESET:
            state = ProxySearchState()
            refresh = True
            continue
        if answer == REFRESH:
            state = ProxySearchState(group_name=state.group_name)
            refresh = True
            continue

        assert state.proxies is not None and state.current is not None
        selected = state.proxies[answer]
        client.select_proxy(state.current.name, selected.name)
        if not selected.is_selector:
            return selected

        state = ProxySearchState(proxies=state.proxies, current=selected, group_name=selected.name)
        refresh = False


def pick_mode(prompter: Prompter, client: MihomoClient) -> str:
    config: MihomoConfig = client.get_config()
    choices = [format_mode(mode, config) for mode in MODES]
    return prompter.select(t("prompt.mihomo.pickMode"), choices, default=config.mode)
