"""Unit tests for the `clash` commands (Mihomo client is mocked)."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from lychee_quick import shell
from lychee_quick.commands.clash.board import handler as board
from lychee_quick.commands.clash.check import handler as check
from lychee_quick.commands.clash.delay import handler as delay
from lychee_quick.commands.clash.now import handler as now
from lychee_quick.commands.clash.toggle import handler as toggle
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.mihomo.client import MihomoClient, MihomoConfig, MihomoProxy


def _proxies(alive: bool = True) -> dict[str, MihomoProxy]:
    items = [
        {"name": "Proxy", "type": "Selector", "now": "Tokyo", "all": ["Tokyo"]},
        {"name": "Tokyo", "type": "Vmess", "alive": alive, "history": [{"delay": 64}]},
    ]
    return {p["name"]: MihomoProxy.model_validate(p) for p in items}


@pytest.fixture
def mihomo(ctx: CommandContext) -> Mock:
    client = Mock(spec=MihomoClient)
    client.get_config.return_value = MihomoConfig(mode="rule")
    client.get_proxies.return_value = _proxies()
    ctx.mihomo = client
    return client


@pytest.fixture
def picker(monkeypatch: pytest.MonkeyPatch) -> Mock:
    mock = Mock()
    monkeypatch.setattr(now, "pick_proxy", mock)
    monkeypatch.setattr(toggle, "pick_proxy", mock)
    return mock


def test_now_offers_rule_mode(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    mihomo.get_config.return_value = MihomoConfig(mode="global")
    prompter.answers.append(True)

    assert now.handle(ctx) == 0

    assert prompter.messages == ["Not in rule mode, switch to rule mode?"]
    mihomo.set_mode.assert_called_once_with("rule")
    picker.assert_called_once_with(prompter, mihomo, top_proxy="Proxy", refresh=True)


def test_now_declining_rule_mode_does_nothing(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    mihomo.get_config.return_value = MihomoConfig(mode="direct")
    prompter.answers.append(False)

    now.handle(ctx)

    mihomo.set_mode.assert_not_called()
    picker.assert_not_called()


def test_now_shows_chain_and_delay(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    prompter.answers.append(False)

    assert now.handle(ctx) == 0

    assert prompter.messages == ["Proxy -> Tokyo, delay: 64ms. Switch to another proxy?"]
    picker.assert_not_called()


def test_now_switches_when_confirmed(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    prompter.answers.append(True)

    now.handle(ctx)

    picker.assert_called_once()


def test_now_dead_proxy_opens_picker(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    mihomo.get_proxies.return_value = _proxies(alive=False)

    now.handle(ctx)

    assert prompter.messages == []
    picker.assert_called_once()


def test_now_without_top_proxy(ctx: CommandContext, mihomo: Mock, picker: Mock, caplog: pytest.LogCaptureFixture) -> None:
    mihomo.get_proxies.return_value = {}

    assert now.handle(ctx) == 1
    assert "No proxy found" in caplog.text


def test_toggle_to_direct(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    mihomo.get_config.side_effect = [MihomoConfig(mode="rule"), MihomoConfig(mode="direct")]
    prompter.answers.append("direct")

    toggle.handle(ctx)

    mihomo.set_mode.assert_called_once_with("direct")
    picker.assert_not_called()
    assert "Mode changed to direct" in ctx.console.file.getvalue()


def test_toggle_to_rule_opens_picker(ctx: CommandContext, prompter, mihomo: Mock, picker: Mock) -> None:
    mihomo.get_config.side_effect = [MihomoConfig(mode="global"), MihomoConfig(mode="rule")]
    prompter.answers.append("rule")

    toggle.handle(ctx)

    picker.assert_called_once_with(prompter, mihomo, top_proxy="Proxy", refresh=True)


def test_check_prints_chain_and_fresh_delay(ctx: CommandContext, mihomo: Mock) -> None:
    mihomo.proxy_delay.return_value = 77

    assert check.handle(ctx) == 0

    out = ctx.console.file.getvalue()
    assert "proxy: Proxy -> Tokyo" in out
    assert "delay: 77ms" in out
    mihomo.proxy_delay.assert_called_once_with("Tokyo")


def test_delay_uses_five_second_timeout(ctx: CommandContext, mihomo: Mock) -> None:
    mihomo.proxy_delay.return_value = 120

    assert delay.handle(ctx) == 0

    mihomo.proxy_delay.assert_called_once_with("Tokyo", timeout_ms=5000)
    assert "Tokyo -> 120ms" in ctx.console.file.getvalue()


def test_board_url() -> None:
    url = board.board_url("https://board.example.com/ui/", "http://127.0.0.1:9090", "s3cret")

    assert url == "https://board.example.com/ui/?hostname=127.0.0.1&port=9090&secret=s3cret#/proxies"


def test_board_url_without_port() -> None:
    url = board.board_url("https://board.example.com/?theme=dark", "https://clash.local", "s")

    assert url == "https://board.example.com/?theme=dark&hostname=clash.local&port=&secret=s#/proxies"


def test_board_runs_delay_test_then_opens(ctx: CommandContext, mihomo: Mock, monkeypatch: pytest.MonkeyPatch) -> None:
    opener = Mock()
    monkeypatch.setattr(shell, "open_url", opener)

    board.handle(ctx)

    mihomo.group_delay.assert_called_once_with()
    opener.assert_called_once_with(
        "https://board.example.com/?hostname=127.0.0.1&port=9090&secret=mihomo-secret#/proxies"
    )
