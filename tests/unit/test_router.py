"""Unit tests for argv routing."""

from __future__ import annotations

import io
import logging
import textwrap
from typing import Any

import pytest
from rich.console import Console

from lychee_quick.dispatch.registry import CommandRegistry
from lychee_quick.dispatch.router import Router


def _console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def _text(console: Console) -> str:
    file = console.file
    assert isinstance(file, io.StringIO)
    return file.getvalue()


@pytest.fixture(scope="module")
def fake_package(tmp_path_factory: pytest.TempPathFactory) -> str:
    root = tmp_path_factory.mktemp("fake")
    files = {
        "__init__.py": "",
        "meta.py": 'COMPLETION = "Fake root"\n',
        "alpha/__init__.py": "",
        "alpha/meta.py": 'COMPLETION = "Alpha group"\n',
        "alpha/run/__init__.py": "",
        "alpha/run/meta.py": 'COMPLETION = "Run it"\n',
        "alpha/run/handler.py": textwrap.dedent(
            """
            CALLS = []

            def handle(ctx):
                CALLS.append(ctx)
                return 3
            """
        ),
        "alps/__init__.py": "",
        "alps/meta.py": "",
        "nometa/__init__.py": "",
    }
    for name, content in files.items():
        path = root / "lychee_fake_commands" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return str(root)


class Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[list[str], bool]] = []

    def __call__(self, args: list[str], force: bool) -> Any:
        self.calls.append((args, force))
        return {"args": args, "force": force}


@pytest.fixture
def router() -> Router:
    return Router(CommandRegistry(), Recorder(), cli_name="lq", console=_console(), err_console=_console())


@pytest.fixture
def fake_router(fake_package: str, monkeypatch: pytest.MonkeyPatch) -> Router:
    monkeypatch.syspath_prepend(fake_package)
    return Router(
        CommandRegistry("lychee_fake_commands"),
        Recorder(),
        cli_name="lq",
        console=_console(),
        err_console=_console(),
    )


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        ("c-n", ["clash", "now"]),
        ("c-c", ["clash", "check"]),
        ("cl-t", ["clash", "toggle"]),
        ("l-r", ["linear", "release"]),
        ("v-c", ["vercel", "check"]),
        ("g-p", ["git", "pr"]),
        ("c-x", None),
        ("x-n", None),
        ("clash", None),
        ("c-n-x", None),
    ],
)
def test_expand_alias(router: Router, alias: str, expected: list[str] | None) -> None:
    assert router.expand_alias(alias) == expected


def test_ambiguous_alias_is_not_expanded(fake_router: Router, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="lychee_quick.dispatch.router"):
        assert fake_router.expand_alias("al-r") is None

    assert "alpha, alps" in caplog.text
    assert fake_router.expand_alias("alp-r") == ["alpha", "run"]


def test_no_args_lists_commands(router: Router) -> None:
    assert router.run([]) == 0

    out = _text(router.console)
    assert out.startswith("Usage: lq <command> [subcommand] [options]")
    assert "  clash - Mihomo/Clash proxy management" in out
    assert "Run 'lq <command>' to see available subcommands." in out


def test_group_shows_subcommands(router: Router) -> None:
    assert router.run(["clash"]) == 0

    out = _text(router.console)
    assert "Usage: lq clash <subcommand>" in out
    assert "Mihomo/Clash proxy management" in out
    assert "  toggle - Switch proxy mode" in out


def test_root_help_substitutes_cli_name(router: Router) -> None:
    assert router.run(["--help"]) == 0

    out = _text(router.console)
    assert "lq clash now" in out
    assert "<cli>" not in out


def test_command_help(router: Router) -> None:
    assert router.run(["clash", "toggle", "-h"]) == 0
    assert "Switch between rule, direct and global mode." in _text(router.console)


def test_help_falls_back_to_completion(router: Router) -> None:
    assert router.run(["git", "pr", "-h"]) == 0
    assert _text(router.console).strip() == "List open pull requests"


def test_help_for_unknown_command(router: Router, caplog: pytest.LogCaptureFixture) -> None:
    assert router.run(["nope", "-h"]) == 2
    assert 'Can\'t find help for "nope"' in caplog.text


def test_help_without_text(fake_router: Router) -> None:
    assert fake_router.run(["alps", "-h"]) == 0
    assert 'No help available for "alps"' in _text(fake_router.console)


def test_unknown_action(router: Router, caplog: pytest.LogCaptureFixture) -> None:
    assert router.run(["nope", "thing"]) == 2
    assert 'Can\'t find action "nope thing"' in caplog.text


def test_package_without_meta_is_not_a_command(fake_router: Router) -> None:
    assert fake_router.registry.children() == ["alpha", "alps"]
    assert fake_router.run(["nometa"]) == 2


def test_runs_handler_with_context(fake_router: Router) -> None:
    import lychee_fake_commands.alpha.run.handler as handler

    handler.CALLS.clear()

    assert fake_router.run(["", "alpha", "run", "-f", "--verbose"]) == 3

    assert handler.CALLS == [{"args": ["-f", "--verbose"], "force": True}]


def test_alias_is_echoed_to_stderr(fake_router: Router) -> None:
    assert fake_router.run(["alp-r"]) == 3

    assert _text(fake_router.err_console).strip() == "→ lq alpha run"
    assert fake_router.context_factory.calls == [([], False)]
