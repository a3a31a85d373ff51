"""CLI entrypoint: `ly <group> <command> [-f] [-h]`."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console

from lychee_quick import __version__
from lychee_quick.config import ENV_FILES, LycheeSettings
from lychee_quick.dispatch.context import CommandContext
from lychee_quick.dispatch.registry import CommandRegistry
from lychee_quick.dispatch.router import Router
from lychee_quick.errors import LycheeError, PromptAborted
from lychee_quick.i18n import set_locale, t
from lychee_quick.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # Command words and -h are resolved by the router against the command tree.
    parser = argparse.ArgumentParser(prog="ly", add_help=False)
    parser.add_argument("--version", action="version", version=f"lychee-quick {__version__}")
    return parser


def build_router(settings: LycheeSettings, console: Console | None = None) -> Router:
    console = console or Console()

    def context_factory(args: list[str], force: bool) -> CommandContext:
        return CommandContext(
            settings=settings,
            console=console,
            cli_name=settings.cli_name,
            args=args,
            force=force,
        )

    return Router(
        CommandRegistry(),
        context_factory,
        cli_name=settings.cli_name,
        console=console,
    )


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    build_parser().parse_known_args(argv)

    try:
        settings = LycheeSettings(_env_file=ENV_FILES)
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_format)
    set_locale(settings.locale)

    try:
        return build_router(settings).run(argv)
    except (PromptAborted, KeyboardInterrupt):
        logger.debug("Aborted by user")
        return 130
    except LycheeError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.exception(t("error.unknown", error=e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
