"""Command discovery and argv routing."""

from lychee_quick.dispatch.context import CommandContext
from lychee_quick.dispatch.registry import CommandMeta, CommandRegistry
from lychee_quick.dispatch.router import Router

__all__ = ["CommandContext", "CommandMeta", "CommandRegistry", "Router"]
