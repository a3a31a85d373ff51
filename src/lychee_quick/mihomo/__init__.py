"""Mihomo (Clash) proxy management."""

from lychee_quick.mihomo.client import MihomoClient, MihomoConfig, MihomoProxy

__all__ = ["MihomoClient", "MihomoConfig", "MihomoProxy"]
