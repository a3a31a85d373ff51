"""Lychee Quick.

A personal developer-workflow CLI:
- Mihomo (Clash) proxy switching
- Linear issue branches, preview comments and release notes
- Vercel deploy hooks and deployment status
- GitHub open pull requests
"""

__version__ = "0.1.0"

from lychee_quick.config import LycheeSettings

__all__ = ["__version__", "LycheeSettings"]
