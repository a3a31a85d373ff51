"""Linear issue tracker integration."""

from lychee_quick.linear.client import Issue, LinearClient

__all__ = ["Issue", "LinearClient"]
