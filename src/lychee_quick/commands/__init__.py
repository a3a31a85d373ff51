"""Command tree: every sub-package with a `meta` module is a command."""
