"""GitHub integration."""

from lychee_quick.github.client import GitHubClient, PullRequestBranch

__all__ = ["GitHubClient", "PullRequestBranch"]
