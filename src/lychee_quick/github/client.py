"""GitHub API client wrapper."""

import logging
from datetime import datetime

from github import Auth, Github
from github.PullRequest import PullRequest
from github.Repository import Repository
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class PullRequestBranch(BaseModel):
    """The parts of an open pull request the CLI shows and deploys from."""

    number: int
    title: str
    url: str
    head_ref_name: str
    head_ref_oid: str
    draft: bool = False
    author: str | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_pull_request(cls, pr: PullRequest) -> "PullRequestBranch":
        return cls(
            number=pr.number,
            title=pr.title,
            url=pr.html_url,
            head_ref_name=pr.head.ref,
            head_ref_oid=pr.head.sha,
            draft=bool(pr.draft),
            author=pr.user.login if pr.user else None,
            updated_at=pr.updated_at,
        )


class GitHubClient:
    """Client for reading pull requests of one repository."""

    def __init__(
        self,
        token: str,
        repository: str,
        base_url: str = "https://api.github.com",
        github_api: Github | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            token: GitHub token.
            repository: Repository in the form 'owner/repo'.
            base_url: GitHub API base URL.
            github_api: Pre-built PyGithub instance (tests).

        Raises:
            ValueError: If required configuration is missing.
        """
        if not token:
            raise ValueError("GitHub token is required")
        if not repository:
            raise ValueError("GitHub repository is required")

        self.repository = repository
        self.gh = github_api or Github(auth=Auth.Token(token), base_url=base_url)
        self._repo: Repository | None = None

    @property
    def repo(self) -> Repository:
        if self._repo is None:
            self._repo = self.gh.get_repo(self.repository)
            logger.debug(f"Connected to repository: {self.repository}")
        return self._repo

    def list_open_pull_requests(self) -> list[PullRequestBranch]:
        """List open pull requests, most recently updated first.

        Returns:
            List of PullRequestBranch objects.
        """
        logger.debug(f"Listing open pull requests of {self.repository}")
        prs = self.repo.get_pulls(state="open", sort="updated", direction="desc")
        return [PullRequestBranch.from_pull_request(pr) for pr in prs]

    def close(self) -> None:
        """Close the GitHub client connection."""
        self.gh.close()
        logger.debug("GitHub client closed")
