"""Linear GraphQL API client.

Only the three operations the CLI needs: list a team's issues (with their
GitHub PR attachments), look users up by email, and create a comment.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator

from lychee_quick.errors import LinearError

logger = logging.getLogger(__name__)

LINEAR_GRAPHQL_URL = "https://api.linear.app/graphql"

ISSUES_QUERY = """
query Issues($team: String!, $after: String) {
  issues(
    first: 100
    after: $after
    orderBy: updatedAt
    filter: { team: { key: { eq: $team } } }
  ) {
    nodes {
      id
      identifier
      title
      url
      branchName
      updatedAt
      assignee { id displayName isMe }
      state { type name }
      attachments { nodes { id title url metadata } }
    }
    pageInfo { hasNextPage endCursor }
  }
}
"""

USERS_QUERY = """
query Users($emails: [String!]) {
  users(filter: { email: { in: $emails } }) {
    nodes { id name email }
  }
}
"""

CREATE_COMMENT_MUTATION = """
mutation CreateComment($input: CommentCreateInput!) {
  commentCreate(input: $input) {
    success
    comment { id url }
  }
}
"""


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PreviewLink(_Model):
    url: str
    name: str | None = None


class GithubAttachmentMeta(_Model):
    """Metadata Linear stores for a GitHub pull request attachment."""

    title: str = ""
    url: str = ""
    status: str = "open"
    branch: str | None = None
    number: int | None = None
    draft: bool = False
    preview_links: list[PreviewLink] = Field(default_factory=list, alias="previewLinks")


class Attachment(_Model):
    id: str
    title: str = ""
    url: str = ""
    metadata: GithubAttachmentMeta = Field(default_factory=GithubAttachmentMeta)

    @field_validator("metadata", mode="before")
    @classmethod
    def _empty_metadata(cls, value: Any) -> Any:
        return value or {}


class Assignee(_Model):
    id: str | None = None
    display_name: str = Field(alias="displayName")
    is_me: bool = Field(default=False, alias="isMe")


class IssueState(_Model):
    type: str
    name: str | None = None


class Issue(_Model):
    id: str
    identifier: str
    title: str
    url: str
    branch_name: str = Field(alias="branchName")
    updated_at: datetime = Field(alias="updatedAt")
    assignee: Assignee | None = None
    state: IssueState
    attachments: list[Attachment] = Field(default_factory=list)

    @field_validator("attachments", mode="before")
    @classmethod
    def _flatten_connection(cls, value: Any) -> Any:
        # GraphQL returns a connection ({"nodes": [...]}); the cache stores a list.
        if isinstance(value, dict):
            return value.get("nodes") or []
        return value or []


class LinearUser(_Model):
    id: str
    name: str
    email: str | None = None


class LinearClient:
    """Small GraphQL client for the Linear API."""

    def __init__(
        self,
        *,
        api_key: str,
        url: str = LINEAR_GRAPHQL_URL,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not api_key:
            raise ValueError("Linear API key is required")

        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": api_key,
                "Content-Type": "application/json",
                "User-Agent": "lychee-quick",
            }
        )

    def _graphql(self, *, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self._session.post(
                self._url, json={"query": query, "variables": variables}, timeout=self._timeout
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise LinearError(f"Linear request failed: {e}") from e
        payload: dict[str, Any] = resp.json()
        errors = payload.get("errors")
        if errors:
            messages = []
            if isinstance(errors, list):
                for item in errors:
                    if isinstance(item, dict):
                        msg = item.get("message")
                        if isinstance(msg, str):
                            messages.append(msg)
            message = "; ".join(messages) if messages else "Unknown GraphQL error"
            raise LinearError(f"Linear GraphQL error: {message}")
        data = payload.get("data")
        if not isinstance(data, dict):
            raise LinearError("Linear GraphQL error: response has no data")
        return data

    def issues(self, *, team: str, max_pages: int = 10) -> list[Issue]:
        """Fetch the team's issues, most recently updated first."""

        issues: list[Issue] = []
        after: str | None = None
        for _ in range(max_pages):
            data = self._graphql(query=ISSUES_QUERY, variables={"team": team, "after": after})
            connection = data.get("issues") or {}
            issues.extend(Issue.model_validate(node) for node in connection.get("nodes") or [])

            page_info = connection.get("pageInfo") or {}
            after = page_info.get("endCursor")
            if not page_info.get("hasNextPage") or not after:
                break

        logger.debug("Fetched Linear issues", extra={"team": team, "count": len(issues)})
        return issues

    def users_by_email(self, emails: list[str]) -> list[LinearUser]:
        if not emails:
            return []
        data = self._graphql(query=USERS_QUERY, variables={"emails": emails})
        nodes = (data.get("users") or {}).get("nodes") or []
        return [LinearUser.model_validate(node) for node in nodes]

    def create_comment(self, *, issue_id: str, body_data: dict[str, Any]) -> str:
        """Create a comment from a ProseMirror document; returns the comment URL."""

        data = self._graphql(
            query=CREATE_COMMENT_MUTATION,
            variables={"input": {"issueId": issue_id, "bodyData": body_data}},
        )
        result = data.get("commentCreate") or {}
        comment = result.get("comment") or {}
        url = comment.get("url")
        if not result.get("success") or not isinstance(url, str):
            raise LinearError("Linear did not create the comment")
        logger.info("Linear comment created", extra={"issue_id": issue_id, "url": url})
        return url
