"""Vercel REST API client."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict, Field

from lychee_quick.errors import VercelError

logger = logging.getLogger(__name__)

VERCEL_API_URL = "https://api.vercel.com"


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DeployHook(_Model):
    ref: str
    url: str


class ProjectLink(_Model):
    deploy_hooks: list[DeployHook] = Field(default_factory=list, alias="deployHooks")


class ProjectTarget(_Model):
    id: str


class Project(_Model):
    id: str
    name: str
    link: ProjectLink | None = None
    targets: dict[str, ProjectTarget | None] = Field(default_factory=dict)


class DeploymentMeta(_Model):
    github_commit_ref: str | None = Field(default=None, alias="githubCommitRef")
    github_commit_message: str | None = Field(default=None, alias="githubCommitMessage")
    github_commit_sha: str | None = Field(default=None, alias="githubCommitSha")
    branch_alias: str | None = Field(default=None, alias="branchAlias")


class Deployment(_Model):
    uid: str
    state: str | None = None
    created: int
    building_at: int | None = Field(default=None, alias="buildingAt")
    ready: int | None = None
    inspector_url: str | None = Field(default=None, alias="inspectorUrl")
    meta: DeploymentMeta = Field(default_factory=DeploymentMeta)


class VercelClient:
    """Thin wrapper over the Vercel REST API."""

    def __init__(
        self,
        *,
        token: str,
        base_url: str = VERCEL_API_URL,
        session: requests.Session | None = None,
        timeout: float = 5.0,
    ) -> None:
        if not token:
            raise ValueError("Vercel token is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "User-Agent": "lychee-quick",
            }
        )

    def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}/{path.lstrip('/')}"
        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise VercelError(f"Vercel request failed: GET {path}: {exc}") from exc
        payload: dict[str, Any] = resp.json()
        return payload

    def list_projects(self, team_id: str) -> list[Project]:
        """Projects linked to a git repository."""

        data = self._get("/v9/projects", {"teamId": team_id, "limit": 100})
        projects = [Project.model_validate(p) for p in data.get("projects") or [] if p.get("link")]
        logger.debug("Fetched Vercel projects", extra={"team": team_id, "count": len(projects)})
        return projects

    def list_deployments(self, team_id: str, branch: str, sha: str | None = None) -> list[Deployment]:
        params: dict[str, Any] = {"teamId": team_id, "branch": branch}
        if sha:
            params["sha"] = sha
        data = self._get("/v6/deployments", params)
        return [Deployment.model_validate(d) for d in data.get("deployments") or []]

    def trigger_deploy_hook(self, url: str) -> None:
        try:
            resp = self._session.post(url, timeout=self._timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise VercelError(f"Deploy hook failed: {exc}") from exc
        logger.info("Deploy hook triggered", extra={"url": url})
