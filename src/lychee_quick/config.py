"""Configuration for the CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Every service credential is optional at load time. Commands ask for what they
need through `LycheeSettings.require`, so `ly clash now` works on a machine
that has no Linear or Vercel token configured.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lychee_quick.errors import MissingSettingError

# Values in a `.env` of the working directory win over the user-level file.
USER_ENV_FILE = Path.home() / ".config" / "lychee-quick" / ".env"
ENV_FILES: tuple[Path, ...] = (USER_ENV_FILE, Path(".env"))


class LycheeSettings(BaseSettings):
    """Settings for the CLI.

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `LycheeSettings(_env_file=path_to_env)`.
    """

    # Mihomo
    mihomo_url: str | None = Field(
        default=None,
        validation_alias="MIHOMO_URL",
        description="Mihomo external controller URL, e.g. http://127.0.0.1:9090",
    )
    mihomo_token: str | None = Field(
        default=None,
        validation_alias="MIHOMO_TOKEN",
        description="Mihomo external controller secret",
    )
    mihomo_top_proxy: str | None = Field(
        default=None,
        validation_alias="MIHOMO_TOP_PROXY",
        description="Name of the selector group the proxy chain starts from",
    )
    mihomo_board: str | None = Field(
        default=None,
        validation_alias="MIHOMO_BOARD",
        description="URL of the Mihomo web dashboard",
    )

    # Vercel
    vercel_personal_token: str | None = Field(
        default=None,
        validation_alias="VERCEL_PERSONAL_TOKEN",
        description="Vercel personal access token",
    )
    vercel_team: str | None = Field(
        default=None,
        validation_alias="VERCEL_TEAM",
        description="Vercel team id or slug",
    )

    # Redis (Upstash REST)
    redis_url: str | None = Field(
        default=None,
        validation_alias="REDIS_URL",
        description="Upstash Redis REST URL; caching is disabled when unset",
    )
    redis_token: str | None = Field(
        default=None,
        validation_alias="REDIS_TOKEN",
        description="Upstash Redis REST token",
    )

    # Linear
    linear_api_key: str | None = Field(
        default=None,
        validation_alias="LINEAR_API_KEY",
        description="Linear personal API key",
    )
    linear_team: str | None = Field(
        default=None,
        validation_alias="LINEAR_TEAM",
        description="Linear team key whose issues are listed",
    )

    # GitHub
    git_token: str | None = Field(
        default=None,
        validation_alias="GIT_TOKEN",
        description="GitHub token used for API authentication",
    )
    git_organization: str | None = Field(
        default=None,
        validation_alias="GIT_ORGANIZATION",
        description="GitHub organization (repository owner)",
    )
    git_repo: str | None = Field(
        default=None,
        validation_alias="GIT_REPO",
        description="GitHub repository name",
    )
    github_base_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_BASE_URL",
        description="GitHub API base URL (useful for GitHub Enterprise)",
    )
    git_base_branch: str = Field(
        default="main",
        validation_alias="GIT_BASE_BRANCH",
        description="Branch new issue branches are cut from",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )
    log_format: Literal["text", "json"] = Field(
        default="text",
        validation_alias="LOG_FORMAT",
        description="Log line format written to stderr",
    )
    cli_name: str = Field(
        default="ly",
        validation_alias="CLI_NAME",
        description="Name the CLI is installed under; used in usage text",
    )
    locale: Literal["en", "zh"] = Field(
        default="en",
        validation_alias="LOCALE",
        description="Language of prompt messages",
    )

    release_note_page: str | None = Field(
        default=None,
        validation_alias="RELEASE_NOTE_PAGE",
        description="Page opened after a release note is copied",
    )
    previews_comment_mentions: str = Field(
        default="",
        validation_alias="PREVIEWS_COMMENT_MENTIONS",
        description="Comma-separated emails mentioned in preview comments",
    )
    previews_comment_footer: str | None = Field(
        default=None,
        validation_alias="PREVIEWS_COMMENT_FOOTER",
        description="Optional footer paragraph appended to preview comments",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    def require(self, field: str) -> str:
        """Return a configured value or raise naming its environment variable."""

        value = getattr(self, field)
        if isinstance(value, str) and value.strip():
            return value
        alias = type(self).model_fields[field].validation_alias
        raise MissingSettingError(str(alias or field.upper()))

    @property
    def github_repository(self) -> str:
        """Repository in the form 'owner/repo'."""

        return f"{self.require('git_organization')}/{self.require('git_repo')}"
