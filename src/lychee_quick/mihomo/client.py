"""Mihomo (Clash) external controller client.

Thin wrapper over the controller's REST API: read/patch the running config,
list proxies, switch a selector group and run delay tests.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal
from urllib.parse import quote

import requests
from pydantic import BaseModel, ConfigDict, Field

from lychee_quick.errors import MihomoError
from lychee_quick.i18n import t

logger = logging.getLogger(__name__)

Mode = Literal["rule", "direct", "global"]
MODES: tuple[Mode, ...] = ("rule", "direct", "global")

DELAY_TEST_URL = "https://www.gstatic.com/generate_204"


class MihomoConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    mode: str


class DelayHistory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    delay: int
    time: str | None = None


class MihomoProxy(BaseModel):
    """A proxy or proxy group as reported by `GET /proxies`."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str = ""
    now: str | None = None
    alive: bool = True
    all: list[str] | None = None
    history: list[DelayHistory] = Field(default_factory=list)

    @property
    def is_url_test(self) -> bool:
        return self.type == "URLTest"

    @property
    def is_selector(self) -> bool:
        """A group whose member is chosen by hand (not by latency)."""

        return bool(self.all) and not self.is_url_test


def _error_detail(resp: requests.Response) -> str:
    text = resp.text or ""
    if text.strip():
        try:
            payload = json.loads(text)
        except ValueError:
            return text
        if isinstance(payload, dict) and isinstance(payload.get("message"), str):
            return payload["message"]
        return text
    return resp.reason or ""


class MihomoClient:
    """Small wrapper around the Mihomo REST API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: str,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not base_url:
            raise ValueError("Mihomo URL is required")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"Bearer {token}"})

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, uri: str) -> str:
        return f"{self._base_url}/{uri.lstrip('/')}"

    def request(
        self,
        method: str,
        uri: str,
        *,
        json_body: Any = None,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Send a request and decode the JSON response (None for empty bodies).

        Raises:
            MihomoError: with a message that says what went wrong.
        """

        try:
            resp = self._session.request(
                method,
                self._url(uri),
                json=json_body,
                params=params,
                timeout=timeout or self._timeout,
            )
        except requests.RequestException as e:
            raise MihomoError(t("error.mihomo.failed", status="-", detail=str(e))) from e

        if not resp.ok:
            detail = _error_detail(resp)
            logger.debug(
                "Mihomo request failed",
                extra={"uri": uri, "status": resp.status_code, "detail": detail},
            )
            if resp.status_code in (408, 504):
                raise MihomoError(t("error.mihomo.timeout", detail=detail))
            if resp.status_code == 503:
                raise MihomoError(t("error.mihomo.unavailable", detail=detail))
            if resp.status_code == 404:
                raise MihomoError(t("error.mihomo.notFound", uri=uri))
            raise MihomoError(t("error.mihomo.failed", status=resp.status_code, detail=detail))

        if not resp.content:
            return None
        return resp.json()

    def get_config(self) -> MihomoConfig:
        return MihomoConfig.model_validate(self.request("GET", "configs"))

    def set_mode(self, mode: str) -> None:
        logger.info("Switching Mihomo mode", extra={"mode": mode})
        self.request("PATCH", "configs", json_body={"mode": mode})

    def get_proxies(self) -> dict[str, MihomoProxy]:
        payload = self.request("GET", "proxies") or {}
        raw = payload.get("proxies") or {}
        return {name: MihomoProxy.model_validate(item) for name, item in raw.items()}

    def select_proxy(self, group: str, name: str) -> None:
        logger.info("Selecting proxy", extra={"group": group, "proxy": name})
        self.request("PUT", f"proxies/{quote(group, safe='')}", json_body={"name": name})

    def proxy_delay(self, name: str, *, timeout_ms: int = 1000, url: str = DELAY_TEST_URL) -> int:
        payload = self.request(
            "GET",
            f"proxies/{quote(name, safe='')}/delay",
            params={"url": url, "timeout": timeout_ms},
            timeout=timeout_ms / 1000 + self._timeout,
        )
        return int(payload["delay"])

    def group_delay(
        self, group: str = "GLOBAL", *, timeout_ms: int = 1000, url: str = DELAY_TEST_URL
    ) -> dict[str, int]:
        payload = self.request(
            "GET",
            f"group/{quote(group, safe='')}/delay",
            params={"url": url, "timeout": timeout_ms},
            timeout=timeout_ms / 1000 + self._timeout,
        )
        return {str(k): int(v) for k, v in (payload or {}).items()}
