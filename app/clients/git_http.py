# app/clients/git_http.py
from __future__ import annotations

import base64
import logging
from typing import Dict, Optional

import httpx

from app.config import settings
from app.errors import ErrorKind, ResolveError

logger = logging.getLogger("app.clients.git_http")

UPLOAD_PACK_SERVICE = "git-upload-pack"


class GitHttpClient:
    """
    Talks to the smart-HTTP ref discovery endpoint of a git host.

    A fresh httpx.AsyncClient is opened per call; `transport` lets callers
    (tests) swap in an httpx.MockTransport.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        auth_user: str | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.git_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.auth_user = auth_user or settings.basic_auth_user
        self._transport = transport

    def discovery_url(self, owner: str, repo: str) -> str:
        return f"{self.base_url}/{owner}/{repo}.git/info/refs?service={UPLOAD_PACK_SERVICE}"

    def auth_headers(self, token: Optional[str]) -> Dict[str, str]:
        if not token:
            return {}
        creds = base64.b64encode(f"{self.auth_user}:{token}".encode("utf-8")).decode("ascii")
        return {"Authorization": f"Basic {creds}"}

    async def fetch_advertisement(self, owner: str, repo: str, token: Optional[str] = None) -> str:
        url = self.discovery_url(owner, repo)
        logger.debug("git.info_refs -> %s auth=%s", url, bool(token))
        try:
            # renamed or transferred repositories answer with a 301 to the new location
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                r = await client.get(url, headers=self.auth_headers(token))
        except httpx.HTTPError as e:
            logger.warning("git.info_refs <- %s failed: %r", url, e)
            raise ResolveError(ErrorKind.UPSTREAM, str(e) or e.__class__.__name__) from e

        logger.debug("git.info_refs <- %s status=%s", url, r.status_code)
        if r.is_success:
            return r.text

        if (r.status_code == 401 and not token) or r.status_code == 404:
            raise ResolveError(
                ErrorKind.NOT_FOUND,
                f"repository not found: {owner}/{repo}",
                status=404,
            )
        raise ResolveError(
            ErrorKind.UPSTREAM,
            f"failed to fetch git repo info (status: {r.status_code}, body: {r.text})",
            status=r.status_code,
        )
