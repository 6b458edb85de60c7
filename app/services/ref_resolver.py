# app/services/ref_resolver.py
from __future__ import annotations

import logging
from typing import Optional

from app.clients.git_http import GitHttpClient
from app.errors import ErrorKind, ResolveError
from app.models import ResolutionResult
from app.services.advertisement import resolve_from_advertisement

logger = logging.getLogger("app.services.ref_resolver")


async def resolve_ref(
    owner: Optional[str],
    repo: Optional[str],
    ref: Optional[str] = None,
    token: Optional[str] = None,
    *,
    client: Optional[GitHttpClient] = None,
) -> Optional[ResolutionResult]:
    """
    Resolve `ref` of `owner/repo` to the sha of the commit it points to.

    `ref` may be a short name (branch or tag, first advertised wins), a fully
    qualified name (`refs/tags/v1.0.0`), or None for the default branch.
    Returns None when the repository exists but advertises no matching ref.
    """
    if not owner or not repo:
        raise ResolveError(ErrorKind.VALIDATION, "owner and repo are mandatory parameters")

    client = client or GitHttpClient()
    body = await client.fetch_advertisement(owner, repo, token)
    result = resolve_from_advertisement(body, ref)
    if result is None:
        logger.info("ref not found: %s/%s ref=%s", owner, repo, ref or "<default>")
    return result
