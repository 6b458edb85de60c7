# app/routers/resolve_router.py
from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query
from fastapi.responses import PlainTextResponse

from app.clients.git_http import GitHttpClient
from app.models import ResolutionRequest, ResolutionResult
from app.services import resolve_ref

logger = logging.getLogger("app.routers.resolve")

router = APIRouter(tags=["resolve"])


def get_git_client() -> GitHttpClient:
    return GitHttpClient()


def resolution_request(
    owner: Optional[str] = Query(default=None, description="GitHub organization or user"),
    repo: Optional[str] = Query(default=None, description="GitHub repository name"),
    ref: Optional[str] = Query(default=None, description="branch or tag name (default branch if omitted)"),
    token_param: Optional[str] = Query(default=None, alias="GITHUB_TOKEN"),
    token_header: Optional[str] = Header(default=None, alias="x-github-token"),
) -> ResolutionRequest:
    return ResolutionRequest(owner=owner, repo=repo, ref=ref, token=token_header or token_param)


@router.get("/resolve", response_model=ResolutionResult)
@router.get("/", response_model=ResolutionResult, include_in_schema=False)
async def resolve(
    req: ResolutionRequest = Depends(resolution_request),
    client: GitHttpClient = Depends(get_git_client),
):
    """
    Resolve `ref` to the sha of its HEAD commit.

    Private repositories need a GitHub access token, via the `x-github-token`
    header or the `GITHUB_TOKEN` parameter.
    """
    ts0 = time.perf_counter()
    result = await resolve_ref(req.owner, req.repo, req.ref, req.token, client=client)
    logger.debug(
        "resolve %s/%s ref=%s -> %s (%.2f ms)",
        req.owner, req.repo, req.ref or "<default>",
        result.fq_ref if result else None,
        (time.perf_counter() - ts0) * 1000.0,
    )
    if result is None:
        return PlainTextResponse("ref not found", status_code=404)
    return result
