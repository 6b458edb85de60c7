from typing import Callable, List

import httpx
import pytest

from app.clients.git_http import GitHttpClient

from . import advertisement


class Upstream:
    """Records requests made against a fake git host."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> GitHttpClient:
        return GitHttpClient("https://github.com", timeout=5.0, transport=httpx.MockTransport(self))


@pytest.fixture
def make_upstream():
    def _make(status: int = 200, text: str | None = None, exc: Exception | None = None) -> Upstream:
        body = advertisement() if text is None else text

        def responder(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            return httpx.Response(status, text=body)

        return Upstream(responder)

    return _make
