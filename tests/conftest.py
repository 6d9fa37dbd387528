import time
import httpx
import pytest
from unittest.mock import patch
from journal_proxy.core import config
from journal_proxy.fetch.client import build_client

class FakeUpstream:
    """
    Stands in for the remote servers. Each host maps to one behaviour;
    every request is recorded with the time it arrived.
    """

    def __init__(self):
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append((request, time.monotonic()))
        host = request.url.host

        if host == "ok.example":
            return httpx.Response(200, text="hello", headers={"Content-Type": "text/html; charset=utf-8"})
        if host == "json.example":
            return httpx.Response(200, json={"title": "Journal"})
        if host == "notfound.example":
            return httpx.Response(404, text="<h1>missing</h1>")
        if host == "error.example":
            return httpx.Response(500, text="boom")
        if host == "redirect.example":
            return httpx.Response(301, headers={"Location": "https://ok.example/"})
        if host == "timeout.example":
            raise httpx.ReadTimeout("timed out", request=request)
        if host == "refused.example":
            raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
        raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

    @property
    def urls(self):
        return [str(request.url) for request, _ in self.calls]

@pytest.fixture
def upstream():
    """Route all outbound traffic of the fetch pipeline to FakeUpstream."""
    fake = FakeUpstream()

    def fake_build_client(timeout_ms):
        return build_client(timeout_ms, transport=httpx.MockTransport(fake))

    with patch("journal_proxy.fetch.batch.build_client", side_effect=fake_build_client):
        yield fake

@pytest.fixture(autouse=True)
def no_batch_delay():
    """Default batch delay of 0 so endpoint tests don't sleep."""
    original = config.settings.BATCH_DELAY_MS
    config.settings.BATCH_DELAY_MS = 0
    yield
    config.settings.BATCH_DELAY_MS = original
