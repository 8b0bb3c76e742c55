"""Integration test fixtures.

Provides a scripted Bot API server (httpx.MockTransport) so the full
transport + retry pipeline can run without network access.
"""

from collections import deque

import httpx
import pytest


class ScriptedBotApi:
    """Replays a script of responses/exceptions, one per request."""

    def __init__(self):
        self.script: deque = deque()
        self.requests: list[httpx.Request] = []

    def enqueue(self, *steps) -> "ScriptedBotApi":
        """Queue steps: a (status, json) tuple or an httpx exception class."""
        self.script.extend(steps)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script.popleft()
        if isinstance(step, type) and issubclass(step, Exception):
            raise step("scripted failure", request=request)
        status, body = step
        return httpx.Response(status, json=body)


@pytest.fixture
def bot_api() -> ScriptedBotApi:
    return ScriptedBotApi()
