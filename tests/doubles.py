"""Stand-ins for ``httpx.AsyncClient`` and its responses."""

import json


class MockResponse:
    def __init__(self, status_code: int, body):
        self.status_code = status_code
        self.content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")


class MockAsyncClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    async def get(self, url, params=None, headers=None):
        self.calls.append({"method": "GET", "url": str(url), "params": params, "headers": headers})
        return self.responses.pop(0)

    async def post(self, url, content=None, headers=None):
        self.calls.append({"method": "POST", "url": str(url), "content": content, "headers": headers})
        return self.responses.pop(0)

    async def aclose(self):
        return None


class FailingAsyncClient:
    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    async def get(self, *_args, **_kwargs):
        self.calls += 1
        raise self.exc

    async def post(self, *_args, **_kwargs):
        self.calls += 1
        raise self.exc

    async def aclose(self):
        return None
