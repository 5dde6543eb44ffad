from __future__ import annotations

import json
from collections.abc import Callable

import httpx

UPSTREAM_URL = "https://upstream.test/chat/completions"

Reply = Callable[[httpx.Request], httpx.Response]


def completion(content: object = "Hi!", usage: dict | None = None) -> dict:
    return {
        "choices": [{"message": {"content": content}}],
        "usage": usage if usage is not None else {"total_tokens": 5},
    }


class FakeUpstream:
    """Stands in for the hosted chat-completion endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: dict[str, Reply] = {}

    def reply(
        self,
        model: str,
        status_code: int = 200,
        *,
        json_body: object | None = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        def _reply(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        self._replies[model] = _reply

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        model = json.loads(request.content)["model"]
        reply = self._replies.get(model)
        if reply is None:
            return httpx.Response(200, json=completion())
        return reply(request)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    @property
    def models_called(self) -> list[str]:
        return [body["model"] for body in self.bodies]
