import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx

from src.config.settings import settings
from src.modules.inference.schemas import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ChatRequest,
    ChatResult,
)

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _extract_content(payload: Any) -> Any:
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content or ""


class InferenceService:
    """Forwards chat queries to the hosted chat-completion endpoint."""

    def __init__(
        self,
        token: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token or settings.github_token
        self._endpoint = endpoint or settings.inference_endpoint
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Content-Type": "application/json",
                },
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def chat(self, request: ChatRequest) -> ChatResult:
        body = {
            "model": request.model,
            "messages": [{"role": "user", "content": request.query}],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        client = self._get_client()
        started = time.perf_counter()

        try:
            response = await client.post(self._endpoint, json=body)
        except httpx.HTTPError as exc:
            message = str(exc) or exc.__class__.__name__
            logger.warning("Request to model %s failed: %s", request.model, message)
            return ChatResult(
                model=request.model, error=message, response_time=_elapsed_ms(started)
            )

        response_time = _elapsed_ms(started)

        if not response.is_success:
            logger.warning(
                "Model %s returned HTTP %d in %dms",
                request.model, response.status_code, response_time,
            )
            return ChatResult(
                model=request.model, error=response.text, response_time=response_time
            )

        try:
            payload = response.json()
            result = ChatResult(
                model=request.model,
                response=_extract_content(payload),
                usage=payload.get("usage") if isinstance(payload, dict) else None,
                response_time=response_time,
            )
        except Exception as exc:
            logger.exception("Unreadable response from model %s", request.model)
            return ChatResult(
                model=request.model,
                error=str(exc) or exc.__class__.__name__,
                response_time=response_time,
            )

        logger.info("Model %s responded in %dms", request.model, response_time)
        return result

    async def compare(
        self,
        models: Sequence[str],
        query: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> list[ChatResult]:
        """Query every model concurrently; results follow the order of ``models``."""
        logger.info("Comparing %d models", len(models))
        requests = [
            ChatRequest(
                model=model, query=query, temperature=temperature, max_tokens=max_tokens
            )
            for model in models
        ]
        return list(await asyncio.gather(*(self.chat(r) for r in requests)))


inference_service = InferenceService()


def get_inference_service() -> InferenceService:
    return inference_service
