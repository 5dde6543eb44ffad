from __future__ import annotations

import os
from collections.abc import Iterator

# Settings are read at import time and the token has no default.
os.environ.setdefault("GITHUB_TOKEN", "test-token")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from helpers import UPSTREAM_URL, FakeUpstream  # noqa: E402

from src.main import app  # noqa: E402
from src.modules.inference.service import (  # noqa: E402
    InferenceService,
    get_inference_service,
)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def service(upstream: FakeUpstream) -> InferenceService:
    return InferenceService(
        token="test-token",
        endpoint=UPSTREAM_URL,
        transport=httpx.MockTransport(upstream.handler),
    )


@pytest.fixture
def client(service: InferenceService) -> Iterator[TestClient]:
    app.dependency_overrides[get_inference_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
