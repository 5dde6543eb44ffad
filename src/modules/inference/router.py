import logging
import math
from collections.abc import Callable
from typing import TypeVar

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.modules.inference.exceptions import (
    BadRequestError,
    InvalidModelsError,
    ModelNotFoundError,
)
from src.modules.inference.schemas import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ChatRequest,
    ChatResult,
    CompareResponse,
)
from src.modules.inference.service import InferenceService, get_inference_service
from src.modules.registry.models import find_invalid_models, is_model_allowed

logger = logging.getLogger(__name__)

router = APIRouter()

COMPARE_EXAMPLE = "/api/compare?q=Hello world&models=gpt-4o,Meta-Llama-3.1-8B-Instruct"

N = TypeVar("N", int, float)


def _parse_override(
    name: str, raw: str | None, cast: Callable[[str], N], default: N, example: str
) -> N:
    # Missing and empty values both fall back to the default
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        value = None
    # nan and inf cannot be sent as JSON
    if value is None or not math.isfinite(value):
        raise BadRequestError(
            f"Query parameter '{name}' must be a number", example=example
        )
    return value


@router.get(
    "/models/{model_id}/chat",
    response_model=ChatResult,
    response_model_exclude_none=True,
)
async def chat(
    model_id: str,
    q: str | None = None,
    temperature: str | None = None,
    max_tokens: str | None = None,
    service: InferenceService = Depends(get_inference_service),
):
    if not is_model_allowed(model_id):
        raise ModelNotFoundError(model_id)

    example = f"/api/models/{model_id}/chat?q=Hello world"
    if not q:
        raise BadRequestError("Query parameter 'q' is required", example=example)

    result = await service.chat(
        ChatRequest(
            model=model_id,
            query=q,
            temperature=_parse_override(
                "temperature", temperature, float, DEFAULT_TEMPERATURE, example
            ),
            max_tokens=_parse_override(
                "max_tokens", max_tokens, int, DEFAULT_MAX_TOKENS, example
            ),
        )
    )
    if not result.ok:
        return JSONResponse(status_code=500, content=result.to_payload())
    return result


@router.get(
    "/compare",
    response_model=CompareResponse,
    response_model_exclude_none=True,
)
async def compare(
    q: str | None = None,
    models: str | None = None,
    temperature: str | None = None,
    max_tokens: str | None = None,
    service: InferenceService = Depends(get_inference_service),
) -> CompareResponse:
    if not q:
        raise BadRequestError("Query parameter 'q' is required", example=COMPARE_EXAMPLE)

    if not models:
        raise BadRequestError(
            "Query parameter 'models' is required (comma-separated)",
            example=COMPARE_EXAMPLE,
        )

    model_list = [m.strip() for m in models.split(",")]
    invalid = find_invalid_models(model_list)
    if invalid:
        logger.info("Rejected compare request with unknown models: %s", invalid)
        raise InvalidModelsError(invalid)

    results = await service.compare(
        model_list,
        q,
        _parse_override("temperature", temperature, float, DEFAULT_TEMPERATURE, COMPARE_EXAMPLE),
        _parse_override("max_tokens", max_tokens, int, DEFAULT_MAX_TOKENS, COMPARE_EXAMPLE),
    )
    return CompareResponse(results=results)
