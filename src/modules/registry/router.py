from fastapi import APIRouter

from src.modules.registry.models import list_models
from src.modules.registry.schemas import ModelListResponse, ModelResponse

router = APIRouter()


@router.get("", response_model=ModelListResponse)
async def get_models() -> ModelListResponse:
    models = [
        ModelResponse(
            id=m.id,
            name=m.name,
            endpoint=m.endpoint,
            publisher=m.publisher,
        )
        for m in list_models()
    ]
    return ModelListResponse(data=models, total_count=len(models))
