from pydantic import BaseModel


class ModelResponse(BaseModel):
    id: str
    name: str
    endpoint: str
    publisher: str
    available: bool = True


class ModelListResponse(BaseModel):
    data: list[ModelResponse]
    total_count: int
    has_more: bool = False
