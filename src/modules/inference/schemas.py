from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000


class ChatRequest(BaseModel):
    model: str
    query: str = Field(..., min_length=1)
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS


class ChatResult(BaseModel):
    """Outcome of one upstream call; either ``response`` or ``error`` is set."""

    model_config = ConfigDict(populate_by_name=True)

    model: str
    # First choice content as sent upstream, usually a string
    response: Any = None
    usage: Any = None
    error: str | None = None
    response_time: int = Field(..., alias="responseTime")

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CompareResponse(BaseModel):
    results: list[ChatResult]
