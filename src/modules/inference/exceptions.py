from typing import Any

from src.modules.registry.models import MODELS


class GatewayError(Exception):
    """Client-facing failure rendered as ``{"error": message, **extra}``."""

    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class BadRequestError(GatewayError):
    status_code = 400


class ModelNotFoundError(GatewayError):
    status_code = 404

    def __init__(self, model_id: str) -> None:
        super().__init__(
            f"Model '{model_id}' not found", available_models=list(MODELS)
        )
        self.model_id = model_id


class InvalidModelsError(BadRequestError):
    def __init__(self, invalid: list[str]) -> None:
        super().__init__(
            f"Invalid models: {', '.join(invalid)}", available_models=list(MODELS)
        )
        self.invalid = invalid
