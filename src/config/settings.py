from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    github_token: str = Field(..., min_length=1)
    inference_endpoint: str = "https://models.inference.ai.azure.com/chat/completions"
    # None keeps outbound calls unbounded
    request_timeout: float | None = None

    app_host: str = "0.0.0.0"
    app_port: int = Field(
        default=5000, validation_alias=AliasChoices("PORT", "APP_PORT")
    )
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


settings = Settings()
