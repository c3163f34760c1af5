from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=5000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_openapi_docs: bool = Field(default=True, alias="ENABLE_OPENAPI_DOCS")
    cors_allow_origins: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    gemini_api_key: str = Field(default="", alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.5-flash-preview-04-17", alias="GEMINI_MODEL")
    gemini_request_timeout_seconds: float = Field(default=60.0, gt=0, alias="GEMINI_REQUEST_TIMEOUT_SECONDS")

    quiz_question_count: int = Field(default=10, ge=1, alias="QUIZ_QUESTION_COUNT")
    generation_max_retries: int = Field(default=3, ge=0, alias="GENERATION_MAX_RETRIES")
    generation_retry_delay_ms: int = Field(default=2000, ge=0, alias="GENERATION_RETRY_DELAY_MS")


def parse_cors_origins(raw_value: str) -> list[str]:
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
