from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    APP_VERSION: str = "v1.0.x"
    API_NAME: str = "Task Tracker"
    API_SUMMARY: str = "Create, organize and track tasks"
    API_BASE_PATH: str = "/api"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    USER_AGENT: str = "TaskTracker"

    CORS_ENABLED: bool = True
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:5173"]
    CORS_ORIGIN_REGEX: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./tasks.db"
    TASKS_TABLE_NAME: str = "tasks"

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "task-tracker"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("API_BASE_PATH")
    def normalize_base_path(cls, v: str):
        return "/" + v.strip("/") if v.strip("/") else ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
