from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Budget Manager API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # SurrealDB document store
    SURREALDB_URL: str = "ws://localhost:8000/rpc"
    SURREALDB_NS: str = "budget_manager"
    SURREALDB_DB: str = "main"
    SURREALDB_USER: str = "root"
    SURREALDB_PASS: str = "root"


# Expected to be set explicitly outside local development
REQUIRED_ENV = (
    "SURREALDB_URL",
    "SURREALDB_NS",
    "SURREALDB_DB",
    "SURREALDB_USER",
    "SURREALDB_PASS",
)

settings = Settings()
