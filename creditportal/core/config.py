from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # Security (tokens are issued by the auth service, we only verify them)
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # Database
    DATABASE_URL: str | None = None
    POSTGRES_HOST: str = "db"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "credit_portal"

    # OpenAI
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o"
    RESPONDER_TIMEOUT_SECONDS: float = 20.0
    RESPONDER_TEMPERATURE: float = 0.7
    RESPONDER_MAX_TOKENS: int = 500

    # Chat
    CHAT_MAX_MESSAGE_LENGTH: int = 2000
    CHAT_HISTORY_LIMIT: int = 50


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
