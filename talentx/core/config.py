# talentx/core/config.py
from typing import Optional
from pydantic import AliasChoices, AnyUrl, Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    SECRET_KEY: str = "change-me"  # override in .env / secrets
    LOG_LEVEL: str = "INFO"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Gemini. The credential is also accepted as plain API_KEY, which is
    # what the browser build of the app used.
    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.5-flash-preview-04-17"
    GEMINI_API_BASE: AnyUrl = "https://generativelanguage.googleapis.com/v1beta"

    # Adapter selection: 'gemini' or 'mock'
    LLM_ADAPTER: str = "gemini"
    # None means no client-side timeout; superseded requests are cancelled instead
    LLM_TIMEOUT_SEC: Optional[float] = None

    # Session key-value store: 'file', 'redis' or 'memory'
    SESSION_STORE: str = "file"
    SESSION_STORE_PATH: str = "data/local_storage.json"
    REDIS_URL: str = "redis://localhost:6379/0"

    # Simulated network latency of the listing store
    LISTING_LATENCY_MS: int = 500
    FEATURED_LATENCY_MS: int = 300

    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024

    # Pydantic v2 settings: read from .env file
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

# single shared settings instance
settings = Settings()
