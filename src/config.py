"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    openai_api_key: str = ""
    scoring_model: str = "gpt-4o"

    fetch_mode: Literal["http", "browser"] = "http"
    fetch_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT

    max_content_chars: int = 15000
    max_headings: int = 20
    content_preview_chars: int = 3000

    mock_analysis: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
