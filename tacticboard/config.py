from typing import List, Optional
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    app_name: str = "Tactical Board Server"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 10000
    cors_origins: List[str] = ["*"]
    static_dir: Optional[str] = None  # served at "/" when set

    # LLM settings
    llm_provider: str = "openrouter"  # "openrouter" or "anthropic"
    openrouter_key: str = ""
    anthropic_api_key: str = ""
    llm_api_base: str = "https://openrouter.ai/api/v1"
    llm_model: str = "gpt-4o-mini"  # or "claude-3-haiku-20240307" for Anthropic
    llm_timeout: float = 30.0

    chat_max_tokens: int = 200
    chat_temperature: float = 0.9
    advisor_max_tokens: int = 80
    advisor_temperature: float = 0.8

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
