"""Configuration settings for Staffing Service."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8003
    debug: bool = False

    # Service
    service_name: str = "staffing-service"
    service_version: str = "0.1.0"
    log_level: str = "INFO"

    # Data (bundled sample dataset when unset)
    data_path: Optional[str] = None

    # Text generation
    llm_provider: str = "ollama"  # ollama, gemini
    llm_timeout_seconds: float = 60.0
    ollama_api_url: str = "http://localhost:11434/api"
    ollama_model: str = "llama3"
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    # Matching
    employee_match_threshold: int = 50
    task_match_threshold: int = 70

    # Skill validation
    manager_ids: list[str] = ["emp005", "emp007", "emp008"]
    validation_window_days: int = 90

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
