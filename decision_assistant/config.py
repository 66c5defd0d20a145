"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./decisions.db"

    # AI advice service (OpenAI-compatible chat completions API)
    advice_api_base: str = "https://api.openai.com/v1"
    advice_api_key: str = ""
    advice_model: str = "gpt-4o-mini"
    advice_temperature: float = 0.4

    # Service
    service_name: str = "decision-assistant"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 30.0
    advice_max_retries: int = 3
    advice_backoff_base: float = 1.0  # Exponential backoff base in seconds

    # Calculations
    strict_numeric_results: bool = False  # False keeps the legacy 0 fallback for uncomputable totals
    history_page_size: int = 50


settings = Settings()
