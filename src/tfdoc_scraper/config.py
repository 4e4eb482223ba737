"""Configuration settings for tfdoc-scraper."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.terraform.io/docs"


class Settings(BaseSettings):
    """tfdoc-scraper configuration.

    Environment variables:
    - TFDOC_BASE_URL: Documentation site root (default: https://www.terraform.io/docs)
    - TFDOC_TIMEOUT: Per-request timeout in seconds (default: 30)
    - TFDOC_USER_AGENT: User-Agent header sent with every request
    - TFDOC_LOG_LEVEL: Loguru level used by the CLI (default: WARNING)
    """

    model_config = SettingsConfigDict(env_prefix="TFDOC_")

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30
    user_agent: str = "tfdoc-scraper/0.1.0"
    log_level: str = "WARNING"


settings = Settings()
