"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from BANK_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="BANK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Interest rates (fractions)
    savings_rate: float = Field(default=0.03, ge=0)
    fixed_rate: float = Field(default=0.05, ge=0)

    # Service
    service_name: str = "bank-deposits"
    log_level: str = "INFO"


settings = Settings()
