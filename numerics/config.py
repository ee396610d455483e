"""
Configuration management for numerics
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from NUMERICS_* environment variables"""

    # Application
    APP_NAME: str = "numerics"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Log every swap performed by permute() at DEBUG level
    TRACE_PERMUTATIONS: bool = False

    # Unrelated keys in a shared .env are ignored
    model_config = SettingsConfigDict(
        env_prefix="NUMERICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def get_log_level(self) -> int:
        """Resolve the effective logging level"""
        if self.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO


# Global settings instance
settings = Settings()
