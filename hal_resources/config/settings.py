from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Library settings managed by Pydantic.
    Reads from HAL_-prefixed environment variables and/or .env file.
    """
    # Logging
    LOG_LEVEL: str = "INFO"

    # Pagination token encryption (Fernet key, urlsafe base64)
    PAGINATION_TOKEN_KEY: Optional[str] = None

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_prefix="HAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()
