# catalog/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthMode(str, Enum):
    """Which gate guards the product routes. Exactly one is active per deployment."""

    NONE = "none"
    API_KEY = "api_key"
    BEARER = "bearer"


class Settings(BaseSettings):
    """Service configuration.

    Every field maps to the upper-cased environment variable of the same name
    (``PORT``, ``API_KEY``, ``AUTH_MODE`` ...). Keyword arguments take precedence
    over the environment, which is how the tests build isolated apps.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3000
    # compared against the x-api-key header when auth_mode is api_key
    api_key: Optional[str] = None
    auth_mode: AuthMode = AuthMode.BEARER
    log_level: str = "INFO"
    seed_sample_data: bool = True
