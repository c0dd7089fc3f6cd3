from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Steam Player Proxy"
    STEAM_API_KEY: str = ""
    PROXY_SERVER: Optional[str] = None
    STEAM_TIMEOUT: Optional[float] = None  # None keeps the httpx default
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
