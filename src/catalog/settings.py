"""Settings module. The values can be loaded from env"""
import os
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

base_path = Path(__file__).parent


class Settings(BaseSettings):
    """Settings class"""

    model_config = SettingsConfigDict(
        env_file=os.getenv("SETTINGS_CONFIG") or base_path.joinpath("prod.env"),
        extra="ignore",
    )

    # database
    database_dsn: str = "sqlite+aiosqlite:///./catalog.db"

    # logging
    log_level: str = "info"

    # graphql
    max_query_depth: int = 100


@lru_cache
def get_settings() -> Settings:
    return Settings()
