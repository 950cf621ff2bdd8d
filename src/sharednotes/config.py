"""
App configuration - using pydantic settings for env vars
Server and client settings live together since both are tiny.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings - loads from .env file"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # basic app stuff
    app_name: str = Field(default="sharednotes API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)  # set to True for dev
    environment: str = Field(default="development", description="Environment name")

    # server config
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    reload: bool = Field(default=False)
    api_prefix: str = Field(default="", description="Base path all routers are mounted under")

    # DB settings
    database_url: str = Field(default="sqlite+aiosqlite:///./sharednotes.db")
    database_echo: bool = Field(default=False)  # useful for debugging

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:8080", "http://127.0.0.1:8080"],
        description="CORS allowed origins",
    )
    cors_allow_credentials: bool = Field(default=True, description="CORS allow credentials")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for rotating log files")

    # Client side
    api_base_url: str = Field(default="http://localhost:5000", description="Notes API base URL")
    autosave_delay_seconds: float = Field(
        default=1.0, gt=0, description="Quiet period before a draft is saved"
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP client timeout")


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
