from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore"
    )

    database_url: str | None = Field(default=None, alias="DATABASE_URL")

    http_timeout: int = Field(default=20, alias="HTTP_TIMEOUT")
    # 1 means a single attempt; generation and persistence errors are retried by the operator
    http_retries: int = Field(default=1, alias="HTTP_RETRIES")

    generator_url: str = Field(
        default="http://localhost:54321/functions/v1/generate-blog", alias="GENERATOR_URL"
    )
    generator_api_key: str | None = Field(default=None, alias="GENERATOR_API_KEY")

    ip_lookup_url: str = Field(default="https://api.ipify.org?format=json", alias="IP_LOOKUP_URL")
    geo_lookup_url: str = Field(default="https://ipapi.co/{ip}/json/", alias="GEO_LOOKUP_URL")

    site_base_url: str = Field(default="http://localhost:8501", alias="SITE_BASE_URL")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
