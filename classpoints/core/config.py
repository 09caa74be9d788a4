from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Class Points API"
    app_env: str = "dev"
    app_version: str = "0.1.0"
    api_v1_prefix: str = ""

    database_url: str = "sqlite+pysqlite:///./data/classpoints.db"
    db_pool_size: int = 10
    db_pool_timeout_seconds: float = 30.0
    db_timeout_seconds: float = 30.0

    log_level: str = "INFO"
    display_timezone: str | None = None  # IANA name, host zone when unset

    seed_sample_students: bool = True

    @field_validator("display_timezone")
    @classmethod
    def validate_display_timezone(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value.strip())
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown time zone: {value}") from exc
        return value.strip()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
