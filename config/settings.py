from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .traffic import TrafficLevel


class Settings(BaseSettings):
    """Application-wide configuration, overridable through ROUTE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_dir: str | None = Field(default=None)
    default_source: str = Field(default="A")
    default_traffic_level: TrafficLevel = Field(default=TrafficLevel.MEDIUM)
    default_hour: int = Field(default=12, ge=0, le=23)
    random_node_count: int = Field(default=8, ge=1, le=60)
    random_seed: int | None = Field(default=None)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
