"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    TESTING: bool = False

    # Upstream lottery service
    LOTTO_ORIGIN_URL: str = os.getenv("LOTTO_ORIGIN_URL", "https://www.dhlottery.co.kr/common.do")
    ORIGIN_USER_AGENT: str = os.getenv("ORIGIN_USER_AGENT", "Mozilla/5.0")
    # None keeps the transport default (requests waits indefinitely).
    ORIGIN_TIMEOUT_SECONDS: float | None = _env_float("ORIGIN_TIMEOUT_SECONDS", None)
    ORIGIN_RETRIES: int = _env_int("ORIGIN_RETRIES", 0)
    ORIGIN_BACKOFF_SECONDS: float | None = _env_float("ORIGIN_BACKOFF_SECONDS", 0.3)

    # Draw cache and bulk lookups
    DRAW_CACHE_TTL_SECONDS: int = _env_int("DRAW_CACHE_TTL_SECONDS", 86_400)
    BULK_MAX_SPAN: int = _env_int("BULK_MAX_SPAN", 100)

    # Advisory Cache-Control for HTTP consumers
    CACHE_MAX_AGE_SECONDS: int = _env_int("CACHE_MAX_AGE_SECONDS", 86_400)
    CACHE_STALE_WHILE_REVALIDATE_SECONDS: int = _env_int("CACHE_STALE_WHILE_REVALIDATE_SECONDS", 3_600)


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration. The origin URL points nowhere on purpose."""

    DEBUG: bool = False
    TESTING: bool = True
    LOTTO_ORIGIN_URL: str = "http://origin.invalid/common.do"
    ORIGIN_TIMEOUT_SECONDS: float | None = 1.0


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
