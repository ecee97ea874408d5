# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "")


class RateLimitConfig(BaseSettings):
    max_attempts: int = Field(5, ge=1, alias="RL_MAX_ATTEMPTS")
    window_ms: int = Field(15 * 60 * 1000, ge=1, alias="RL_WINDOW_MS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @property
    def window_seconds(self) -> float:
        return self.window_ms / 1000.0


def _rate_limit_config_factory() -> RateLimitConfig:
    return RateLimitConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    users_file: Path = Field(Path("data/users.json"), alias="USERS_FILE")
    books_file: Path = Field(Path("data/books.json"), alias="BOOKS_FILE")
    token_ttl: int = Field(3600, ge=1, alias="TOKEN_TTL")
    skip_rate_limit: bool = Field(False, alias="SKIP_RATE_LIMIT")
    trust_proxy: bool = Field(False, alias="TRUST_PROXY")
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_file: Path = Field(Path("instance/app.log"), alias="LOG_FILE")

    rate_limit: RateLimitConfig = Field(default_factory=_rate_limit_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("skip_rate_limit", "trust_proxy", "debug_logging", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in _INSECURE_SECRETS:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure SECRET_KEY detected in production!\n"
                "   SECRET_KEY signs every bearer token and must be a strong random value.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if self.skip_rate_limit:
            warnings.append("⚠️  Rate limiting on /api/login and /api/register is DISABLED")
        if "*" in self.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "RateLimitConfig", "load_config"]
