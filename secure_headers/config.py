"""Settings and logging configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any, Literal, TextIO

import structlog
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from secure_headers.naming import normalize_header_name
from secure_headers.presets import get_preset
from secure_headers.types import REMOVE, HeaderConfig, HeaderDirective

PresetName = Literal["web", "secure-web", "api", "secure-api", "strict"]

_LOG_CONTEXT: dict[str, str] = {"environment": "development", "service": "secure-headers"}


class AppSettings(BaseModel):
    """Application identity and runtime settings."""

    environment: Literal["development", "staging", "production"] = "development"
    service: str = "secure-headers"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class HeaderSettings(BaseModel):
    """Preset selection and per-header overrides."""

    preset: PresetName | None = Field(
        default="web", description="Base preset; null starts from no headers."
    )
    overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Header values merged over the preset. The value 'remove' strips a header.",
    )

    def resolve(self) -> dict[str, HeaderDirective]:
        """Merge overrides over the selected preset, keyed by canonical name."""
        base = get_preset(self.preset) if self.preset is not None else {}
        return merge_overrides(base, self.overrides.items())


def merge_overrides(
    base: HeaderConfig, overrides: Iterable[tuple[str, str]]
) -> dict[str, HeaderDirective]:
    """Apply string overrides to a header configuration.

    Names are normalized on both sides so an override replaces the base entry
    whatever its casing. The value ``"remove"`` becomes ``REMOVE``.
    """
    merged: dict[str, HeaderDirective] = {
        normalize_header_name(name): directive for name, directive in base.items()
    }
    for name, value in overrides:
        merged[normalize_header_name(name)] = REMOVE if value == REMOVE.value else value
    return merged


class Settings(BaseSettings):
    """Root settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SECURE_HEADERS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=AppSettings)
    headers: HeaderSettings = Field(default_factory=HeaderSettings)


def _standard_log_fields(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Inject required structured logging fields."""
    event_dict.setdefault("environment", _LOG_CONTEXT["environment"])
    event_dict.setdefault("service", _LOG_CONTEXT["service"])
    event_dict.setdefault("timestamp", datetime.now(UTC).isoformat())
    return event_dict


def configure_structlog(settings: Settings, stream: TextIO | None = None) -> None:
    """Configure structlog for JSON output with required fields."""
    _LOG_CONTEXT["environment"] = settings.app.environment
    _LOG_CONTEXT["service"] = settings.app.service

    log_level = getattr(logging, settings.app.log_level, logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            _standard_log_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Load and cache settings from environment variables."""
    return Settings()
