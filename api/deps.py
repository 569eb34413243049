"""
FastAPI dependency providers.

Service-level defaults are read from the environment (and a ``.env`` file
when present) once, on first use, and reused across requests. The
formatter is a shared singleton: it only holds read-only configuration.

Environment variables:
    FORMAT_CONSIDER_PARENS   "true"/"false", default "true"
    FORMAT_MAX_PAREN_DEPTH   non-negative int, default 0
    CODE_MAX_LENGTH          max characters accepted per request, default 1000000
"""

import logging
import os
from dataclasses import dataclass
from typing import Annotated

from dotenv import load_dotenv
from fastapi import Depends, HTTPException

from core.config import FormatConfig
from core.formatter import CommaFormatter

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class ServiceSettings:
    """
    Settings for the HTTP service.

    Attributes:
        format_config: Default FormatConfig for requests that do not set one.
        max_code_length: Upper bound on request code length (characters).
    """

    format_config: FormatConfig = FormatConfig()
    max_code_length: int = 1_000_000

    def __post_init__(self) -> None:
        if self.max_code_length <= 0:
            raise ValueError(f"max_code_length must be positive, got {self.max_code_length}")

    @classmethod
    def from_env(cls) -> "ServiceSettings":
        """Build settings from environment variables (loads ``.env`` first)."""
        load_dotenv()
        return cls(
            format_config=FormatConfig(
                consider_parens=_env_bool("FORMAT_CONSIDER_PARENS", True),
                max_paren_depth=_env_int("FORMAT_MAX_PAREN_DEPTH", 0),
            ),
            max_code_length=_env_int("CODE_MAX_LENGTH", 1_000_000),
        )


_settings: ServiceSettings | None = None


def get_settings() -> ServiceSettings:
    """Return the cached ServiceSettings singleton."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = ServiceSettings.from_env()
        logger.info(
            "Service settings loaded: consider_parens=%s max_paren_depth=%d max_code_length=%d",
            _settings.format_config.consider_parens,
            _settings.format_config.max_paren_depth,
            _settings.max_code_length,
        )
    return _settings


Settings = Annotated[ServiceSettings, Depends(get_settings)]

_formatter: CommaFormatter | None = None


def get_formatter(settings: Settings) -> CommaFormatter:
    """Return a CommaFormatter bound to the resolved settings' config.

    Takes settings as a dependency so ``dependency_overrides[get_settings]``
    reaches the formatter too. The instance is reused while the config is
    unchanged.
    """
    global _formatter  # noqa: PLW0603
    if _formatter is None or _formatter.config != settings.format_config:
        _formatter = CommaFormatter(settings.format_config)
    return _formatter


def check_code_length(code: str, settings: ServiceSettings) -> None:
    """Raise 413 when ``code`` exceeds ``settings.max_code_length``."""
    if len(code) > settings.max_code_length:
        raise HTTPException(
            status_code=413,
            detail=f"code is {len(code)} characters; the limit is {settings.max_code_length}",
        )
