"""
Urlaubsplaner Configuration

Settings are read from environment variables:

    URLAUBSPLANER_DEFAULT_STATE     State for users without one (default: BY)
    URLAUBSPLANER_DEFAULT_QUOTA     Vacation days per year (default: 30)
    URLAUBSPLANER_MIN_YEAR          First accepted year (default: 2000)
    URLAUBSPLANER_MAX_YEAR          Last accepted year (default: 2100)
    URLAUBSPLANER_LOG_LEVEL         Logging level (default: INFO)
    URLAUBSPLANER_STRICT_ABSENCES   Reject absences on non-workdays (default: false)
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from .exceptions import InvalidJurisdiction, UrlaubsplanerError
from .models import Jurisdiction

ENV_PREFIX = "URLAUBSPLANER_"

LOGGER_NAME = "urlaubsplaner"


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class EngineSettings:
    """Runtime configuration shared by the boundary layer and the CLI."""
    default_state: Jurisdiction = Jurisdiction.BY
    default_quota: Decimal = Decimal("30")
    min_year: int = 2000
    max_year: int = 2100
    log_level: str = "INFO"
    strict_absences: bool = False

    def __post_init__(self) -> None:
        if self.min_year > self.max_year:
            raise UrlaubsplanerError(
                message=f"min_year {self.min_year} is after max_year {self.max_year}",
                code="UP_CONFIG_ERROR",
            )
        if not self.default_quota.is_finite() or self.default_quota < 0:
            raise UrlaubsplanerError(
                message="default_quota must be finite and not negative",
                code="UP_CONFIG_ERROR",
                details={"default_quota": str(self.default_quota)},
            )

    def is_supported_year(self, year: int) -> bool:
        return self.min_year <= year <= self.max_year

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> EngineSettings:
        """
        Build settings from environment variables.

        Raises:
            UrlaubsplanerError: (UP_CONFIG_ERROR) on unparsable values
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        try:
            default_state = Jurisdiction.from_code(get("DEFAULT_STATE", "BY"))
            default_quota = Decimal(get("DEFAULT_QUOTA", "30"))
            min_year = int(get("MIN_YEAR", "2000"))
            max_year = int(get("MAX_YEAR", "2100"))
        except (InvalidJurisdiction, InvalidOperation, ValueError) as e:
            raise UrlaubsplanerError(
                message=f"Invalid configuration: {e}",
                code="UP_CONFIG_ERROR",
            ) from e

        log_level = get("LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise UrlaubsplanerError(
                message=f"Unknown log level: {log_level}",
                code="UP_CONFIG_ERROR",
            )

        return cls(
            default_state=default_state,
            default_quota=default_quota,
            min_year=min_year,
            max_year=max_year,
            log_level=log_level,
            strict_absences=get("STRICT_ABSENCES", "false").lower() == "true",
        )


# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging(settings: Optional[EngineSettings] = None) -> logging.Logger:
    """
    Attach a JSON stream handler to the package logger.

    Calling it again replaces the handler instead of adding another one.
    """
    settings = settings or EngineSettings.from_env()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level))
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            logger.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger
