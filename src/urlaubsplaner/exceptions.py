"""
Urlaubsplaner Exception Hierarchy

Domain-specific exceptions for the calendar and quota engine.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: UP_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class UrlaubsplanerError(Exception):
    """
    Base exception for all Urlaubsplaner errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (UP_*)
        details: Additional context about the error
    """
    message: str
    code: str = "UP_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Input Errors (rejected at the boundary)
# =============================================================================

@dataclass
class InvalidJurisdiction(UrlaubsplanerError):
    """Jurisdiction code is not one of the 16 federal states."""
    code: str = "UP_INVALID_JURISDICTION"


@dataclass
class InvalidYear(UrlaubsplanerError):
    """Year is outside the supported range."""
    code: str = "UP_INVALID_YEAR"


@dataclass
class InvalidAbsenceType(UrlaubsplanerError):
    """Absence type is not in the closed enumeration."""
    code: str = "UP_INVALID_ABSENCE_TYPE"


@dataclass
class InvalidDate(UrlaubsplanerError):
    """Date string is not a valid ISO calendar date."""
    code: str = "UP_INVALID_DATE"


# =============================================================================
# Quota Errors
# =============================================================================

@dataclass
class InconsistentAbsence(UrlaubsplanerError):
    """
    Absence stored on a day that is not a working day.

    Soft by default: the accountant records a warning and keeps counting.
    Only raised when strict accounting is requested.
    """
    code: str = "UP_INCONSISTENT_ABSENCE"


# =============================================================================
# Ledger Errors
# =============================================================================

@dataclass
class LedgerLoadError(UrlaubsplanerError):
    """Failed to read a ledger file."""
    code: str = "UP_LEDGER_LOAD_ERROR"


@dataclass
class LedgerValidationError(UrlaubsplanerError):
    """Ledger content failed schema validation."""
    code: str = "UP_LEDGER_VALIDATION_ERROR"
