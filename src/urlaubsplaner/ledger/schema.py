"""
Urlaubsplaner Boundary Schemas

Pydantic models validating data before it reaches the engine:
absence updates and deletions, quota updates, settings updates and
whole ledger documents (YAML/JSON).

The engine assumes validated input; everything malformed is rejected here.

Year bounds come from EngineSettings, passed as validation context:
    AbsenceUpdateSchema.model_validate(data, context={"settings": settings})
Without a context the defaults (2000-2100) apply.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from ..config import EngineSettings
from ..models import AbsenceType, Jurisdiction


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Enums as Literals (for YAML validation)
# =============================================================================

AbsenceCodeValue = Literal["UR", "UR/2", "SUR", "UUR"]

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# =============================================================================
# Field Helpers
# =============================================================================

def _settings(info: ValidationInfo) -> EngineSettings:
    context = info.context or {}
    return context.get("settings") or EngineSettings()


def parse_iso_date(value: Any) -> date:
    """
    Parse a strict YYYY-MM-DD date.

    YAML loaders already produce date objects for unquoted dates;
    those pass through unchanged.

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if isinstance(value, datetime):
        raise ValueError(f"Expected a date without time: {value!r}")
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValueError(f"Invalid date: {value!r}")
    return date.fromisoformat(value)


def _check_year(year: int, info: ValidationInfo) -> int:
    settings = _settings(info)
    if not settings.is_supported_year(year):
        raise ValueError(
            f"Invalid year: {year} (supported {settings.min_year}-{settings.max_year})"
        )
    return year


def _check_state(value: str) -> str:
    code = value.strip().upper()
    if code not in {j.value for j in Jurisdiction}:
        raise ValueError(f"Unknown state: {value!r}")
    return code


# =============================================================================
# Absence Schemas
# =============================================================================

class AbsenceUpdateSchema(BaseModel):
    """Insert or replace absences: {"dates": {"2025-06-02": "UR", ...}}."""
    dates: dict[date, AbsenceCodeValue] = Field(
        ..., description="ISO date -> absence code"
    )

    model_config = {"extra": "forbid"}

    @field_validator("dates", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return {parse_iso_date(k): code for k, code in v.items()}

    @field_validator("dates")
    @classmethod
    def check_years(cls, v: dict[date, str], info: ValidationInfo) -> dict[date, str]:
        for d in v:
            _check_year(d.year, info)
        return v

    def to_absence_map(self) -> dict[date, AbsenceType]:
        return {d: AbsenceType(code) for d, code in self.dates.items()}


class AbsenceDeleteSchema(BaseModel):
    """Remove absences: {"dates": ["2025-06-02", ...]}."""
    dates: list[date] = Field(..., description="ISO dates to clear")

    model_config = {"extra": "forbid"}

    @field_validator("dates", mode="before")
    @classmethod
    def parse_dates(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [parse_iso_date(d) for d in v]

    @field_validator("dates")
    @classmethod
    def check_years(cls, v: list[date], info: ValidationInfo) -> list[date]:
        for d in v:
            _check_year(d.year, info)
        return v


# =============================================================================
# Quota and Settings Schemas
# =============================================================================

class QuotaUpdateSchema(BaseModel):
    """Per-year quota override."""
    year: int = Field(..., description="Year the quota applies to")
    quota: Decimal = Field(..., ge=0, description="Vacation days")

    model_config = {"extra": "forbid"}

    @field_validator("year")
    @classmethod
    def check_year(cls, v: int, info: ValidationInfo) -> int:
        return _check_year(v, info)


class SettingsUpdateSchema(BaseModel):
    """Partial update of a user's settings; omitted fields stay unchanged."""
    state: Optional[str] = Field(None, description="Federal state code")
    default_quota: Optional[Decimal] = Field(None, ge=0, alias="defaultQuota")
    display_name: Optional[str] = Field(None, alias="displayName")

    model_config = {"extra": "forbid", "populate_by_name": True}

    @field_validator("state")
    @classmethod
    def check_state(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_state(v)

    @property
    def jurisdiction(self) -> Optional[Jurisdiction]:
        return None if self.state is None else Jurisdiction(self.state)


# =============================================================================
# Ledger Document
# =============================================================================

class LedgerSchema(BaseModel):
    """
    A user's complete vacation data as a YAML/JSON document.

    Example (YAML):
        schema_version: "1.0.0"
        user: alice
        state: BY
        default_quota: 30
        quotas:
          2025: 28
        absences:
          2025-06-02: UR
          2025-12-24: UR/2
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Document schema version")
    user: Optional[str] = Field(None, description="User name")
    display_name: Optional[str] = Field(None, description="Name shown to the user")
    state: Optional[str] = Field(None, description="Federal state code")
    default_quota: Optional[Decimal] = Field(None, ge=0, description="Days per year")
    quotas: dict[int, Decimal] = Field(default_factory=dict, description="Year overrides")
    absences: dict[date, AbsenceCodeValue] = Field(
        default_factory=dict, description="ISO date -> absence code"
    )

    model_config = {"extra": "forbid"}

    @field_validator("state")
    @classmethod
    def check_state(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_state(v)

    @field_validator("quotas")
    @classmethod
    def check_quotas(cls, v: dict[int, Decimal], info: ValidationInfo) -> dict[int, Decimal]:
        for year, quota in v.items():
            _check_year(year, info)
            if quota < 0:
                raise ValueError(f"Quota for {year} must not be negative")
        return v

    @field_validator("absences", mode="before")
    @classmethod
    def parse_absence_dates(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return {parse_iso_date(k): code for k, code in v.items()}

    @field_validator("absences")
    @classmethod
    def check_absence_years(cls, v: dict[date, str], info: ValidationInfo) -> dict[date, str]:
        for d in v:
            _check_year(d.year, info)
        return v


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_ledger(data: dict[str, Any], settings: Optional[EngineSettings] = None) -> LedgerSchema:
    """
    Validate a ledger dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return LedgerSchema.model_validate(data, context={"settings": settings or EngineSettings()})


def check_schema_version(data: dict[str, Any]) -> bool:
    """True if the document's major schema version matches ours."""
    doc_version = str(data.get("schema_version", SCHEMA_VERSION))
    return doc_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
