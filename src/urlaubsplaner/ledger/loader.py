"""
Urlaubsplaner Ledger Loader

Loads and validates ledger documents from YAML or JSON files and applies
validated updates to ledgers.

Converts Pydantic schema models to Urlaubsplaner domain models. Bulk
imports hand over the same {date: code} mapping as manual entry and go
through apply_absence_update() as well.
"""
from __future__ import annotations

import json
import logging
from dataclasses import replace
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..config import EngineSettings
from ..exceptions import LedgerLoadError, LedgerValidationError
from ..models import AbsenceType, Jurisdiction, Ledger
from .schema import (
    SCHEMA_VERSION,
    AbsenceDeleteSchema,
    AbsenceUpdateSchema,
    LedgerSchema,
    QuotaUpdateSchema,
    SettingsUpdateSchema,
    check_schema_version,
    validate_ledger,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_ledger(schema: LedgerSchema, settings: EngineSettings) -> Ledger:
    """Convert LedgerSchema to Ledger, filling gaps from settings."""
    return Ledger(
        state=Jurisdiction(schema.state) if schema.state else settings.default_state,
        default_quota=(
            schema.default_quota if schema.default_quota is not None else settings.default_quota
        ),
        quotas=dict(schema.quotas),
        absences={d: AbsenceType(code) for d, code in schema.absences.items()},
        user=schema.user,
        display_name=schema.display_name,
    )


def _validation_error(what: str, e: ValidationError, source: str = "") -> LedgerValidationError:
    details: dict[str, Any] = {"errors": e.errors(include_url=False, include_context=False, include_input=False)}
    if source:
        details["path"] = source
    return LedgerValidationError(
        message=f"{what} validation failed: {e.error_count()} errors",
        details=details,
    )


# =============================================================================
# Ledger Loader
# =============================================================================

class LedgerLoader:
    """
    Loads ledgers from YAML or JSON files.

    Usage:
        loader = LedgerLoader()
        ledger = loader.load("data/alice.yaml")
    """

    def __init__(self, settings: Optional[EngineSettings] = None, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            settings: Year bounds and defaults (from the environment if omitted)
            strict_version: If True, reject documents with another major version
        """
        self.settings = settings or EngineSettings.from_env()
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> Ledger:
        """
        Load a ledger from a file.

        Raises:
            LedgerLoadError: If the file cannot be read or parsed
            LedgerValidationError: If validation fails
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise LedgerLoadError(
                message=f"Failed to load ledger: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        return self.load_data(data, source=str(path))

    def load_data(self, data: Any, source: str = "") -> Ledger:
        """
        Validate an already parsed document and convert it.

        Raises:
            LedgerValidationError: If validation fails
        """
        if not isinstance(data, dict):
            raise LedgerValidationError(
                message="Ledger document must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            doc_version = data.get("schema_version", "unknown")
            raise LedgerValidationError(
                message=f"Schema version mismatch: document has {doc_version}, expected {SCHEMA_VERSION}",
                details={"document_version": doc_version, "expected_version": SCHEMA_VERSION},
            )

        try:
            schema = validate_ledger(data, self.settings)
        except ValidationError as e:
            raise _validation_error("Ledger", e, source) from e

        ledger = _convert_ledger(schema, self.settings)
        logger.debug(
            "Loaded ledger %s: %d absences, %d quota overrides",
            source or "<data>", len(ledger.absences), len(ledger.quotas),
        )
        return ledger

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # YAML is a superset of JSON
                return yaml.safe_load(f)


# =============================================================================
# Update Helpers
# =============================================================================

def _validate(schema: type, payload: Any, settings: Optional[EngineSettings], what: str):
    try:
        return schema.model_validate(payload, context={"settings": settings or EngineSettings()})
    except ValidationError as e:
        raise _validation_error(what, e) from e


def apply_absence_update(
    ledger: Ledger,
    payload: Any,
    settings: Optional[EngineSettings] = None,
) -> Ledger:
    """
    Validate {"dates": {iso_date: code}} and return the updated ledger.

    All-or-nothing: one invalid entry rejects the whole update.

    Raises:
        LedgerValidationError: If any date or code is invalid
    """
    update = _validate(AbsenceUpdateSchema, payload, settings, "Absence update")
    return ledger.with_absences(update.to_absence_map())


def apply_absence_delete(
    ledger: Ledger,
    payload: Any,
    settings: Optional[EngineSettings] = None,
) -> Ledger:
    """Validate {"dates": [iso_date, ...]} and return the ledger without them."""
    delete = _validate(AbsenceDeleteSchema, payload, settings, "Absence delete")
    return ledger.without_absences(delete.dates)


def apply_quota_update(
    ledger: Ledger,
    payload: Any,
    settings: Optional[EngineSettings] = None,
) -> Ledger:
    """Validate {"year": ..., "quota": ...} and store the override."""
    update = _validate(QuotaUpdateSchema, payload, settings, "Quota update")
    return ledger.with_quota(update.year, update.quota)


def apply_settings_update(
    ledger: Ledger,
    payload: Any,
    settings: Optional[EngineSettings] = None,
) -> Ledger:
    """
    Validate a partial settings update (state, defaultQuota, displayName).

    An unknown state is rejected as a validation error, leaving the
    ledger unchanged.
    """
    update = _validate(SettingsUpdateSchema, payload, settings, "Settings update")
    default_quota: Decimal = (
        update.default_quota if update.default_quota is not None else ledger.default_quota
    )
    return replace(
        ledger,
        state=update.jurisdiction or ledger.state,
        default_quota=default_quota,
        display_name=update.display_name if update.display_name is not None else ledger.display_name,
    )


def load_ledger(path: Union[str, Path], settings: Optional[EngineSettings] = None) -> Ledger:
    """
    Load a ledger from a file.

    Convenience function that creates a temporary loader.
    """
    return LedgerLoader(settings=settings).load(path)
