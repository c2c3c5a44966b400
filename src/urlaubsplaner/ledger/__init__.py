"""
Urlaubsplaner Ledgers

Boundary validation and loading of per-user vacation data.

Usage:
    from urlaubsplaner.ledger import LedgerLoader, apply_absence_update

    ledger = LedgerLoader().load("alice.yaml")
    ledger = apply_absence_update(ledger, {"dates": {"2025-06-02": "UR"}})
"""
from __future__ import annotations

from .loader import (
    LedgerLoader,
    apply_absence_delete,
    apply_absence_update,
    apply_quota_update,
    apply_settings_update,
    load_ledger,
)
from .schema import (
    SCHEMA_VERSION,
    AbsenceDeleteSchema,
    AbsenceUpdateSchema,
    LedgerSchema,
    QuotaUpdateSchema,
    SettingsUpdateSchema,
    check_schema_version,
    parse_iso_date,
    validate_ledger,
)

__all__ = [
    # Loader
    "LedgerLoader",
    "load_ledger",
    "apply_absence_update",
    "apply_absence_delete",
    "apply_quota_update",
    "apply_settings_update",
    # Schemas
    "SCHEMA_VERSION",
    "AbsenceUpdateSchema",
    "AbsenceDeleteSchema",
    "QuotaUpdateSchema",
    "SettingsUpdateSchema",
    "LedgerSchema",
    "check_schema_version",
    "parse_iso_date",
    "validate_ledger",
]
