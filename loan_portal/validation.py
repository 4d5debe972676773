"""Client-side validation for the loan application form.

`validate_form` takes the raw draft (wire field name -> text) and returns a
mapping of field name -> human-readable message. An empty mapping means the
form may be submitted. Validation never raises and never mutates the form.

Extended fields (employment status, monthly income, existing debt) are only
checked when the form carries them.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from loan_portal.contracts import EMPLOYMENT_STATUSES
from loan_portal.normalization import is_numeric, strip_non_digits

PHONE_DIGITS = 10
SSN_DIGITS = (9, 10)

_EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(form: Dict[str, Any], field: str, errors: Dict[str, str], *, label: str) -> str:
    value = _strip(form.get(field))
    if not value:
        add_error(errors, field, f"{label} is required.")
    return value


def require_number(form: Dict[str, Any], field: str, errors: Dict[str, str], *, label: str) -> str:
    value = require_str(form, field, errors, label=label)
    if value and not is_numeric(value):
        add_error(errors, field, f"{label} must be a number.")
    return value


def validate_email(value: Any, errors: Dict[str, str], field: str = "email") -> str:
    raw = _as_str(value)
    if not raw.strip():
        add_error(errors, field, "Email is required.")
        return raw
    if not _EMAIL_RE.match(raw):
        add_error(errors, field, "Please enter a valid email address (e.g., jane@example.com).")
    return raw


def validate_phone(value: Any, errors: Dict[str, str], field: str = "phone") -> str:
    digits = strip_non_digits(value)
    if not digits:
        add_error(errors, field, "Phone is required.")
    elif len(digits) != PHONE_DIGITS:
        add_error(errors, field, f"Phone must contain exactly {PHONE_DIGITS} digits.")
    return digits


def validate_ssn(value: Any, errors: Dict[str, str], field: str = "ssn") -> str:
    digits = strip_non_digits(value)
    if not digits:
        add_error(errors, field, "SSN is required.")
    elif len(digits) not in SSN_DIGITS:
        add_error(errors, field, "SSN must contain 9–10 digits.")
    return digits


def validate_employment_status(value: Any, errors: Dict[str, str], field: str = "employmentStatus") -> Optional[str]:
    raw = _strip(value)
    if not raw:
        add_error(errors, field, "Please select employment status.")
        return None
    if raw not in EMPLOYMENT_STATUSES:
        add_error(errors, field, "Please select a valid employment status.")
        return None
    return raw


def validate_form(form: Dict[str, Any]) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    require_str(form, "name", errors, label="Name")
    require_str(form, "address", errors, label="Address")
    validate_email(form.get("email"), errors)
    validate_phone(form.get("phone"), errors)
    validate_ssn(form.get("ssn"), errors)
    require_number(form, "requestedAmount", errors, label="Requested amount")

    if "employmentStatus" in form:
        validate_employment_status(form.get("employmentStatus"), errors)
    if "monthlyIncome" in form:
        require_number(form, "monthlyIncome", errors, label="Monthly income")
    if "existingDebt" in form:
        require_number(form, "existingDebt", errors, label="Existing debt")

    return errors
