"""
Loan application contracts.

Defines the shapes shared by the validator, the HTTP client and the controller:
- the form field names (wire names, camelCase as the decision service expects)
- the decision payload returned by the decision service
- the submission outcome variants exposed to renderers

The decision service owns the underwriting logic; these models only describe
what comes back so the controller can tell an approval from a denial.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Form fields
# ---------------------------------------------------------------------------

CORE_FIELDS: Tuple[str, ...] = ("name", "address", "email", "phone", "ssn", "requestedAmount")
EXTENDED_FIELDS: Tuple[str, ...] = ("employmentStatus", "monthlyIncome", "existingDebt")
NUMERIC_FIELDS: Tuple[str, ...] = ("requestedAmount", "monthlyIncome", "existingDebt")
DIGIT_FIELDS: Tuple[str, ...] = ("phone", "ssn")

EMPLOYMENT_STATUSES: Tuple[str, ...] = ("EMPLOYED", "UNEMPLOYED")

ApplicationForm = Dict[str, str]
FieldErrorMap = Dict[str, str]


def empty_form(extended_fields: Tuple[str, ...] = ()) -> ApplicationForm:
    """Blank draft holding the core fields plus any configured extended fields."""
    unknown = [f for f in extended_fields if f not in EXTENDED_FIELDS]
    if unknown:
        raise ValueError(f"Unknown extended field(s): {', '.join(unknown)}")
    return {name: "" for name in CORE_FIELDS + tuple(extended_fields)}


# ---------------------------------------------------------------------------
# Decision payload
# ---------------------------------------------------------------------------

class Decision(str, Enum):
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class LoanOffer(BaseModel):
    total_loan_amount: float = Field(alias="totalLoanAmount")
    interest_rate: float = Field(alias="interestRate")  # fraction, 0.075 == 7.5%
    term_months: Union[int, float] = Field(alias="termMonths")
    monthly_payment: float = Field(alias="monthlyPayment")


class DecisionPayload(BaseModel):
    """Decision service response body."""

    decision: Decision
    credit_lines: Union[int, float] = Field(alias="creditLines")
    reason: Optional[str] = None
    offer: Optional[LoanOffer] = None


# ---------------------------------------------------------------------------
# Controller state and outcomes
# ---------------------------------------------------------------------------

class ControllerState(str, Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    SUBMITTING = "SUBMITTING"
    SETTLED = "SETTLED"


@dataclass(frozen=True)
class Pending:
    pass


@dataclass(frozen=True)
class Approved:
    credit_lines: Union[int, float]
    offer: LoanOffer
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Denied:
    credit_lines: Union[int, float]
    reason: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Failed:
    message: str


SubmissionOutcome = Union[Pending, Approved, Denied, Failed]


@dataclass(frozen=True)
class ApplicationView:
    """Read-only snapshot handed to renderers."""

    state: ControllerState
    form: ApplicationForm
    errors: FieldErrorMap
    outcome: Optional[SubmissionOutcome]
    can_submit: bool


__all__ = [
    "CORE_FIELDS",
    "EXTENDED_FIELDS",
    "NUMERIC_FIELDS",
    "DIGIT_FIELDS",
    "EMPLOYMENT_STATUSES",
    "ApplicationForm",
    "FieldErrorMap",
    "empty_form",
    "Decision",
    "LoanOffer",
    "DecisionPayload",
    "ControllerState",
    "Pending",
    "Approved",
    "Denied",
    "Failed",
    "SubmissionOutcome",
    "ApplicationView",
]
