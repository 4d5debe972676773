"""Plain-text rendering of a submission outcome."""

from __future__ import annotations

from typing import Any, List, Optional

from loan_portal.contracts import Approved, Denied, Failed, Pending, SubmissionOutcome


def format_currency(value: Any) -> str:
    """$ + thousands separators + two decimals; blank for missing values."""
    if value is None or value == "":
        return ""
    return f"${float(value):,.2f}"


def format_rate(value: Any) -> str:
    """Fractional rate as a percentage, 0.075 -> "7.5%"."""
    return f"{float(value) * 100:.1f}%"


def render_outcome(outcome: Optional[SubmissionOutcome]) -> List[str]:
    if outcome is None:
        return []
    if isinstance(outcome, Pending):
        return ["Processing..."]
    if isinstance(outcome, Failed):
        return [f"Error: {outcome.message}"]
    if isinstance(outcome, Denied):
        return [
            "❌ Denied",
            f"Credit Lines: {outcome.credit_lines}",
            f"Reason: {outcome.reason or 'No reason given'}",
        ]
    if isinstance(outcome, Approved):
        offer = outcome.offer
        return [
            "✅ Approved",
            f"Credit Lines: {outcome.credit_lines}",
            f"Total Loan Amount: {format_currency(offer.total_loan_amount)}",
            f"Interest Rate: {format_rate(offer.interest_rate)}",
            f"Term: {offer.term_months} months",
            f"Monthly Payment: {format_currency(offer.monthly_payment)}",
        ]
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")
