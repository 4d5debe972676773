"""
Loan application controller - form draft, validation and submission lifecycle
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Sequence

from pydantic import ValidationError

from loan_portal.client import LoanSubmissionError
from loan_portal.contracts import (
    ApplicationForm,
    ApplicationView,
    Approved,
    ControllerState,
    Decision,
    DecisionPayload,
    Denied,
    Failed,
    FieldErrorMap,
    Pending,
    SubmissionOutcome,
    empty_form,
)
from loan_portal.error_handler import UNEXPECTED_ERROR_MESSAGE
from loan_portal.validation import validate_form

logger = logging.getLogger(__name__)


class SubmissionClient(Protocol):
    async def submit(self, form: Dict[str, Any]) -> Dict[str, Any]:
        ...


def outcome_from_decision(data: Any) -> SubmissionOutcome:
    """Turn a decision payload into Approved/Denied, or Failed when it is unusable."""
    try:
        parsed = DecisionPayload(**data)
    except (TypeError, ValidationError) as exc:
        logger.error("Malformed decision payload %r: %s", data, exc)
        return Failed(UNEXPECTED_ERROR_MESSAGE)

    if parsed.decision == Decision.APPROVED:
        if parsed.offer is None:
            logger.error("Approved decision without an offer: %r", data)
            return Failed(UNEXPECTED_ERROR_MESSAGE)
        return Approved(credit_lines=parsed.credit_lines, offer=parsed.offer, raw=dict(data))
    return Denied(credit_lines=parsed.credit_lines, reason=parsed.reason, raw=dict(data))


class ApplicationController:
    """Owns one application draft and drives it through validation and submission.

    Only one request may be in flight at a time. Each reset starts a new
    generation; a response belonging to an older generation is dropped so it
    cannot overwrite the cleared form.
    """

    def __init__(
        self,
        client: SubmissionClient,
        extended_fields: Sequence[str] = (),
        clear_on_success: bool = False,
    ):
        self.client = client
        self.extended_fields = tuple(extended_fields)
        self.clear_on_success = clear_on_success

        self.form: ApplicationForm = empty_form(self.extended_fields)
        self.errors: FieldErrorMap = {}
        self.state = ControllerState.IDLE
        self.outcome: Optional[SubmissionOutcome] = None

        self._generation = 0
        self._in_flight = False

    @property
    def can_submit(self) -> bool:
        return not self._in_flight

    def view(self) -> ApplicationView:
        return ApplicationView(
            state=self.state,
            form=dict(self.form),
            errors=dict(self.errors),
            outcome=self.outcome,
            can_submit=self.can_submit,
        )

    def edit(self, field: str, value: str) -> None:
        """Update one field; clears that field's error without re-validating."""
        if field not in self.form:
            raise ValueError(f"Unknown form field: {field}")
        self.form[field] = value
        self.errors.pop(field, None)

    def reset(self) -> ApplicationView:
        self._generation += 1
        self.form = empty_form(self.extended_fields)
        self.errors = {}
        self.outcome = None
        self.state = ControllerState.IDLE
        return self.view()

    async def submit(self) -> ApplicationView:
        if self._in_flight:
            logger.warning("Submit ignored: a submission is already in flight")
            return self.view()

        self.outcome = None
        self.state = ControllerState.VALIDATING
        self.errors = validate_form(self.form)
        if self.errors:
            logger.info("Application has %d invalid field(s): %s", len(self.errors), sorted(self.errors))
            self.state = ControllerState.IDLE
            return self.view()

        generation = self._generation
        self.state = ControllerState.SUBMITTING
        self.outcome = Pending()
        self._in_flight = True
        try:
            data = await self.client.submit(dict(self.form))
        except LoanSubmissionError as exc:
            outcome: SubmissionOutcome = Failed(exc.message)
        else:
            outcome = outcome_from_decision(data)
        finally:
            self._in_flight = False

        if generation != self._generation:
            logger.warning("Discarding submission result that arrived after a reset")
            return self.view()

        self.outcome = outcome
        self.state = ControllerState.SETTLED
        if self.clear_on_success and not isinstance(outcome, Failed):
            self.form = empty_form(self.extended_fields)
        return self.view()
