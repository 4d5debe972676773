"""
Loan application client.

Collects an applicant's details, validates them locally, submits them to the
remote decision service and exposes the decision for rendering.

Key rule:
- Only `client.LoanApplicationClient` talks to the decision service.
- Renderers read `ApplicationController.view()`; they never touch the client.
"""

from .client import LoanApplicationClient, LoanSubmissionError, join_url
from .config import ClientSettings, load_client_settings
from .contracts import (
    ApplicationView,
    Approved,
    ControllerState,
    DecisionPayload,
    Denied,
    Failed,
    LoanOffer,
    Pending,
)
from .controller import ApplicationController
from .error_handler import ApiFailure, classify_failure
from .formatting import format_currency, format_rate, render_outcome
from .normalization import build_payload, strip_non_digits, to_number
from .validation import validate_form

__all__ = [
    # controller
    "ApplicationController", "ApplicationView", "ControllerState",
    # outcomes
    "Pending", "Approved", "Denied", "Failed", "DecisionPayload", "LoanOffer",
    # client
    "LoanApplicationClient", "LoanSubmissionError", "join_url",
    "ClientSettings", "load_client_settings",
    # errors
    "ApiFailure", "classify_failure",
    # helpers
    "validate_form", "build_payload", "strip_non_digits", "to_number",
    "format_currency", "format_rate", "render_outcome",
]
