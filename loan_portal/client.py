"""
Decision service HTTP client.

Purpose:
- Sends a validated loan application to the decision service
- Returns the decision payload exactly as the service sent it

Implementation notes:
- Uses httpx for async requests, one attempt per call, transport default timeout
- Every failure goes through the error classifier; callers only ever see
  LoanSubmissionError carrying a display-ready message

Important:
- Keep this client as the ONLY place where decision service HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from loan_portal.config import ClientSettings
from loan_portal.error_handler import ApiFailure, classify_failure
from loan_portal.normalization import build_payload

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class LoanSubmissionError(RuntimeError):
    """Submission failed; ``message`` is safe to show to the applicant."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def join_url(base_url: str, path: str) -> str:
    if not base_url or not base_url.strip():
        raise ValueError("Decision service base URL is not configured.")
    return f"{base_url.strip().rstrip('/')}/{(path or '').strip().lstrip('/')}"


def _masked(payload: Dict[str, Any]) -> Dict[str, Any]:
    safe = dict(payload)
    if safe.get("ssn"):
        safe["ssn"] = "***" + str(safe["ssn"])[-4:]
    return safe


class LoanApplicationClient:
    def __init__(
        self,
        settings: ClientSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = join_url(settings.base_url, settings.endpoint_path)
        self._transport = transport

    async def submit(self, form: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post the normalized application and return the decoded decision.
        The form must already have passed validate_form.
        """
        logger.info("Submitting loan application to %s", self.url)
        try:
            payload = build_payload(form)
            logger.debug("Request payload: %s", _masked(payload))
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.url, json=payload, headers=JSON_HEADERS)
                response.raise_for_status()
                logger.info("Received decision response: status=%s", response.status_code)
                try:
                    return response.json()
                except ValueError as exc:
                    failure = ApiFailure(status=response.status_code, code="INVALID_BODY", cause=exc)
                    raise LoanSubmissionError(classify_failure(failure)) from exc
        except LoanSubmissionError:
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise LoanSubmissionError(classify_failure(ApiFailure.from_exception(exc))) from exc
        except Exception as exc:
            failure = ApiFailure(code=type(exc).__name__, cause=exc)
            raise LoanSubmissionError(classify_failure(failure)) from exc

