"""Maps submission failures to the single message shown to the applicant."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

TIMEOUT = "TIMEOUT"

UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred. Please try again."


@dataclass(frozen=True)
class ApiFailure:
    """What is known about a failed request: status, transport code, server message."""

    status: Optional[int] = None
    code: Optional[str] = None
    message: Optional[str] = None
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ApiFailure":
        if isinstance(exc, httpx.HTTPStatusError):
            return cls(status=exc.response.status_code, message=_server_message(exc.response), cause=exc)
        if isinstance(exc, httpx.TimeoutException):
            return cls(code=TIMEOUT, cause=exc)
        return cls(code=type(exc).__name__, cause=exc)


def _server_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return None


Rule = Tuple[Callable[[ApiFailure], bool], Callable[[ApiFailure], str]]


def _fixed(message: str) -> Callable[[ApiFailure], str]:
    return lambda failure: message


# First match wins.
CLASSIFICATION_RULES: List[Rule] = [
    (lambda f: bool(f.message), lambda f: f.message),
    (lambda f: f.status == 400, _fixed("Your application contains invalid data. Please review and try again.")),
    (lambda f: f.status == 401, _fixed("You're not authorized to perform this action.")),
    (lambda f: f.status == 404, _fixed("Requested resource not found.")),
    (lambda f: f.status == 500, _fixed("Server error occurred. Please try again later.")),
    (lambda f: f.code == TIMEOUT, _fixed("Request timed out. Please check your connection.")),
    (lambda f: f.status is None, _fixed("Network error — unable to connect to the server.")),
]


def classify_failure(failure: ApiFailure) -> str:
    if failure.cause is not None:
        logger.error("[API Error] %r: %s", failure, failure.cause, exc_info=failure.cause)
    else:
        logger.error("[API Error] %r", failure)
    for matches, message in CLASSIFICATION_RULES:
        if matches(failure):
            return message(failure)
    return UNEXPECTED_ERROR_MESSAGE
