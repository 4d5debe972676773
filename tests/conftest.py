"""Pytest fixtures for loan application tests."""

import pytest

from loan_portal.config import ClientSettings


@pytest.fixture
def settings():
    return ClientSettings(base_url="http://localhost:8080/", endpoint_path="/api/loan-applications/apply")


@pytest.fixture
def valid_form():
    return {
        "name": "Jane Doe",
        "address": "123 Main St",
        "email": "jane@example.com",
        "phone": "555-111-2222",
        "ssn": "123-45-6789",
        "requestedAmount": "25000",
    }


@pytest.fixture
def approved_payload():
    return {
        "decision": "APPROVED",
        "creditLines": 3,
        "offer": {
            "totalLoanAmount": 25000,
            "interestRate": 0.075,
            "termMonths": 24,
            "monthlyPayment": 1080.5,
        },
    }


@pytest.fixture
def denied_payload():
    return {"decision": "DENIED", "creditLines": 0, "reason": "Insufficient credit history"}
