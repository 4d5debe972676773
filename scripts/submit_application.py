#!/usr/bin/env python3
"""
Submit one loan application to the decision service and print the result.

Reads LOAN_API_BASE_URL / LOAN_API_ENDPOINT from the environment (or .env),
or from the `loan_api` section of a YAML file passed with --config.

Usage (from repo root):
  python scripts/submit_application.py --name "Jane Doe" --address "123 Main St" \
      --email jane@example.com --phone 555-111-2222 --ssn 123-45-6789 --amount 25000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

from loan_portal.client import LoanApplicationClient
from loan_portal.config import load_client_settings
from loan_portal.contracts import Failed
from loan_portal.controller import ApplicationController
from loan_portal.formatting import render_outcome

# CLI option -> form field
FIELD_OPTIONS = {
    "name": "name",
    "address": "address",
    "email": "email",
    "phone": "phone",
    "ssn": "ssn",
    "amount": "requestedAmount",
    "employment_status": "employmentStatus",
    "monthly_income": "monthlyIncome",
    "existing_debt": "existingDebt",
}
EXTENDED_OPTIONS = ("employment_status", "monthly_income", "existing_debt")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Submit a loan application to the decision service")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with a loan_api section")
    parser.add_argument("--name", default="")
    parser.add_argument("--address", default="")
    parser.add_argument("--email", default="")
    parser.add_argument("--phone", default="", help="10 digits, punctuation allowed")
    parser.add_argument("--ssn", default="", help="9 or 10 digits, punctuation allowed")
    parser.add_argument("--amount", default="", help="Requested loan amount")
    parser.add_argument("--employment-status", default=None, choices=["EMPLOYED", "UNEMPLOYED"])
    parser.add_argument("--monthly-income", default=None)
    parser.add_argument("--existing-debt", default=None)
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


async def run(args: argparse.Namespace) -> int:
    settings = load_client_settings(args.config)
    extended = [FIELD_OPTIONS[opt] for opt in EXTENDED_OPTIONS if getattr(args, opt) is not None]
    controller = ApplicationController(LoanApplicationClient(settings), extended_fields=extended)

    for option, field in FIELD_OPTIONS.items():
        value: Optional[str] = getattr(args, option)
        if value is not None and field in controller.form:
            controller.edit(field, value)

    view = await controller.submit()
    if view.errors:
        print("Please correct the following fields:")
        for field, message in view.errors.items():
            print(f"  - {field}: {message}")
        return 2

    for line in render_outcome(view.outcome):
        print(line)
    return 1 if isinstance(view.outcome, Failed) else 0


def main() -> None:
    args = build_parser().parse_args()
    setup_logging(args.verbose)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
