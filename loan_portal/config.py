"""
Configuration loader for the decision service client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

BASE_URL_ENV = "LOAN_API_BASE_URL"
ENDPOINT_ENV = "LOAN_API_ENDPOINT"


class ClientSettings(BaseModel):
    """Where loan applications are posted"""

    base_url: str  # e.g. http://localhost:8080
    endpoint_path: str = "api/loan-applications/apply"

    @field_validator("base_url")
    @classmethod
    def _base_url_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("base_url must not be blank")
        return v.strip()


def load_client_settings(config_path: Optional[Path] = None) -> ClientSettings:
    """
    Load and validate client settings

    Values come from the optional YAML file (``loan_api`` section), then the
    LOAN_API_BASE_URL / LOAN_API_ENDPOINT environment variables, which win.
    A .env file in the working directory is loaded first.

    Args:
        config_path: Optional path to a YAML config file

    Returns:
        Validated ClientSettings object

    Raises:
        FileNotFoundError: If an explicit config file doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    load_dotenv(find_dotenv(usecwd=True))

    data: Dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        data.update(raw.get("loan_api") or {})

    if os.getenv(BASE_URL_ENV):
        data["base_url"] = os.environ[BASE_URL_ENV]
    if os.getenv(ENDPOINT_ENV):
        data["endpoint_path"] = os.environ[ENDPOINT_ENV]

    try:
        settings = ClientSettings(**data)
    except ValidationError as e:
        logger.error(f"Client settings validation failed: {e}")
        raise
    logger.info(f"Loaded client settings: base_url={settings.base_url}")
    return settings
