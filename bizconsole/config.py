"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Values come from the process environment,
with a local .env file respected via python-dotenv.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()


@dataclass
class Settings:
    # Backend
    api_base_url: str = os.getenv("BIZ_API_BASE_URL", "http://localhost:8080/api/")
    api_token: Optional[str] = os.getenv("BIZ_API_TOKEN")
    company_id: Optional[str] = os.getenv("BIZ_COMPANY_ID")
    request_timeout: float = float(os.getenv("BIZ_REQUEST_TIMEOUT", "15"))

    # Dialogs: exit transition length; 0 settles synchronously
    exit_transition_ms: int = int(os.getenv("BIZ_EXIT_TRANSITION_MS", "300"))

    # Logging
    log_level: str = os.getenv("BIZ_LOG_LEVEL", "INFO")


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
