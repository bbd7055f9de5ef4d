"""Configuration constants and environment lookups.

Centralizes the model, endpoint and generation parameters, and hides how
the credential is found.
"""

import os
from collections.abc import Callable

# Endpoint
DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 60.0  # Seconds, applied by the HTTP transport

# Generation parameters (fixed, not caller-supplied)
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_K = 40
DEFAULT_TOP_P = 0.95
DEFAULT_MAX_OUTPUT_TOKENS = 2048

# Environment variables
API_KEY_ENV = "GEMINI_API_KEY"
API_KEY_FALLBACK_ENV = "API_KEY"
MODEL_ENV = "GEMINI_MODEL"
BASE_URL_ENV = "GEMINI_BASE_URL"
TIMEOUT_ENV = "GEMREST_TIMEOUT"

CredentialSource = Callable[[], str | None]


def env_credential(
    variable: str = API_KEY_ENV,
    fallback: str | None = API_KEY_FALLBACK_ENV,
) -> CredentialSource:
    """Build a credential source that reads the environment on every call.

    Args:
        variable: Primary environment variable
        fallback: Secondary variable consulted when the primary is unset or empty

    Returns:
        Zero-argument callable returning the credential or None
    """
    def _read() -> str | None:
        value = os.getenv(variable)
        if not value and fallback:
            value = os.getenv(fallback)
        return value or None

    return _read


def get_model() -> str:
    """Model identifier from GEMINI_MODEL, or the default."""
    return os.getenv(MODEL_ENV) or DEFAULT_MODEL


def get_base_url() -> str:
    """API root from GEMINI_BASE_URL, or the default."""
    return (os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")


def get_timeout() -> float:
    """Transport timeout from GEMREST_TIMEOUT. Falls back to the default if invalid."""
    raw = os.getenv(TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT
