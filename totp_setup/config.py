"""Configuration management."""

import os
from .errors import TotpSetupError


def _int_env(name: str, default: str) -> int:
    """Read an integer environment variable."""
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise TotpSetupError(
            f"{name} must be an integer, got {value!r}"
        ) from None


# QR rendering
QR_PIXELS_PER_MODULE = _int_env("TOTP_QR_PIXELS_PER_MODULE", "5")
QR_BORDER = _int_env("TOTP_QR_BORDER", "4")

# Logging
LOG_LEVEL = os.getenv("TOTP_LOG_LEVEL", "warn")
