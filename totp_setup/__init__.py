"""Enrollment data (manual key, QR code) for TOTP authenticator apps."""

from .errors import InvalidArgumentError, TotpSetupError
from .generator import TotpSetupGenerator
from .interfaces import TotpSetup

__all__ = [
    'TotpSetupGenerator',
    'TotpSetup',
    'TotpSetupError',
    'InvalidArgumentError',
]
