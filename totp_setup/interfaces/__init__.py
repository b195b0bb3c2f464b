"""Interface definitions for TOTP setup adapters."""

from .i_setup_generator import ISetupGenerator, TotpSetup
from .i_qr_generator import IQRGenerator
from .i_base32_encoder import IBase32Encoder
from .i_log_sink import ILogSink

__all__ = [
    'ISetupGenerator',
    'TotpSetup',
    'IQRGenerator',
    'IBase32Encoder',
    'ILogSink',
]
