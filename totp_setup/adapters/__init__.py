"""Adapter implementations for TOTP setup generation."""

from .qr_code_adapter import QRCodeAdapter
from .base32_adapter import Base32Adapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'Base32Adapter',
    'StdoutAdapter',
]
