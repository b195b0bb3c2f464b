"""QR code generator interface (adapter pattern)."""

from typing import Protocol


class IQRGenerator(Protocol):
    """Interface for QR code generation."""

    def generate(
        self, data: str, error_correction: str = "Q", box_size: int = 5
    ) -> bytes:
        """Generate QR code PNG from text."""
        ...
