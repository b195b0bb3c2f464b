"""Base32 encoder interface (adapter pattern)."""

from typing import Protocol, Union


class IBase32Encoder(Protocol):
    """Interface for Base32 encoding of shared secrets."""

    def encode(self, data: Union[str, bytes]) -> str:
        """Encode secret as RFC 4648 Base32 text."""
        ...
