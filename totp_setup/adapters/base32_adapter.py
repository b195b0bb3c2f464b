"""Base32 encoder adapter."""

import base64
from typing import Union
from ..interfaces import IBase32Encoder


class Base32Adapter:
    """Adapter for RFC 4648 Base32, without trailing padding."""

    def encode(self, data: Union[str, bytes]) -> str:
        """Encode secret for manual entry and the otpauth secret field."""
        if isinstance(data, str):
            data = data.encode('utf-8')
        return base64.b32encode(data).decode('ascii').rstrip('=')
