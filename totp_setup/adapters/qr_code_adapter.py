"""QR code generator adapter."""

import io
import qrcode
from .. import config
from ..errors import InvalidArgumentError
from ..interfaces import IQRGenerator

ERROR_CORRECTION_LEVELS = {
    'L': qrcode.constants.ERROR_CORRECT_L,
    'M': qrcode.constants.ERROR_CORRECT_M,
    'Q': qrcode.constants.ERROR_CORRECT_Q,
    'H': qrcode.constants.ERROR_CORRECT_H,
}


class QRCodeAdapter:
    """Adapter for QR code generation."""

    def __init__(self, border: int = config.QR_BORDER):
        self.border = border

    def generate(
        self, data: str, error_correction: str = "Q", box_size: int = 5
    ) -> bytes:
        """Generate QR code PNG from text."""
        level = ERROR_CORRECTION_LEVELS.get(error_correction.upper())
        if level is None:
            raise InvalidArgumentError(
                "error_correction", f"unknown level {error_correction!r}"
            )

        qr = qrcode.QRCode(
            version=None,
            box_size=box_size,
            border=self.border,
            error_correction=level
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()
