"""TOTP enrollment setup generator."""

import base64
from typing import Optional, Union
from urllib.parse import quote
from . import config
from .adapters import Base32Adapter, QRCodeAdapter, StdoutAdapter
from .errors import InvalidArgumentError
from .interfaces import IBase32Encoder, ILogSink, IQRGenerator, TotpSetup

ERROR_CORRECTION = "Q"
DATA_URI_PREFIX = "data:image/png;base64,"


class TotpSetupGenerator:
    """Builds manual keys and QR codes for authenticator enrollment."""

    def __init__(
        self,
        qr: Optional[IQRGenerator] = None,
        encoder: Optional[IBase32Encoder] = None,
        logger: Optional[ILogSink] = None
    ):
        self.qr = qr or QRCodeAdapter()
        self.encoder = encoder or Base32Adapter()
        self.logger = logger or StdoutAdapter()

    def generate_base64(
        self,
        issuer: str,
        account_identity: str,
        account_secret_key: Union[str, bytes],
        pixels_per_module: int = config.QR_PIXELS_PER_MODULE
    ) -> TotpSetup:
        """Return manual key plus a ``data:image/png;base64`` QR code."""
        return self._build_setup(
            issuer, account_identity, account_secret_key,
            pixels_per_module, want_image=True
        )

    def generate_url(
        self,
        issuer: str,
        account_identity: str,
        account_secret_key: Union[str, bytes]
    ) -> TotpSetup:
        """Return manual key plus the raw otpauth URL, for client-side QR."""
        return self._build_setup(
            issuer, account_identity, account_secret_key,
            config.QR_PIXELS_PER_MODULE, want_image=False
        )

    @staticmethod
    def build_provisioning_url(
        issuer: str, account_identity: str, encoded_secret: str
    ) -> str:
        """Format the otpauth URL.

        Field order is fixed; some authenticator apps are strict about it.
        Issuer and label are percent-encoded; the label keeps ``@`` and ``:``.
        """
        label = quote(account_identity, safe="@:")
        return (
            f"otpauth://totp/{label}"
            f"?secret={encoded_secret}&issuer={quote(issuer, safe='')}"
        )

    def _validate(self, **kwargs) -> None:
        """Reject None arguments (early return pattern)."""
        for name, value in kwargs.items():
            if value is None:
                self.logger.log("debug", f"Rejected setup request: {name} is None")
                raise InvalidArgumentError(name)

    def _build_setup(
        self,
        issuer: str,
        account_identity: str,
        account_secret_key: Union[str, bytes],
        pixels_per_module: int,
        want_image: bool
    ) -> TotpSetup:
        self._validate(
            issuer=issuer,
            account_identity=account_identity,
            account_secret_key=account_secret_key
        )
        if want_image and (
            isinstance(pixels_per_module, bool)
            or not isinstance(pixels_per_module, int)
            or pixels_per_module < 1
        ):
            raise InvalidArgumentError(
                "pixels_per_module", "must be a positive integer"
            )

        account_identity = "".join(account_identity.split())
        encoded_secret = self.encoder.encode(account_secret_key)
        url = self.build_provisioning_url(
            issuer, account_identity, encoded_secret
        )

        if not want_image:
            self.logger.log("debug", "Built URL setup")
            return TotpSetup(
                manual_setup_key=encoded_secret,
                qr_code_image_content=url
            )

        png = self.qr.generate(url, ERROR_CORRECTION, pixels_per_module)
        self.logger.log("debug", f"Built QR setup ({len(png)} bytes PNG)")
        return TotpSetup(
            manual_setup_key=encoded_secret,
            qr_code_image_base64=DATA_URI_PREFIX
            + base64.b64encode(png).decode('ascii')
        )
