"""Setup generator interface and result type."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class TotpSetup:
    """Enrollment data for an authenticator app.

    Exactly one of ``qr_code_image_base64`` (image variant) and
    ``qr_code_image_content`` (URL variant) is set.
    """
    manual_setup_key: str
    qr_code_image_base64: Optional[str] = None
    qr_code_image_content: Optional[str] = None

    @property
    def is_image(self) -> bool:
        return self.qr_code_image_base64 is not None


class ISetupGenerator(Protocol):
    """Interface for TOTP enrollment generation."""

    def generate_base64(
        self,
        issuer: str,
        account_identity: str,
        account_secret_key: str,
        pixels_per_module: int = 5
    ) -> TotpSetup:
        """Build setup with a base64 PNG QR code."""
        ...

    def generate_url(
        self, issuer: str, account_identity: str, account_secret_key: str
    ) -> TotpSetup:
        """Build setup with the raw provisioning URL."""
        ...
