"""Error types for TOTP setup generation."""


class TotpSetupError(Exception):
    """Base error for this package."""


class InvalidArgumentError(TotpSetupError, ValueError):
    """Raised when a required argument is missing or unusable."""

    def __init__(self, name: str, reason: str = "must not be None"):
        self.name = name
        super().__init__(f"{name} {reason}")
