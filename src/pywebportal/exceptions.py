"""Custom exception hierarchy for pywebportal."""

from __future__ import annotations


class PortalError(Exception):
    """Base exception for all pywebportal errors."""


class PortalConfigError(PortalError):
    """Invalid or missing configuration."""


class PortalCryptoError(PortalError):
    """Encryption or decryption failure."""


class KeyDerivationError(PortalCryptoError):
    """The derived day key does not fit the cipher.

    This can only happen through a logic defect in key derivation, never
    through caller input.
    """


class DecryptionError(PortalCryptoError):
    """Ciphertext could not be decrypted (bad length, padding or key)."""


class EnvelopeError(PortalCryptoError):
    """Payload envelope could not be sealed or opened."""


class MalformedSessionError(PortalError):
    """Login response is missing required fields or carries a bad token."""


class PortalTransportError(PortalError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class PortalApiError(PortalError):
    """Portal answered with a failure status (application-level error)."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        errors: list[str] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.errors = list(errors or [])
        super().__init__(message)


class PortalAuthenticationError(PortalApiError):
    """Login failed."""


class PortalSessionExpiredError(PortalAuthenticationError):
    """Session token expired or was rejected by the portal.

    Raised before a call when the token's ``exp`` claim has passed, or when
    an authenticated endpoint answers HTTP 401.  The client catches this
    internally to log in again once.
    """
