"""pywebportal - Async Python client for the college web portal API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pywebportal")
except PackageNotFoundError:
    __version__ = "0+local"
from pywebportal.client import PortalClient
from pywebportal.config import PortalConfig
from pywebportal.exceptions import (
    DecryptionError,
    EnvelopeError,
    KeyDerivationError,
    MalformedSessionError,
    PortalApiError,
    PortalAuthenticationError,
    PortalConfigError,
    PortalCryptoError,
    PortalError,
    PortalSessionExpiredError,
    PortalTransportError,
)
from pywebportal.models import Captcha, Institute
from pywebportal.session import Session

__all__ = [
    "__version__",
    "Captcha",
    "DecryptionError",
    "EnvelopeError",
    "Institute",
    "KeyDerivationError",
    "MalformedSessionError",
    "PortalApiError",
    "PortalAuthenticationError",
    "PortalClient",
    "PortalConfig",
    "PortalConfigError",
    "PortalCryptoError",
    "PortalError",
    "PortalSessionExpiredError",
    "PortalTransportError",
    "Session",
]
