"""Client configuration for pywebportal."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pywebportal._constants import BASE_URL, DEFAULT_CLIENT_ID, STUDENT_MODULE, STUDENT_USER_TYPE
from pywebportal.exceptions import PortalConfigError
from pywebportal.models.captcha import Captcha


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class PortalConfig:
    """Client configuration.

    Parameters
    ----------
    username : str
        Portal enrollment number / username.
    password : str
        Portal password.
    base_url : str
        API base URL.
    user_type : str
        Login user type (``"S"`` for students).
    module_name : str
        Module requested at token generation.
    client_id : str
        Client identifier sent with data requests.
    captcha : Captcha
        CAPTCHA pair sent at pretoken check.
    request_timeout : float
        Total per-request timeout in seconds.
    relogin_on_expiry : bool
        Log in again once when the session has expired.
    """

    username: str = ""
    password: str = ""
    base_url: str = BASE_URL
    user_type: str = STUDENT_USER_TYPE
    module_name: str = STUDENT_MODULE
    client_id: str = DEFAULT_CLIENT_ID
    captcha: Captcha = dataclasses.field(default_factory=Captcha)
    request_timeout: float = 30.0
    relogin_on_expiry: bool = True

    def require_credentials(self) -> tuple[str, str]:
        """Return ``(username, password)`` or raise :class:`PortalConfigError`."""
        if not self.username or not self.password:
            raise PortalConfigError("username and password are required to log in")
        return self.username, self.password

    @classmethod
    def from_env(cls, **overrides: Any) -> PortalConfig:
        """Create configuration from environment variables.

        Reads ``PORTAL_USERNAME``, ``PORTAL_PASSWORD`` and optional
        ``PORTAL_*`` variables.  Explicit keyword arguments override
        environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PORTAL_USERNAME": "username",
            "PORTAL_PASSWORD": "password",
            "PORTAL_BASE_URL": "base_url",
            "PORTAL_CLIENT_ID": "client_id",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "captcha" not in overrides:
            captcha_kwargs: dict[str, str] = {}
            if env.get("PORTAL_CAPTCHA") is not None:
                captcha_kwargs["captcha"] = env["PORTAL_CAPTCHA"]
            if env.get("PORTAL_CAPTCHA_HIDDEN") is not None:
                captcha_kwargs["hidden"] = env["PORTAL_CAPTCHA_HIDDEN"]
            if captcha_kwargs:
                config_kwargs["captcha"] = Captcha(**captcha_kwargs)

        timeout_env = env.get("PORTAL_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise PortalConfigError(f"PORTAL_REQUEST_TIMEOUT must be a number, got {timeout_env!r}") from exc

        if "relogin_on_expiry" not in overrides:
            config_kwargs["relogin_on_expiry"] = _env_bool(env.get("PORTAL_RELOGIN_ON_EXPIRY"), True)

        captcha_override = overrides.get("captcha")
        if isinstance(captcha_override, dict):
            overrides["captcha"] = Captcha(**captcha_override)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
