"""Login flow.

Endpoints:
  - /token/pretoken-check
  - /token/generate-token1
"""

from __future__ import annotations

import logging
from typing import Any

from pywebportal._api._common import post_sealed
from pywebportal._constants import PRETOKEN_ENDPOINT, TOKEN_ENDPOINT
from pywebportal._redact import redact_for_log
from pywebportal._transport import Transport
from pywebportal.config import PortalConfig
from pywebportal.exceptions import MalformedSessionError, PortalAuthenticationError
from pywebportal.session import Session

_logger = logging.getLogger(__name__)


def build_pretoken_payload(config: PortalConfig, username: str) -> dict[str, Any]:
    """Build the plaintext body for the pretoken check."""
    return {
        "username": username,
        "usertype": config.user_type,
        "captcha": config.captcha.to_payload(),
    }


def build_token_payload(config: PortalConfig, pretoken_response: Any, password: str) -> dict[str, Any]:
    """Turn the pretoken ``response`` into the token request body.

    ``rejectedData`` is dropped, the module name and password are added.

    Raises
    ------
    PortalAuthenticationError
        If the pretoken response is not a JSON object.
    """
    if not isinstance(pretoken_response, dict):
        raise PortalAuthenticationError(
            "Pretoken check returned no usable response",
            endpoint=PRETOKEN_ENDPOINT,
        )
    payload = {k: v for k, v in pretoken_response.items() if k != "rejectedData"}
    payload["Modulename"] = config.module_name
    payload["passwordotpvalue"] = password
    return payload


async def login(config: PortalConfig, transport: Transport) -> Session:
    """Run the two-stage login and return a new :class:`Session`.

    Raises
    ------
    PortalConfigError
        If credentials are missing.
    PortalAuthenticationError
        If the token response cannot be turned into a session.
    """
    username, password = config.require_credentials()

    pretoken = await post_sealed(
        endpoint=PRETOKEN_ENDPOINT,
        transport=transport,
        payload=build_pretoken_payload(config, username),
    )
    _logger.debug("Pretoken response parsed=%s", redact_for_log(pretoken))

    token_response = await post_sealed(
        endpoint=TOKEN_ENDPOINT,
        transport=transport,
        payload=build_token_payload(config, pretoken, password),
    )

    try:
        session = Session.from_login_response(token_response)
    except MalformedSessionError as exc:
        raise PortalAuthenticationError(
            f"Login failed: {exc}",
            endpoint=TOKEN_ENDPOINT,
        ) from exc

    _logger.debug("Logged in member=%s expiry=%s", session.member_id, session.expiry.isoformat())
    return session
