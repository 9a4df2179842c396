"""Shared helpers for portal endpoint modules.

This module centralizes the two request shapes the portal accepts:
- pre-authentication requests with a sealed envelope body
- authenticated requests with a plain JSON body and bearer headers

It is internal to pywebportal and may change at any time.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pywebportal._crypto.envelope import seal_payload
from pywebportal._crypto.local_name import generate_local_name
from pywebportal._transport import Transport
from pywebportal.exceptions import PortalSessionExpiredError, PortalTransportError
from pywebportal.session import Session


async def post_sealed(
    *,
    endpoint: str,
    transport: Transport,
    payload: Mapping[str, Any],
) -> Any:
    """Post a sealed envelope with only the ``LocalName`` header."""
    body = seal_payload(dict(payload))
    return await transport.post(endpoint, body, {"LocalName": generate_local_name()})


async def post_authenticated(
    *,
    endpoint: str,
    session: Session,
    transport: Transport,
    payload: Mapping[str, Any],
) -> Any:
    """Post a plain JSON body with fresh bearer headers.

    Raises
    ------
    PortalSessionExpiredError
        If the session has already expired or the portal answers HTTP 401.
    """
    if session.is_expired:
        raise PortalSessionExpiredError(
            f"{endpoint}: session expired at {session.expiry.isoformat()}",
            endpoint=endpoint,
        )
    body = json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=False)
    try:
        return await transport.post(endpoint, body, session.get_headers())
    except PortalTransportError as exc:
        if exc.status_code == 401:
            raise PortalSessionExpiredError(
                f"{endpoint}: token rejected by portal",
                endpoint=endpoint,
            ) from exc
        raise
