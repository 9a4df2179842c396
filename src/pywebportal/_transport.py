"""HTTP transport for the web portal API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pywebportal._redact import redact_for_log
from pywebportal.config import PortalConfig
from pywebportal.exceptions import PortalApiError, PortalTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`PortalTransport`) concrete.
    """

    async def post(self, endpoint: str, body: str, headers: Mapping[str, str]) -> Any: ...


def _status_errors(body: Mapping[str, Any]) -> list[str] | None:
    """Return the error list when the body declares failure, else ``None``."""
    status = body.get("status")
    if not isinstance(status, Mapping):
        return None
    if str(status.get("responseStatus", "")).lower() != "failure":
        return None
    errors = status.get("errors")
    if isinstance(errors, list):
        return [str(e) for e in errors]
    return [str(errors)] if errors else []


class PortalTransport:
    """POSTs pre-serialized bodies and unwraps the ``response`` field."""

    def __init__(self, config: PortalConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def post(self, endpoint: str, body: str, headers: Mapping[str, str]) -> Any:
        """Send *body* to *endpoint* and return the decoded ``response`` field.

        The body is sent verbatim with ``Content-Type: application/json``,
        even when it is a sealed envelope rather than a JSON object.

        Raises
        ------
        PortalTransportError
            On network failure, non-200 status, invalid JSON or a missing
            ``response`` field.
        PortalApiError
            When the portal reports ``responseStatus == "Failure"``.
        """
        request_headers: dict[str, str] = {"Content-Type": "application/json", **headers}
        url = f"{self._config.base_url}{endpoint}"
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("POST %s", url)

        try:
            async with self._http.post(url, data=body, headers=request_headers, timeout=timeout) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise PortalTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except PortalTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as exc:
            raise PortalTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            body_json = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PortalTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                endpoint=endpoint,
            ) from exc

        if not isinstance(body_json, dict):
            raise PortalTransportError(f"Unexpected body type from {endpoint}", endpoint=endpoint)

        errors = _status_errors(body_json)
        if errors is not None:
            raise PortalApiError(
                f"{endpoint} failed: {'; '.join(errors) or 'no details'}",
                endpoint=endpoint,
                errors=errors,
            )

        if "response" not in body_json:
            raise PortalTransportError(
                f"Missing 'response' field from {endpoint}",
                endpoint=endpoint,
            )

        _logger.debug("Response from %s: %s", endpoint, redact_for_log(body_json["response"]))
        return body_json["response"]
