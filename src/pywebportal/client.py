"""High-level async client for the web portal API."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import aiohttp

from pywebportal._api import student as _student_api
from pywebportal._api.login import login as _login
from pywebportal._transport import PortalTransport
from pywebportal.config import PortalConfig
from pywebportal.exceptions import PortalError, PortalSessionExpiredError
from pywebportal.session import Session

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class PortalClient:
    """Async client for the web portal API.

    Usage::

        async with PortalClient(config) as client:
            await client.login()
            info = await client.get_personal_info()
    """

    def __init__(
        self,
        config: PortalConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: PortalTransport | None = None
        self._session: Session | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> PortalClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = PortalTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session | None:
        """The current session, if logged in."""
        return self._session

    async def login(self) -> Session:
        """Authenticate with the configured credentials."""
        transport = self._require_transport()
        self._session = await _login(self._config, transport)
        return self._session

    async def ensure_session(self) -> Session:
        """Return an active session, logging in if missing or expired.

        Raises
        ------
        PortalSessionExpiredError
            If the cached session has expired and ``relogin_on_expiry`` is
            disabled.
        """
        if self._session is not None:
            if not self._session.is_expired:
                return self._session
            if not self._config.relogin_on_expiry:
                raise PortalSessionExpiredError(
                    f"Session expired at {self._session.expiry.isoformat()}",
                )
        return await self.login()

    def invalidate_session(self) -> None:
        """Force session invalidation (next call will log in again)."""
        self._session = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> PortalTransport:
        if self._transport is None:
            raise PortalError("Client not initialized. Use 'async with PortalClient(...) as client:'")
        return self._transport

    async def _call_with_relogin(self, fn: Callable[[Session], Awaitable[T]]) -> T:
        """Run an API call, logging in again once on session expiry."""
        session = await self.ensure_session()
        try:
            return await fn(session)
        except PortalSessionExpiredError:
            if not self._config.relogin_on_expiry:
                raise
            _logger.debug("Session rejected, logging in again")
            self.invalidate_session()
            return await fn(await self.ensure_session())

    # ------------------------------------------------------------------
    # Data endpoints
    # ------------------------------------------------------------------

    async def get_personal_info(self) -> Any:
        """Return the student's personal information ``response`` object."""
        transport = self._require_transport()
        return await self._call_with_relogin(
            lambda session: _student_api.fetch_personal_info(self._config, session, transport)
        )

    async def get_hostel_info(self) -> Any:
        """Return the student's hostel allocation ``response`` object."""
        transport = self._require_transport()
        return await self._call_with_relogin(lambda session: _student_api.fetch_hostel_info(session, transport))
