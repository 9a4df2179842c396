"""Student information endpoints.

Endpoints:
  - /studentpersinfo/getstudent-personalinformation
  - /myhostelallocationdetail/gethostelallocationdetail
"""

from __future__ import annotations

from typing import Any

from pywebportal._api._common import post_authenticated
from pywebportal._constants import HOSTEL_INFO_ENDPOINT, PERSONAL_INFO_ENDPOINT
from pywebportal._transport import Transport
from pywebportal.config import PortalConfig
from pywebportal.session import Session


async def fetch_personal_info(config: PortalConfig, session: Session, transport: Transport) -> Any:
    """Fetch the student's personal information record."""
    # "clinetid" is the portal's spelling.
    payload = {"clinetid": config.client_id, "instituteid": session.institute_id}
    return await post_authenticated(
        endpoint=PERSONAL_INFO_ENDPOINT,
        session=session,
        transport=transport,
        payload=payload,
    )


async def fetch_hostel_info(session: Session, transport: Transport) -> Any:
    """Fetch the student's hostel allocation."""
    return await post_authenticated(
        endpoint=HOSTEL_INFO_ENDPOINT,
        session=session,
        transport=transport,
        payload={"instituteid": session.institute_id},
    )
