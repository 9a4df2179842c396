"""Authenticated session derived from a login response."""

from __future__ import annotations

import base64
import binascii
import json
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pywebportal._crypto.local_name import generate_local_name
from pywebportal.exceptions import MalformedSessionError
from pywebportal.models.institute import Institute


def _b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def decode_token_claims(token: Any) -> dict[str, Any]:
    """Return the claims object carried in the middle segment of *token*.

    The signature is not verified; the portal is the only party that can.

    Raises
    ------
    MalformedSessionError
        If *token* is not a three-segment dot-separated string whose middle
        segment base64url-decodes to a JSON object.
    """
    if not isinstance(token, str):
        raise MalformedSessionError("token must be a string")
    parts = token.split(".")
    if len(parts) != 3:
        raise MalformedSessionError(f"token must have 3 dot-separated segments (got {len(parts)})")
    if not parts[1]:
        raise MalformedSessionError("token claims segment is empty")
    try:
        claims = json.loads(_b64url_decode(parts[1]).decode("utf-8"))
    except (binascii.Error, ValueError) as exc:
        raise MalformedSessionError(f"token claims are not base64url JSON: {exc}") from exc
    if not isinstance(claims, dict):
        raise MalformedSessionError("token claims must be a JSON object")
    return claims


def _expiry_from_claims(claims: Mapping[str, Any]) -> datetime:
    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise MalformedSessionError(f"token 'exp' claim must be numeric (got {exp!r})")
    try:
        return datetime.fromtimestamp(exp, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedSessionError(f"token 'exp' claim out of range: {exp!r}") from exc


class Session(BaseModel):
    """Immutable session state after a successful login.

    Build instances with :meth:`from_login_response`.  Expiry is never
    enforced here; check :attr:`is_expired` before use.

    Parameters
    ----------
    token : str
        Bearer token sent in the ``Authorization`` header.
    expiry : datetime
        UTC time taken from the token's ``exp`` claim.
    institute : Any
        Label of the active (first listed) institute.
    institute_id : Any
        Identifier of the active institute.
    member_id, user_id, client_id, member_type, name, enrollment_no : Any
        Account fields copied verbatim from ``regdata`` (``None`` when absent).
    raw_response : dict
        The full login response.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    token: str
    expiry: datetime
    institute: Any
    institute_id: Any
    member_id: Any = None
    user_id: Any = None
    client_id: Any = None
    member_type: Any = None
    name: Any = None
    enrollment_no: Any = None
    raw_response: dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_login_response(cls, resp: Any) -> Session:
        """Parse the ``response`` object of the token endpoint.

        Raises
        ------
        MalformedSessionError
            If ``regdata`` is missing, ``institutelist`` is empty, or the
            token cannot be parsed.  No partial session is ever returned.
        """
        if not isinstance(resp, Mapping):
            raise MalformedSessionError("login response must be a JSON object")
        regdata = resp.get("regdata")
        if not isinstance(regdata, Mapping):
            raise MalformedSessionError("login response missing 'regdata'")

        institutes = regdata.get("institutelist")
        if not isinstance(institutes, list) or not institutes:
            raise MalformedSessionError("login response has an empty 'institutelist'")
        try:
            active = Institute.model_validate(institutes[0])
        except ValidationError as exc:
            raise MalformedSessionError(f"first institute must carry 'label' and 'value': {exc}") from exc

        token = regdata.get("token")
        expiry = _expiry_from_claims(decode_token_claims(token))

        return cls(
            token=token,
            expiry=expiry,
            institute=active.label,
            institute_id=active.value,
            member_id=regdata.get("memberid"),
            user_id=regdata.get("userid"),
            client_id=regdata.get("clientid"),
            member_type=regdata.get("membertype"),
            name=regdata.get("name"),
            enrollment_no=regdata.get("enrollmentno"),
            raw_response=dict(resp),
        )

    def get_headers(self) -> dict[str, str]:
        """Headers for one authenticated request.

        A new ``LocalName`` is generated on every call; never reuse the
        result across requests.
        """
        return {
            "Authorization": f"Bearer {self.token}",
            "LocalName": generate_local_name(),
        }

    @property
    def is_expired(self) -> bool:
        """Whether the token's ``exp`` claim has passed."""
        return datetime.now(tz=UTC) >= self.expiry
