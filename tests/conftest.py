from __future__ import annotations

import base64
import json
from collections.abc import Callable
from typing import Any

import pytest

FUTURE_EXP = 4102444800  # 2100-01-01T00:00:00Z


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def build_token(claims: Any) -> str:
    header = _b64url(json.dumps({"alg": "HS256", "typ": "JWT"}).encode())
    body = _b64url(json.dumps(claims).encode())
    return f"{header}.{body}.c2lnbmF0dXJl"


def build_login_response(token: str | None = None, **regdata_overrides: Any) -> dict[str, Any]:
    regdata: dict[str, Any] = {
        "institutelist": [{"label": "JIIT", "value": "11IN1902J000001"}],
        "memberid": "JIIT2100001",
        "userid": "USER2100001",
        "token": token if token is not None else build_token({"sub": "21103000", "exp": FUTURE_EXP}),
        "clientid": "JIIT",
        "membertype": "S",
        "name": "TEST STUDENT",
        "enrollmentno": "21103000",
    }
    regdata.update(regdata_overrides)
    return {"regdata": regdata}


@pytest.fixture
def make_token() -> Callable[[Any], str]:
    return build_token


@pytest.fixture
def login_response() -> Callable[..., dict[str, Any]]:
    return build_login_response
