#!/usr/bin/env python3
"""Live web portal probe.

Logs in with ``PORTAL_USERNAME`` / ``PORTAL_PASSWORD`` (or the command-line
overrides) and prints the session summary plus the requested records as
JSON.  Tokens and passwords are redacted in the output.

Examples::

    python scripts/portal_probe.py personal
    python scripts/portal_probe.py hostel --debug
    python scripts/portal_probe.py local-name --date 2024-03-15
"""

from __future__ import annotations

import argparse
import asyncio
import base64
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pywebportal import PortalClient, PortalConfig, PortalError  # noqa: E402
from pywebportal._crypto import decrypt_bytes, encode_date_sequence, generate_local_name  # noqa: E402
from pywebportal._redact import redact_for_log  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("action", choices=("login", "personal", "hostel", "local-name"))
    parser.add_argument("--username", help="Override PORTAL_USERNAME")
    parser.add_argument("--password", help="Override PORTAL_PASSWORD")
    parser.add_argument("--date", type=date.fromisoformat, help="Day for local-name (YYYY-MM-DD)")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def _dump(value: Any) -> None:
    print(json.dumps(redact_for_log(value), indent=2, ensure_ascii=False, default=str))


def _local_name_report(day: date | None) -> dict[str, Any]:
    value = generate_local_name(day)
    plaintext = decrypt_bytes(base64.b64decode(value)).decode("utf-8")
    return {"digest": encode_date_sequence(day), "plaintext": plaintext, "header": value}


async def _run(args: argparse.Namespace) -> int:
    if args.action == "local-name":
        _dump(_local_name_report(args.date))
        return 0

    overrides = {k: v for k, v in (("username", args.username), ("password", args.password)) if v}
    config = PortalConfig.from_env(**overrides)

    async with PortalClient(config) as client:
        session = await client.login()
        _dump(
            {
                "name": session.name,
                "enrollment_no": session.enrollment_no,
                "institute": session.institute,
                "expiry": session.expiry.isoformat(),
            }
        )
        if args.action == "personal":
            _dump(await client.get_personal_info())
        elif args.action == "hostel":
            _dump(await client.get_hostel_info())
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except PortalError as exc:
        logging.getLogger("portal_probe").error("%s: %s", type(exc).__name__, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
