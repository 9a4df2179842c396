"""Per-request ``LocalName`` header value."""

from __future__ import annotations

import base64
import secrets
from datetime import date as _date

from pywebportal._constants import LOCAL_NAME_ALPHABET
from pywebportal._crypto.aes import encrypt_bytes
from pywebportal._crypto.date_seq import encode_date_sequence


def random_char_sequence(n: int) -> str:
    """Return *n* characters drawn uniformly from ``0-9a-zA-Z``.

    The portal only uses these as anti-replay noise; cryptographic strength
    is not required.
    """
    return "".join(secrets.choice(LOCAL_NAME_ALPHABET) for _ in range(n))


def generate_local_name(date: _date | None = None) -> str:
    """Build a fresh encrypted ``LocalName`` header value.

    The 16-character plaintext is four random characters, the 7-character
    digest of *date*, then five random characters.  It is always encrypted
    with today's key and base64 encoded.
    """
    plaintext = random_char_sequence(4) + encode_date_sequence(date) + random_char_sequence(5)
    return base64.b64encode(encrypt_bytes(plaintext.encode("utf-8"))).decode("ascii")
