"""Cryptographic primitives for web portal payload obfuscation."""

from __future__ import annotations

from pywebportal._crypto.aes import decrypt_bytes, encrypt_bytes
from pywebportal._crypto.date_seq import encode_date_sequence
from pywebportal._crypto.envelope import open_payload, seal_payload
from pywebportal._crypto.keys import derive_key
from pywebportal._crypto.local_name import generate_local_name

__all__ = [
    "decrypt_bytes",
    "derive_key",
    "encode_date_sequence",
    "encrypt_bytes",
    "generate_local_name",
    "open_payload",
    "seal_payload",
]
