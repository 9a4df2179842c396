from __future__ import annotations

import base64
import binascii
import json
from datetime import date, datetime

import pytest
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from pywebportal._crypto.aes import decrypt_bytes, encrypt_bytes
from pywebportal._crypto.envelope import open_payload, seal_payload
from pywebportal._crypto.keys import derive_key
from pywebportal._crypto.local_name import generate_local_name, random_char_sequence
from pywebportal.exceptions import DecryptionError, EnvelopeError, KeyDerivationError

FRIDAY = date(2024, 3, 15)
SATURDAY = date(2024, 3, 16)


class _Clock:
    """Stand-in for ``datetime`` inside the date digest module."""

    current = datetime(2024, 3, 15, 23, 59, 59)


def _install_clock(monkeypatch: pytest.MonkeyPatch) -> type[_Clock]:
    class _ClockDatetime(datetime):
        @classmethod
        def now(cls, tz=None):  # type: ignore[override]
            return _Clock.current

    monkeypatch.setattr("pywebportal._crypto.date_seq.datetime", _ClockDatetime)
    return _Clock


# ---------------------------------------------------------------------------
# Key derivation
# ---------------------------------------------------------------------------


def test_derive_key_wraps_digest_in_fixed_prefix_and_suffix() -> None:
    key = derive_key(FRIDAY)
    assert key == b"qa8y1025534ty1pn"
    assert len(key) == 16


def test_derive_key_rejects_wrong_length(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pywebportal._crypto.keys.encode_date_sequence", lambda _date=None: "123")
    with pytest.raises(KeyDerivationError, match="16 bytes"):
        derive_key(FRIDAY)


# ---------------------------------------------------------------------------
# Payload cipher
# ---------------------------------------------------------------------------


def test_encrypt_bytes_matches_aes_cbc_with_static_iv() -> None:
    plaintext = b'{"username":"21103000"}'
    padder = padding.PKCS7(128).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(b"qa8y1025534ty1pn"), modes.CBC(b"dcek9wb8frty1pnm")).encryptor()
    expected = encryptor.update(padded) + encryptor.finalize()

    assert encrypt_bytes(plaintext, date=FRIDAY) == expected


@pytest.mark.parametrize("plaintext", [b"", b"a", b"x" * 16, "héllo wörld".encode(), bytes(range(256))])
def test_encrypt_then_decrypt_same_day_round_trips(plaintext: bytes) -> None:
    ciphertext = encrypt_bytes(plaintext)
    assert len(ciphertext) % 16 == 0
    assert len(ciphertext) > len(plaintext)
    assert decrypt_bytes(ciphertext) == plaintext


def test_decrypt_with_other_day_key_fails() -> None:
    ciphertext = encrypt_bytes(b'{"instituteid":"11IN1902J000001"}', date=FRIDAY)
    with pytest.raises(DecryptionError):
        decrypt_bytes(ciphertext, date=SATURDAY)


def test_key_is_rederived_on_every_call(monkeypatch: pytest.MonkeyPatch) -> None:
    clock = _install_clock(monkeypatch)
    clock.current = datetime(2024, 3, 15, 23, 59, 59)
    ciphertext = encrypt_bytes(b'{"instituteid":"11IN1902J000001"}')
    assert decrypt_bytes(ciphertext, date=FRIDAY) == b'{"instituteid":"11IN1902J000001"}'

    clock.current = datetime(2024, 3, 16, 0, 0, 1)
    with pytest.raises(DecryptionError):
        decrypt_bytes(ciphertext)


@pytest.mark.parametrize("ciphertext", [b"", b"short", b"x" * 17])
def test_decrypt_rejects_unaligned_ciphertext(ciphertext: bytes) -> None:
    with pytest.raises(DecryptionError, match="multiple of 16"):
        decrypt_bytes(ciphertext)


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "21103000", "usertype": "S", "captcha": {"captcha": "phw5n", "hidden": "gmBctEffdSg="}},
        [1, 2.5, None, True, "नमस्ते"],
        "plain string",
        0,
    ],
)
def test_seal_then_open_round_trips(payload: object) -> None:
    envelope = seal_payload(payload)
    assert isinstance(envelope, str)
    base64.b64decode(envelope, validate=True)
    assert open_payload(envelope) == payload


def test_seal_payload_uses_compact_json() -> None:
    envelope = seal_payload({"a": 1, "b": [1, 2]}, date=FRIDAY)
    raw = decrypt_bytes(base64.b64decode(envelope), date=FRIDAY)
    assert raw == b'{"a":1,"b":[1,2]}'


def test_seal_payload_rejects_unserializable() -> None:
    with pytest.raises(EnvelopeError, match="JSON-serializable"):
        seal_payload({"when": object()})


def test_open_payload_wraps_base64_error() -> None:
    with pytest.raises(EnvelopeError) as excinfo:
        open_payload("not base64!!")
    assert isinstance(excinfo.value.__cause__, binascii.Error)


def test_open_payload_wraps_decryption_error() -> None:
    with pytest.raises(EnvelopeError) as excinfo:
        open_payload(base64.b64encode(b"abc").decode())
    assert isinstance(excinfo.value.__cause__, DecryptionError)


def test_open_payload_wraps_json_error() -> None:
    envelope = base64.b64encode(encrypt_bytes(b"not json")).decode()
    with pytest.raises(EnvelopeError) as excinfo:
        open_payload(envelope)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


# ---------------------------------------------------------------------------
# LocalName
# ---------------------------------------------------------------------------


def test_random_char_sequence_length_and_alphabet() -> None:
    value = random_char_sequence(64)
    assert len(value) == 64
    assert value.isalnum()
    assert value.isascii()


def test_generate_local_name_embeds_date_digest() -> None:
    value = generate_local_name(FRIDAY)
    plaintext = decrypt_bytes(base64.b64decode(value)).decode("utf-8")
    assert len(plaintext) == 16
    assert plaintext[4:11] == "1025534"
    assert plaintext[:4].isalnum()
    assert plaintext[11:].isalnum()


def test_generate_local_name_is_fresh_per_call() -> None:
    assert generate_local_name() != generate_local_name()


def test_generate_local_name_uses_random_noise(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pywebportal._crypto.local_name.secrets.choice", lambda _alphabet: "Z")
    value = generate_local_name(FRIDAY)
    assert decrypt_bytes(base64.b64decode(value)) == b"ZZZZ1025534ZZZZZ"
