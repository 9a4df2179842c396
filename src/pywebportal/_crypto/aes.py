"""AES-128-CBC with the portal's static IV.

The key is re-derived from the calendar day on every call, so ciphertext
produced just before midnight does not decrypt just after it.
"""

from __future__ import annotations

from datetime import date as _date

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from pywebportal._constants import STATIC_IV
from pywebportal._crypto.keys import derive_key
from pywebportal.exceptions import DecryptionError, PortalCryptoError

_BLOCK_BYTES = 16


def _cipher(date: _date | None) -> Cipher:
    return Cipher(algorithms.AES(derive_key(date)), modes.CBC(STATIC_IV))


def encrypt_bytes(plaintext: bytes, *, date: _date | None = None) -> bytes:
    """Encrypt *plaintext* under the day key with PKCS#7 padding.

    Parameters
    ----------
    plaintext : bytes
        Data to encrypt.
    date : datetime.date, optional
        Day whose key to use.  Defaults to today.

    Returns
    -------
    bytes
        Raw ciphertext, a multiple of 16 bytes long.
    """
    padder = padding.PKCS7(128).padder()
    padded = padder.update(bytes(plaintext)) + padder.finalize()
    try:
        encryptor = _cipher(date).encryptor()
        return encryptor.update(padded) + encryptor.finalize()
    except PortalCryptoError:
        raise
    except Exception as exc:
        raise PortalCryptoError(f"AES encryption failed: {exc}") from exc


def decrypt_bytes(ciphertext: bytes, *, date: _date | None = None) -> bytes:
    """Decrypt *ciphertext* under the day key and strip PKCS#7 padding.

    Raises
    ------
    DecryptionError
        If the ciphertext is empty, not block aligned, carries invalid
        padding, or is otherwise rejected by the cipher.
    """
    data = bytes(ciphertext)
    if not data or len(data) % _BLOCK_BYTES != 0:
        raise DecryptionError(f"ciphertext length must be a non-zero multiple of {_BLOCK_BYTES} (got {len(data)})")
    try:
        decryptor = _cipher(date).decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = padding.PKCS7(128).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except PortalCryptoError:
        raise
    except Exception as exc:
        raise DecryptionError(f"AES decryption failed: {exc}") from exc
