import hashlib
import hmac
import re
import secrets
from typing import Optional

# scrypt work factor; stored values only carry salt and key, so these are fixed
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
SALT_BYTES = 16
KEY_BYTES = 64

_HEX_BYTES = re.compile(r"(?:[0-9a-fA-F]{2})+")


def _derive_key(password: str, salt: bytes) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8", "surrogatepass"),
        salt=salt,
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_BYTES,
    )


def hash_password(password: str) -> str:
    """
    Hash a password for storage

    Args:
        password: Plaintext password

    Returns:
        "<saltHex>:<derivedHex>" with a fresh random salt
    """
    salt = secrets.token_bytes(SALT_BYTES)
    derived = _derive_key(password, salt)
    return f"{salt.hex()}:{derived.hex()}"


def verify_password(password: Optional[str], stored: Optional[str]) -> bool:
    """
    Check a password against a value produced by hash_password.

    Malformed stored values never verify and never raise.
    """
    if not isinstance(password, str) or not stored or not isinstance(stored, str):
        return False

    parts = stored.split(":")
    if len(parts) != 2:
        return False
    salt_hex, key_hex = parts
    # bytes.fromhex skips whitespace, so require strict hex pairs first
    if not _HEX_BYTES.fullmatch(salt_hex) or not _HEX_BYTES.fullmatch(key_hex):
        return False

    salt = bytes.fromhex(salt_hex)
    expected = bytes.fromhex(key_hex)

    derived = _derive_key(password, salt)
    return hmac.compare_digest(derived, expected)
