"""Primitives: secure salt draw, HMAC-SHA256 digest, constant-time compare."""

import hashlib
import hmac
import logging
from pathlib import Path
from typing import Union

from nacl.bindings import sodium_memcmp
from nacl.exceptions import CryptoError
from nacl.utils import random as random_bytes

from .encoding import MIN_SALT_LENGTH
from .errors import (
    EmptySecretKeyError,
    InvalidSaltLengthError,
    InvalidTextError,
    RandomnessError,
)

logger = logging.getLogger(__name__)

BytesLike = Union[str, bytes]


def to_bytes(value: BytesLike, name: str) -> bytes:
    """UTF-8 encode text; pass bytes through."""
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidTextError(name) from exc
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be str or bytes, got {type(value).__name__}")


def check_salt_length(salt_length: object) -> int:
    # bool is an int subclass but never a meaningful length
    if isinstance(salt_length, bool) or not isinstance(salt_length, int):
        raise InvalidSaltLengthError(salt_length, MIN_SALT_LENGTH)
    if salt_length < MIN_SALT_LENGTH:
        raise InvalidSaltLengthError(salt_length, MIN_SALT_LENGTH)
    return salt_length


def generate_salt(salt_length: int) -> bytes:
    """Draw ``salt_length`` bytes from the OS CSPRNG via PyNaCl. Never falls back, never retries."""
    try:
        salt = random_bytes(salt_length)
    except (CryptoError, OSError, RuntimeError) as exc:
        logger.warning("Secure random source failed: %s", type(exc).__name__)
        raise RandomnessError("Failed to generate salt") from exc
    if len(salt) != salt_length:
        logger.warning("Secure random source returned %d of %d bytes", len(salt), salt_length)
        raise RandomnessError(f"Secure random source returned {len(salt)} of {salt_length} bytes")
    return salt


def compute_digest(password: bytes, salt: bytes, secret_key: bytes) -> bytes:
    """HMAC-SHA256 keyed by ``secret_key`` over ``password || salt``."""
    mac = hmac.new(secret_key, digestmod=hashlib.sha256)
    mac.update(password)
    mac.update(salt)
    return mac.digest()


def digests_equal(expected: bytes, actual: bytes) -> bool:
    """Fixed-time comparison; unequal lengths compare false without short-circuiting."""
    return sodium_memcmp(expected, actual)


def load_secret_key(path: Union[str, Path]) -> bytes:
    """Read a secret key file. A single trailing newline is stripped."""
    raw = Path(path).read_bytes()
    if raw.endswith(b"\r\n"):
        raw = raw[:-2]
    elif raw.endswith(b"\n"):
        raw = raw[:-1]
    if not raw:
        raise EmptySecretKeyError()
    return raw
