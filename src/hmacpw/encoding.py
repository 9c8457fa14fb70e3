"""Record wire format: ``algorithm$salt$digest`` with URL-safe base64 fields."""

import base64
import binascii
import re
from typing import NamedTuple, Optional

from .errors import DecodeError, InvalidFormatError, UnsupportedAlgorithmError

ALGORITHM_ID = "hmac_sha256"
SEPARATOR = "$"
FIELD_COUNT = 3
DEFAULT_SALT_LENGTH = 32
MIN_SALT_LENGTH = 16
DIGEST_LENGTH = 32  # SHA-256 output
HASH_FORMAT = "algorithm$salt$hash"
ENCODING_NAME = "base64url"

# Padded URL-safe alphabet; '+' and '/' are rejected rather than silently accepted.
_B64URL_RE = re.compile(r"(?:[A-Za-z0-9_-]{4})*(?:[A-Za-z0-9_-]{2}==|[A-Za-z0-9_-]{3}=)?")


class Record(NamedTuple):
    algorithm: str
    salt: bytes
    digest: bytes


def b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii")


def b64decode(text: str, field: str) -> bytes:
    """Strictly decode one record field, raising DecodeError on anything malformed."""
    if not _B64URL_RE.fullmatch(text):
        raise DecodeError(field)
    try:
        data = base64.urlsafe_b64decode(text.encode("ascii"))
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(field) from exc
    # Non-zero trailing bits would let two spellings decode to the same bytes.
    if b64encode(data) != text:
        raise DecodeError(field)
    return data


def pack_record(salt: bytes, digest: bytes) -> str:
    return SEPARATOR.join((ALGORITHM_ID, b64encode(salt), b64encode(digest)))


def split_record(record: str) -> list[str]:
    """Split into fields and check the algorithm tag, without decoding."""
    parts = record.split(SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise InvalidFormatError(
            f"Expected {FIELD_COUNT} '{SEPARATOR}'-separated fields, got {len(parts)}"
        )
    if parts[0] != ALGORITHM_ID:
        raise UnsupportedAlgorithmError(parts[0], ALGORITHM_ID)
    return parts


def unpack_record(record: str) -> Record:
    algorithm, salt_b64, digest_b64 = split_record(record)
    salt = b64decode(salt_b64, "salt")
    digest = b64decode(digest_b64, "digest")
    return Record(algorithm, salt, digest)


def detect_algorithm(record: object) -> Optional[str]:
    """Return the algorithm tag if ``record`` looks like one of ours, else None."""
    if not isinstance(record, str) or not record:
        return None
    parts = record.split(SEPARATOR)
    if len(parts) == FIELD_COUNT and parts[0] == ALGORITHM_ID:
        return ALGORITHM_ID
    return None
