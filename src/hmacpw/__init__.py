"""Salted HMAC-SHA256 password hashing with a server-held secret key."""

import logging

from .crypto import load_secret_key
from .encoding import (
    ALGORITHM_ID,
    DEFAULT_SALT_LENGTH,
    MIN_SALT_LENGTH,
    SEPARATOR,
    Record,
    detect_algorithm,
    pack_record,
    unpack_record,
)
from .errors import (
    DecodeError,
    EmptyPasswordError,
    EmptyRecordError,
    EmptySecretKeyError,
    FormatError,
    HasherError,
    InvalidFormatError,
    InvalidSaltLengthError,
    InvalidTextError,
    RandomnessError,
    UnsupportedAlgorithmError,
    ValidationError,
)
from .hasher import CredentialHasher, algorithm_info, hash_password, verify_password

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHM_ID",
    "DEFAULT_SALT_LENGTH",
    "MIN_SALT_LENGTH",
    "SEPARATOR",
    "CredentialHasher",
    "DecodeError",
    "EmptyPasswordError",
    "EmptyRecordError",
    "EmptySecretKeyError",
    "FormatError",
    "HasherError",
    "InvalidFormatError",
    "InvalidSaltLengthError",
    "InvalidTextError",
    "RandomnessError",
    "Record",
    "UnsupportedAlgorithmError",
    "ValidationError",
    "algorithm_info",
    "detect_algorithm",
    "hash_password",
    "load_secret_key",
    "pack_record",
    "unpack_record",
    "verify_password",
]
