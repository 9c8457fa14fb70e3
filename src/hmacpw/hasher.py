"""Credential hasher: salted HMAC-SHA256 records bound to a server-held secret key."""

import logging
from typing import Any, Dict, Optional

from .crypto import (
    BytesLike,
    check_salt_length,
    compute_digest,
    digests_equal,
    generate_salt,
    to_bytes,
)
from .encoding import (
    ALGORITHM_ID,
    DEFAULT_SALT_LENGTH,
    DIGEST_LENGTH,
    ENCODING_NAME,
    HASH_FORMAT,
    MIN_SALT_LENGTH,
    pack_record,
    unpack_record,
)
from .errors import (
    EmptyPasswordError,
    EmptyRecordError,
    EmptySecretKeyError,
    FormatError,
)

logger = logging.getLogger(__name__)


def _require(value: BytesLike, name: str, error: type) -> bytes:
    data = to_bytes(value, name)
    if not data:
        raise error()
    return data


class CredentialHasher:
    """Hashes and verifies passwords. Holds no mutable state; safe to share across threads."""

    def __init__(self, salt_length: int = DEFAULT_SALT_LENGTH):
        self.salt_length = check_salt_length(salt_length)

    def __repr__(self) -> str:
        return f"CredentialHasher(salt_length={self.salt_length})"

    def hash(
        self, password: BytesLike, secret_key: BytesLike, salt_length: Optional[int] = None,
    ) -> str:
        """Return ``hmac_sha256$salt$digest`` for ``password``.

        Every call draws a fresh salt, so identical inputs give different records.
        All arguments are validated before the random source is touched.
        """
        pw = _require(password, "password", EmptyPasswordError)
        key = _require(secret_key, "secret_key", EmptySecretKeyError)
        length = check_salt_length(self.salt_length if salt_length is None else salt_length)

        salt = generate_salt(length)
        digest = compute_digest(pw, salt, key)
        logger.debug("Hashed credential with %d-byte salt", length)
        return pack_record(salt, digest)

    def verify(self, password: BytesLike, record: str, secret_key: BytesLike) -> bool:
        """Check ``password`` against ``record``.

        Returns False for any mismatch (wrong password, wrong key, altered salt
        or digest). Raises only for unusable input: empty arguments, a record
        that is not three fields, a foreign algorithm tag or invalid base64.
        """
        pw = _require(password, "password", EmptyPasswordError)
        key = _require(secret_key, "secret_key", EmptySecretKeyError)
        if not isinstance(record, str):
            raise TypeError(f"record must be str, got {type(record).__name__}")
        if not record:
            raise EmptyRecordError()

        try:
            parsed = unpack_record(record)
        except FormatError as exc:
            logger.warning("Rejected credential record: %s", exc)
            raise

        matched = digests_equal(parsed.digest, compute_digest(pw, parsed.salt, key))
        logger.debug("Credential verification %s", "matched" if matched else "failed")
        return matched

    @staticmethod
    def algorithm_info() -> Dict[str, Any]:
        """Static description of the scheme, for diagnostics only."""
        return {
            "algorithm": ALGORITHM_ID,
            "hash_function": "SHA-256",
            "hmac": True,
            "default_salt_length": DEFAULT_SALT_LENGTH,
            "min_salt_length": MIN_SALT_LENGTH,
            "digest_length": DIGEST_LENGTH,
            "hash_format": HASH_FORMAT,
            "encoding": ENCODING_NAME,
        }


_default_hasher = CredentialHasher()


def hash_password(
    password: BytesLike, secret_key: BytesLike, salt_length: int = DEFAULT_SALT_LENGTH,
) -> str:
    return _default_hasher.hash(password, secret_key, salt_length)


def verify_password(password: BytesLike, record: str, secret_key: BytesLike) -> bool:
    return _default_hasher.verify(password, record, secret_key)


def algorithm_info() -> Dict[str, Any]:
    return CredentialHasher.algorithm_info()
