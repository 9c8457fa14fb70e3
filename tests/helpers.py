"""Test helpers for building and altering records."""

from hmacpw.encoding import SEPARATOR, b64encode, unpack_record


def fields(record: str) -> list[str]:
    return record.split(SEPARATOR)


def flip_byte(data: bytes, index: int) -> bytes:
    """Return ``data`` with one byte XOR-ed so it is guaranteed to differ."""
    out = bytearray(data)
    out[index] ^= 0x01
    return bytes(out)


def with_salt(record: str, salt: bytes) -> str:
    algorithm, _, digest = fields(record)
    return SEPARATOR.join((algorithm, b64encode(salt), digest))


def with_digest(record: str, digest: bytes) -> str:
    algorithm, salt, _ = fields(record)
    return SEPARATOR.join((algorithm, salt, b64encode(digest)))


def tamper_salt(record: str, index: int) -> str:
    return with_salt(record, flip_byte(unpack_record(record).salt, index))


def tamper_digest(record: str, index: int) -> str:
    return with_digest(record, flip_byte(unpack_record(record).digest, index))
