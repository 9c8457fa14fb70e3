#!/usr/bin/env python3
"""Demo for hmacpw: hash a password, verify it, and show the algorithm metadata."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from hmacpw import DEFAULT_SALT_LENGTH, CredentialHasher, detect_algorithm, load_secret_key

SECRET_KEY_ENV = "HMACPW_SECRET_KEY"


def _pp(label: str, value: object) -> None:
    print(f"\n→ {label}")
    print(json.dumps(value, indent=2))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="hmacpw demo")
    parser.add_argument("--password", default="mySecurePassword123")
    parser.add_argument("--wrong-password", default="wrongPassword456")
    parser.add_argument("--secret-key", default=None, help=f"defaults to ${SECRET_KEY_ENV}")
    parser.add_argument("--secret-key-file", type=Path, default=None)
    parser.add_argument("--salt-length", type=int, default=DEFAULT_SALT_LENGTH)
    parser.add_argument("--verify", metavar="RECORD", default=None,
                        help="verify --password against an existing record instead of hashing")
    parser.add_argument("--info", action="store_true", help="print algorithm metadata and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def _secret_key(args: argparse.Namespace) -> bytes:
    if args.secret_key_file is not None:
        return load_secret_key(args.secret_key_file)
    if args.secret_key is not None:
        return args.secret_key.encode("utf-8")
    # Empty values fall through to the hasher's own validation
    return os.environ.get(SECRET_KEY_ENV, "my-super-secret-key-at-least-32-chars-long!!").encode("utf-8")


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    hasher = CredentialHasher(salt_length=args.salt_length)
    if args.info:
        _pp("algorithm_info", hasher.algorithm_info())
        return

    secret = _secret_key(args)

    if args.verify is not None:
        _pp("verify", {"matched": hasher.verify(args.password, args.verify, secret)})
        return

    record = hasher.hash(args.password, secret)
    _pp("hash", {"record": record, "algorithm": detect_algorithm(record)})
    _pp("verify (correct password)", {"matched": hasher.verify(args.password, record, secret)})
    _pp("verify (wrong password)", {"matched": hasher.verify(args.wrong_password, record, secret)})

    print("\nDone.")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
