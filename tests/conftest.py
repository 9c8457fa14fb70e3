"""Pytest fixtures for hmacpw tests.

Provides a shared secret key, a default hasher and a freshly issued record
so individual tests only deal with what they are checking.
"""

from pathlib import Path

import pytest

from hmacpw import CredentialHasher

TEST_PASSWORD = "mySecurePassword123"
TEST_SECRET_KEY = "my-super-secret-key-at-least-32-chars-long!!"


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Project root directory."""
    return Path(__file__).resolve().parent.parent


@pytest.fixture
def hasher() -> CredentialHasher:
    return CredentialHasher()


@pytest.fixture
def record(hasher: CredentialHasher) -> str:
    """A record for TEST_PASSWORD under TEST_SECRET_KEY."""
    return hasher.hash(TEST_PASSWORD, TEST_SECRET_KEY)
