"""Shared test fixtures."""

import pytest

from src.pw_hashing.domain.models import CostParameters

# Reference record with password "foo123"
KNOWN_HASH = (
    "$argon2id$v=19$m=4096,t=3,p=1"
    "$82XldKYgqAqher7EuFzPNw$O1Epnr+m1JYkgtWcgVLID39ro6He105HTFnE+SinJyM"
)


@pytest.fixture
def fast_params() -> CostParameters:
    """Smallest legal costs, so real Argon2id runs stay quick."""
    return CostParameters(
        memory_kib=64,
        iterations=1,
        parallelism=1,
        salt_length=16,
        key_length=32,
    )


@pytest.fixture
def known_hash() -> str:
    return KNOWN_HASH
