"""Argon2id primitive and secure randomness.

The memory-hard function itself comes from ``argon2-cffi``; this module only
adapts its raw API to the argument order used by the hasher.
"""

import os
from typing import Protocol

from argon2.exceptions import HashingError as Argon2HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from src.pw_common.errors import MalformedParametersError, RandomnessUnavailableError


class KeyDerivationFunction(Protocol):
    def __call__(
        self,
        password: bytes,
        salt: bytes,
        iterations: int,
        memory_kib: int,
        parallelism: int,
        key_length: int,
    ) -> bytes: ...


class RandomSource(Protocol):
    def __call__(self, length: int) -> bytes: ...


def derive_key(
    password: bytes,
    salt: bytes,
    iterations: int,
    memory_kib: int,
    parallelism: int,
    key_length: int,
) -> bytes:
    """Run Argon2id. Deterministic for fixed inputs; CPU and memory bound.

    Costs argon2 refuses at run time (e.g. memory it cannot allocate) raise
    MalformedParametersError.
    """
    try:
        return hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=iterations,
            memory_cost=memory_kib,
            parallelism=parallelism,
            hash_len=key_length,
            type=Type.ID,
            version=ARGON2_VERSION,
        )
    except Argon2HashingError as exc:
        raise MalformedParametersError(str(exc)) from exc


def random_salt(length: int) -> bytes:
    """Read ``length`` bytes from the OS CSPRNG. No weaker fallback."""
    try:
        salt = os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailableError(str(exc)) from exc
    if len(salt) != length:
        raise RandomnessUnavailableError(f"requested {length} bytes, got {len(salt)}")
    return salt
