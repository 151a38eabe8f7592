"""Tests for pw_hashing.infrastructure.kdf — Argon2id adapter and salt source."""

import pytest
from argon2.exceptions import HashingError as Argon2HashingError

from src.pw_common.errors import MalformedParametersError, RandomnessUnavailableError
from src.pw_hashing.domain.codec import b64decode_raw
from src.pw_hashing.infrastructure import kdf
from src.pw_hashing.infrastructure.kdf import derive_key, random_salt


class TestDeriveKey:
    def test_known_vector(self) -> None:
        key = derive_key(
            b"foo123",
            b64decode_raw("82XldKYgqAqher7EuFzPNw"),
            iterations=3,
            memory_kib=4096,
            parallelism=1,
            key_length=32,
        )
        assert key == b64decode_raw("O1Epnr+m1JYkgtWcgVLID39ro6He105HTFnE+SinJyM")

    def test_deterministic(self) -> None:
        args = (b"secret", b"saltsalt", 1, 64, 1, 32)
        assert derive_key(*args) == derive_key(*args)

    def test_output_length(self) -> None:
        assert len(derive_key(b"pw", b"saltsalt", 1, 64, 1, 48)) == 48

    def test_salt_changes_key(self) -> None:
        k1 = derive_key(b"pw", b"saltsalt", 1, 64, 1, 32)
        k2 = derive_key(b"pw", b"saltsalu", 1, 64, 1, 32)
        assert k1 != k2


class TestRandomSalt:
    def test_length(self) -> None:
        assert len(random_salt(32)) == 32

    def test_fresh_each_call(self) -> None:
        assert random_salt(16) != random_salt(16)

    def test_os_error_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def broken(n: int) -> bytes:
            raise OSError("getrandom failed")

        monkeypatch.setattr(kdf.os, "urandom", broken)
        with pytest.raises(RandomnessUnavailableError) as exc_info:
            random_salt(16)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_short_read_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(kdf.os, "urandom", lambda n: b"\x00" * (n - 1))
        with pytest.raises(RandomnessUnavailableError, match="got 15"):
            random_salt(16)


class TestDeriveKeyErrors:
    def test_library_error_becomes_malformed_parameters(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def refuse(**kwargs: object) -> bytes:
            raise Argon2HashingError("Memory allocation error")

        monkeypatch.setattr(kdf, "hash_secret_raw", refuse)
        with pytest.raises(MalformedParametersError) as exc_info:
            derive_key(b"pw", b"saltsalt", 1, 64, 1, 32)
        assert exc_info.value.message == "Memory allocation error"
        assert isinstance(exc_info.value.__cause__, Argon2HashingError)
