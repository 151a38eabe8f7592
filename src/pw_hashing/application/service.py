"""Password hashing service: generate, decode, compare.

Every call is independent: no caches, no shared buffers. The only shared
resource is the OS random source behind ``random_salt``.
"""

import hmac
import logging

from config.settings import Settings, settings
from src.pw_common.errors import (
    HashingError,
    PasswordMismatchError,
    RandomnessUnavailableError,
)
from src.pw_hashing.domain.codec import decode_hash, encode_hash
from src.pw_hashing.domain.models import (
    DEFAULT_COST_PARAMETERS,
    CostParameters,
    DecodedHash,
)
from src.pw_hashing.infrastructure.kdf import (
    KeyDerivationFunction,
    RandomSource,
    derive_key,
    random_salt,
)

logger = logging.getLogger(__name__)


def _to_bytes(password: bytes | str) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return password


class Argon2idHasher:
    """Stateless service — instantiate once, reuse across threads.

    ``default_params`` applies whenever a call passes ``params=None``.
    """

    def __init__(
        self,
        kdf: KeyDerivationFunction = derive_key,
        random_source: RandomSource = random_salt,
        default_params: CostParameters = DEFAULT_COST_PARAMETERS,
    ) -> None:
        default_params.validate()
        self._kdf = kdf
        self._random_source = random_source
        self._default_params = default_params

    @classmethod
    def from_settings(
        cls,
        app_settings: Settings,
        kdf: KeyDerivationFunction = derive_key,
        random_source: RandomSource = random_salt,
    ) -> "Argon2idHasher":
        return cls(
            kdf=kdf,
            random_source=random_source,
            default_params=CostParameters.from_settings(app_settings),
        )

    @property
    def default_params(self) -> CostParameters:
        return self._default_params

    def generate_from_password(
        self,
        password: bytes | str,
        params: CostParameters | None = None,
    ) -> str:
        """Hash ``password`` under a fresh random salt and return the canonical string.

        ``params=None`` applies this hasher's ``default_params``.
        """
        if params is None:
            params = self._default_params
        params.validate()

        salt = self._random_source(params.salt_length)
        if len(salt) != params.salt_length:
            raise RandomnessUnavailableError(
                f"requested {params.salt_length} bytes, got {len(salt)}"
            )

        key = self._kdf(
            _to_bytes(password),
            salt,
            params.iterations,
            params.memory_kib,
            params.parallelism,
            params.key_length,
        )
        logger.debug(
            "Generated argon2id hash: m=%d t=%d p=%d salt_len=%d key_len=%d",
            params.memory_kib,
            params.iterations,
            params.parallelism,
            params.salt_length,
            params.key_length,
        )
        return encode_hash(params, salt, key)

    def decode_hash(self, encoded: str) -> DecodedHash:
        return decode_hash(encoded)

    def compare_hash_and_password(self, encoded: str, password: bytes | str) -> None:
        """Return None on match; raise PasswordMismatchError otherwise.

        Decode errors propagate unchanged, so a caller can tell a wrong
        password apart from a corrupt or unsupported record.
        """
        decoded = decode_hash(encoded)
        params = decoded.params

        candidate = self._kdf(
            _to_bytes(password),
            decoded.salt,
            params.iterations,
            params.memory_kib,
            params.parallelism,
            params.key_length,
        )

        # Fixed-time; lengths always agree since key_length comes from the record
        if not hmac.compare_digest(candidate, decoded.key):
            logger.debug("Password verification failed: kind=PASSWORD_MISMATCH")
            raise PasswordMismatchError()

    def verify_password(self, encoded: str, password: bytes | str) -> bool:
        """Boolean form of compare_hash_and_password.

        Only a mismatch maps to False; malformed records still raise.
        """
        try:
            self.compare_hash_and_password(encoded, password)
        except HashingError as exc:
            if exc.is_mismatch:
                return False
            raise
        return True

    def needs_rehash(self, encoded: str, params: CostParameters | None = None) -> bool:
        """True when the stored record was made with parameters other than ``params``."""
        if params is None:
            params = self._default_params
        return decode_hash(encoded).params != params


_default_hasher = Argon2idHasher.from_settings(settings)


def generate_from_password(password: bytes | str, params: CostParameters | None = None) -> str:
    return _default_hasher.generate_from_password(password, params)


def compare_hash_and_password(encoded: str, password: bytes | str) -> None:
    _default_hasher.compare_hash_and_password(encoded, password)


def verify_password(encoded: str, password: bytes | str) -> bool:
    return _default_hasher.verify_password(encoded, password)


def needs_rehash(encoded: str, params: CostParameters | None = None) -> bool:
    return _default_hasher.needs_rehash(encoded, params)
