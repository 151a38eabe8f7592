"""Domain models for pw_hashing — frozen dataclasses plus range checks."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.pw_common.errors import MalformedParametersError

if TYPE_CHECKING:
    from config.settings import Settings

UINT32_MAX = 2**32 - 1
UINT8_MAX = 2**8 - 1

# Lower bounds imposed by Argon2 itself (RFC 9106 §3.1)
MIN_SALT_LENGTH = 8
MIN_KEY_LENGTH = 4
MIN_MEMORY_KIB_PER_LANE = 8


@dataclass(frozen=True)
class CostParameters:
    """Argon2id tuning knobs plus salt/key lengths in bytes."""

    memory_kib: int
    iterations: int
    parallelism: int
    salt_length: int
    key_length: int

    @classmethod
    def default(cls) -> "CostParameters":
        """Documented defaults. Changing these changes every new hash."""
        return cls(
            memory_kib=4096,
            iterations=10,
            parallelism=2,
            salt_length=32,
            key_length=64,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "CostParameters":
        params = cls(
            memory_kib=settings.ARGON2_MEMORY_KIB,
            iterations=settings.ARGON2_ITERATIONS,
            parallelism=settings.ARGON2_PARALLELISM,
            salt_length=settings.ARGON2_SALT_LENGTH,
            key_length=settings.ARGON2_KEY_LENGTH,
        )
        params.validate()
        return params

    def validate(self) -> None:
        """Raise MalformedParametersError unless every field is in range."""
        for name in ("memory_kib", "iterations", "salt_length", "key_length"):
            _check_range(name, getattr(self, name), UINT32_MAX)
        _check_range("parallelism", self.parallelism, UINT8_MAX)

        if self.memory_kib < MIN_MEMORY_KIB_PER_LANE * self.parallelism:
            raise MalformedParametersError(
                f"memory_kib must be at least {MIN_MEMORY_KIB_PER_LANE} * parallelism "
                f"({MIN_MEMORY_KIB_PER_LANE * self.parallelism}), got {self.memory_kib}"
            )
        if self.salt_length < MIN_SALT_LENGTH:
            raise MalformedParametersError(
                f"salt_length must be at least {MIN_SALT_LENGTH} bytes, got {self.salt_length}"
            )
        if self.key_length < MIN_KEY_LENGTH:
            raise MalformedParametersError(
                f"key_length must be at least {MIN_KEY_LENGTH} bytes, got {self.key_length}"
            )


DEFAULT_COST_PARAMETERS = CostParameters.default()


@dataclass(frozen=True)
class DecodedHash:
    """A parsed canonical record. salt/key lengths are mirrored in params."""

    params: CostParameters
    salt: bytes
    key: bytes


def _check_range(name: str, value: int, upper: int) -> None:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedParametersError(f"{name} must be an integer, got {type(value).__name__}")
    if not (1 <= value <= upper):
        raise MalformedParametersError(f"{name} must be between 1 and {upper}, got {value}")
