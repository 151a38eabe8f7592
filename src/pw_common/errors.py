"""Unified error codes and custom exceptions.

Error code ranges:
  11xx: Password hashing
  9xxx: System
"""

from src.pw_common.enums import ErrorKind


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class HashingError(AppError):
    """Base for every error raised while encoding, decoding or verifying a hash."""

    kind: ErrorKind

    def __init__(self, code: int, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(code, message)

    @property
    def is_mismatch(self) -> bool:
        return self.kind is ErrorKind.PASSWORD_MISMATCH


# --- 11xx: Password hashing ---

class InvalidFormatError(HashingError):
    def __init__(self, segments: int) -> None:
        super().__init__(
            1101,
            ErrorKind.INVALID_FORMAT,
            f"the encoded hash is not in the correct format: expected 6 segments, got {segments}",
        )


class IncompatibleVersionError(HashingError):
    def __init__(self, algorithm: str, version: int) -> None:
        super().__init__(
            1102,
            ErrorKind.INCOMPATIBLE_VERSION,
            f"incompatible version of argon2: {algorithm} v={version}",
        )


class MalformedParametersError(HashingError):
    """Numeric clause could not be parsed or holds an out-of-range value.

    ``message`` is the underlying parse failure verbatim; the original
    exception, when there is one, is chained as ``__cause__``.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(1103, ErrorKind.MALFORMED_PARAMETERS, detail)


class MalformedEncodingError(HashingError):
    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        super().__init__(1104, ErrorKind.MALFORMED_ENCODING, detail)


class PasswordMismatchError(HashingError):
    def __init__(self) -> None:
        super().__init__(1105, ErrorKind.PASSWORD_MISMATCH, "passwords do not match")


class RandomnessUnavailableError(HashingError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            1106,
            ErrorKind.RANDOMNESS_UNAVAILABLE,
            f"secure random source unavailable: {detail}",
        )
