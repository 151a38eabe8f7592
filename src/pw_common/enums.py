"""Global enums shared by the hashing packages."""

from enum import Enum


class ErrorKind(str, Enum):
    """What went wrong with a hash operation. Callers branch on this value."""
    INVALID_FORMAT = "INVALID_FORMAT"
    INCOMPATIBLE_VERSION = "INCOMPATIBLE_VERSION"
    MALFORMED_PARAMETERS = "MALFORMED_PARAMETERS"
    MALFORMED_ENCODING = "MALFORMED_ENCODING"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    RANDOMNESS_UNAVAILABLE = "RANDOMNESS_UNAVAILABLE"


class Algorithm(str, Enum):
    ARGON2ID = "argon2id"
