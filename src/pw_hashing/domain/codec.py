"""Canonical argon2id hash string: encode and decode.

Format (standard base64 alphabet, no ``=`` padding):
    $argon2id$v=19$m=4096,t=3,p=1$<salt>$<key>

Splitting on ``$`` gives six segments:
    [0] empty  [1] algorithm  [2] version  [3] m,t,p  [4] salt  [5] key
"""

import base64
import binascii

from src.pw_common.enums import Algorithm
from src.pw_common.errors import (
    IncompatibleVersionError,
    InvalidFormatError,
    MalformedEncodingError,
    MalformedParametersError,
)
from src.pw_hashing.domain.models import CostParameters, DecodedHash

ARGON2_VERSION = 0x13  # 19, the only version argon2-cffi produces
SEPARATOR = "$"
SEGMENT_COUNT = 6


def b64encode_raw(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode_raw(text: str) -> bytes:
    """Decode unpadded standard base64. Raises binascii.Error on bad input."""
    if "=" in text:
        raise binascii.Error("unexpected padding in unpadded base64")
    return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)


def encode_hash(params: CostParameters, salt: bytes, key: bytes) -> str:
    return (
        f"${Algorithm.ARGON2ID.value}$v={ARGON2_VERSION}"
        f"$m={params.memory_kib},t={params.iterations},p={params.parallelism}"
        f"${b64encode_raw(salt)}${b64encode_raw(key)}"
    )


def decode_hash(encoded: str) -> DecodedHash:
    """Parse a canonical record into parameters, salt and stored key.

    Raises:
        InvalidFormatError: wrong number of ``$`` segments.
        MalformedParametersError: version or m/t/p clause does not parse.
        IncompatibleVersionError: not argon2id, or not version 19.
        MalformedEncodingError: salt or key is not unpadded base64.
    """
    elems = encoded.split(SEPARATOR)
    if len(elems) != SEGMENT_COUNT:
        raise InvalidFormatError(len(elems))

    _, algorithm, version_clause, params_clause, salt_b64, key_b64 = elems

    # Version is parsed before the tag check so a garbled clause surfaces as a
    # parse error rather than an incompatibility.
    try:
        version = _parse_version(version_clause)
    except ValueError as exc:
        raise MalformedParametersError(str(exc)) from exc

    if algorithm != Algorithm.ARGON2ID.value or version != ARGON2_VERSION:
        raise IncompatibleVersionError(algorithm, version)

    try:
        memory_kib, iterations, parallelism = _parse_cost_clause(params_clause)
    except ValueError as exc:
        raise MalformedParametersError(str(exc)) from exc

    salt = _decode_field("salt", salt_b64)
    key = _decode_field("key", key_b64)

    params = CostParameters(
        memory_kib=memory_kib,
        iterations=iterations,
        parallelism=parallelism,
        salt_length=len(salt),
        key_length=len(key),
    )
    params.validate()
    return DecodedHash(params=params, salt=salt, key=key)


def _decode_field(field: str, text: str) -> bytes:
    try:
        return b64decode_raw(text)
    except ValueError as exc:  # binascii.Error is a ValueError subclass
        raise MalformedEncodingError(field, str(exc)) from exc


def _parse_uint(text: str) -> int:
    # int() would also accept "+5", " 5" and "5_0"
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"expected an unsigned integer, got {text!r}")
    return int(text)


def _parse_version(clause: str) -> int:
    prefix, sep, value = clause.partition("=")
    if prefix != "v" or not sep:
        raise ValueError(f"malformed version clause {clause!r}, expected 'v=<int>'")
    return _parse_uint(value)


def _parse_cost_clause(clause: str) -> tuple[int, int, int]:
    parts = clause.split(",")
    if len(parts) != 3:
        raise ValueError(
            f"malformed parameter clause {clause!r}, expected 'm=<int>,t=<int>,p=<int>'"
        )

    values = []
    for part, expected in zip(parts, ("m", "t", "p")):
        name, sep, value = part.partition("=")
        if name != expected or not sep:
            raise ValueError(f"malformed parameter {part!r}, expected '{expected}=<int>'")
        values.append(_parse_uint(value))
    return values[0], values[1], values[2]
