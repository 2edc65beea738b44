"""
uuid7.py - UUID v7 bit assembly.

Pure layout code: takes a timestamp and the two random fields and
packs them. Drawing the random bits is the caller's job.
"""

import time

from uuid_gen.config import (
    MAX_TIMESTAMP_MS,
    RAND_A_BITS,
    RAND_B_BITS,
    UUID_BYTES,
    VARIANT_RFC,
    VERSION_V7,
)
from uuid_gen.errors import ClockRangeError, InvalidArgumentError


def current_unix_ms() -> int:
    """Read the wall clock as Unix milliseconds."""
    return int(time.time() * 1000)


def check_timestamp(t_ms: int) -> int:
    """
    Ensure a timestamp fits the 48-bit field.

    Raises:
        ClockRangeError: If t_ms is negative or needs more than 48 bits
    """
    if t_ms < 0 or t_ms > MAX_TIMESTAMP_MS:
        raise ClockRangeError(
            "Clock reading does not fit in 48 bits", timestamp_ms=t_ms
        )
    return t_ms


def construct_uuid_v7(t_ms: int, rand_a: int, rand_b: int) -> bytes:
    """
    Pack a UUID v7 as raw 16 bytes.

    Structure, most significant first:
    - 48 bits: Timestamp (ms)
    - 4 bits: Version (7)
    - 12 bits: rand_a
    - 2 bits: Variant (10)
    - 62 bits: rand_b

    Raises:
        ClockRangeError: If t_ms does not fit in 48 bits
        InvalidArgumentError: If a random field is wider than its slot
    """
    check_timestamp(t_ms)
    if not 0 <= rand_a < (1 << RAND_A_BITS):
        raise InvalidArgumentError("rand_a must fit in 12 bits", field="rand_a", value=rand_a)
    if not 0 <= rand_b < (1 << RAND_B_BITS):
        raise InvalidArgumentError("rand_b must fit in 62 bits", field="rand_b", value=rand_b)

    val = t_ms
    val = (val << 4) | VERSION_V7
    val = (val << RAND_A_BITS) | rand_a
    val = (val << 2) | VARIANT_RFC
    val = (val << RAND_B_BITS) | rand_b

    return val.to_bytes(UUID_BYTES, byteorder="big")
