"""
bits.py - Bit-sequence packing and identifier field access.

Bit sequences are taken most-significant first, so the first bit
returned by an entropy source becomes the highest bit of the field.
"""

from typing import Sequence

from uuid_gen.config import UUID_BYTES, TIMESTAMP_BITS
from uuid_gen.errors import InvalidArgumentError


def bits_to_int(bits: Sequence[bool | int]) -> int:
    """
    Pack a sequence of bits into an unsigned integer.

    Args:
        bits: Booleans or 0/1 integers, most significant first

    Returns:
        Integer value of the bits

    Raises:
        InvalidArgumentError: If an element is not a bit
    """
    value = 0
    for index, bit in enumerate(bits):
        if bit is True or bit == 1:
            value = (value << 1) | 1
        elif bit is False or bit == 0:
            value <<= 1
        else:
            raise InvalidArgumentError(
                f"Bit at index {index} is not 0 or 1",
                field="bits",
                value=bit,
            )
    return value


def int_to_bits(value: int, width: int) -> list[bool]:
    """Unpack the low `width` bits of value, most significant first."""
    return [bool((value >> shift) & 1) for shift in range(width - 1, -1, -1)]


def require_uuid_bytes(uid: bytes, field: str = "uuid") -> bytes:
    """Raise InvalidArgumentError unless uid is exactly 16 bytes."""
    if not isinstance(uid, (bytes, bytearray)) or len(uid) != UUID_BYTES:
        size = len(uid) if isinstance(uid, (bytes, bytearray)) else None
        raise InvalidArgumentError(
            f"Identifier must be {UUID_BYTES} bytes, got {size if size is not None else type(uid).__name__}",
            field=field,
            value=uid,
        )
    return bytes(uid)


def version_of(uid: bytes) -> int:
    """Return the 4-bit version field (bits 48-51)."""
    uid = require_uuid_bytes(uid)
    return uid[6] >> 4


def variant_of(uid: bytes) -> int:
    """Return the 2-bit variant field (bits 64-65)."""
    uid = require_uuid_bytes(uid)
    return uid[8] >> 6


def timestamp_ms(uid: bytes) -> int:
    """Return the 48-bit millisecond timestamp of a v7 identifier."""
    uid = require_uuid_bytes(uid)
    return int.from_bytes(uid[: TIMESTAMP_BITS // 8], byteorder="big")
