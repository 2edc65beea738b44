"""
render.py - Text forms of a 16-byte identifier.

Formats:
- standard: 8-4-4-4-12 lowercase hex, 36 characters
- hex: 32 lowercase hex digits
- urn: "urn:uuid:" + standard, 45 characters
- raw: Python repr of the bytes, for debugging only

Unknown format names fall back to standard unless strict is set.
"""

from enum import Enum

from uuid_gen.config import URN_PREFIX
from uuid_gen.errors import InvalidArgumentError
from uuid_gen.utils.bits import require_uuid_bytes

# Hex digit offsets of the five groups
_GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))


class UuidFormat(Enum):
    """Supported text formats."""
    STANDARD = "standard"
    HEX = "hex"
    URN = "urn"
    RAW = "raw"

    @classmethod
    def coerce(cls, value: "UuidFormat | str | None", strict: bool = False) -> "UuidFormat":
        """
        Map a format member or name to a UuidFormat.

        "binary" is accepted as an alias of raw. Unknown names give
        STANDARD, or raise InvalidArgumentError when strict.
        """
        if value is None:
            return cls.STANDARD
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
        if strict:
            raise InvalidArgumentError(
                f"Unknown format: {value!r}", field="format", value=value
            )
        return cls.STANDARD


_ALIASES = {f.value: f for f in UuidFormat}
_ALIASES["binary"] = UuidFormat.RAW


def _standard(h: str) -> str:
    return "-".join(h[start:end] for start, end in _GROUPS)


def render(
    uid: bytes,
    fmt: UuidFormat | str | None = UuidFormat.STANDARD,
    strict: bool = False,
) -> str:
    """
    Render an identifier as text.

    Args:
        uid: 16-byte identifier
        fmt: Format member or name
        strict: Raise on unknown format names instead of falling back

    Raises:
        InvalidArgumentError: If uid is not 16 bytes, or fmt is unknown
            and strict is set
    """
    uid = require_uuid_bytes(uid)
    fmt = UuidFormat.coerce(fmt, strict=strict)

    if fmt is UuidFormat.RAW:
        return repr(uid)

    h = uid.hex()
    if fmt is UuidFormat.HEX:
        return h
    if fmt is UuidFormat.URN:
        return URN_PREFIX + _standard(h)
    return _standard(h)


def to_string(uid: bytes, fmt: UuidFormat | str | None = None) -> str:
    """Render in the given format, standard by default."""
    return render(uid, fmt)
