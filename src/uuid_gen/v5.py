"""
v5.py - Name-based UUID v5 generation (RFC 9562 section 5.5).

v5 identifiers are a pure function of (namespace, name): the same
inputs give the same 16 bytes in every process, forever.
"""

from uuid_gen.config import (
    UUID_BYTES,
    VARIANT_BYTE_INDEX,
    VARIANT_RFC,
    VERSION_BYTE_INDEX,
    VERSION_V5,
)
from uuid_gen.errors import InvalidArgumentError
from uuid_gen.namespaces import NamespaceLike, resolve_namespace
from uuid_gen.utils.hashing import sha1_bytes


def encode_name(name: str | bytes | bytearray) -> bytes:
    """
    Turn a name into the bytes that get hashed.

    Text is encoded as UTF-8. Raw bytes are used as given.

    Raises:
        InvalidArgumentError: If name is neither text nor bytes
    """
    if isinstance(name, str):
        return name.encode("utf-8")
    if isinstance(name, (bytes, bytearray)):
        return bytes(name)
    raise InvalidArgumentError(
        f"Name must be str or bytes, got {type(name).__name__}",
        field="name",
        value=name,
    )


def generate_uuid_v5(namespace: NamespaceLike, name: str | bytes | bytearray) -> bytes:
    """
    Generate a UUID v5 as raw 16 bytes.

    Args:
        namespace: NamespaceTag, tag name, uuid.UUID or 16 raw bytes
        name: Text (UTF-8 encoded) or raw bytes, may be empty

    Returns:
        16-byte identifier

    Raises:
        InvalidNamespaceError: If namespace is not 16 bytes
        InvalidArgumentError: If name is not text or bytes
    """
    ns_bytes = resolve_namespace(namespace)
    name_bytes = encode_name(name)

    digest = sha1_bytes(ns_bytes + name_bytes)
    b = bytearray(digest[:UUID_BYTES])

    # Version nibble (high half of byte 6)
    b[VERSION_BYTE_INDEX] = (b[VERSION_BYTE_INDEX] & 0x0F) | (VERSION_V5 << 4)
    # Variant (top two bits of byte 8)
    b[VARIANT_BYTE_INDEX] = (b[VARIANT_BYTE_INDEX] & 0x3F) | (VARIANT_RFC << 6)

    return bytes(b)
