"""
namespaces.py - Predefined v5 namespaces (RFC 9562 Appendix C).

These values are fixed by the RFC and must never change: every v5
identifier derived from them depends on the exact bytes.
"""

import uuid
from enum import Enum
from typing import Final, Union

from uuid_gen.config import UUID_BYTES
from uuid_gen.errors import InvalidNamespaceError

NAMESPACE_DNS: Final[bytes] = bytes.fromhex("6ba7b8109dad11d180b400c04fd430c8")
NAMESPACE_URL: Final[bytes] = bytes.fromhex("6ba7b8119dad11d180b400c04fd430c8")
NAMESPACE_OID: Final[bytes] = bytes.fromhex("6ba7b8129dad11d180b400c04fd430c8")
NAMESPACE_X500: Final[bytes] = bytes.fromhex("6ba7b8149dad11d180b400c04fd430c8")


class NamespaceTag(Enum):
    """Tags for the predefined namespaces."""
    DNS = "dns"
    URL = "url"
    OID = "oid"
    X500 = "x500"

    @property
    def value_bytes(self) -> bytes:
        return _BY_TAG[self]


_BY_TAG: Final[dict[NamespaceTag, bytes]] = {
    NamespaceTag.DNS: NAMESPACE_DNS,
    NamespaceTag.URL: NAMESPACE_URL,
    NamespaceTag.OID: NAMESPACE_OID,
    NamespaceTag.X500: NAMESPACE_X500,
}

NamespaceLike = Union[NamespaceTag, str, uuid.UUID, bytes, bytearray]


def namespace_dns() -> bytes:
    return NAMESPACE_DNS


def namespace_url() -> bytes:
    return NAMESPACE_URL


def namespace_oid() -> bytes:
    return NAMESPACE_OID


def namespace_x500() -> bytes:
    return NAMESPACE_X500


def resolve_namespace(namespace: NamespaceLike) -> bytes:
    """
    Resolve a namespace argument to its 16 raw bytes.

    Args:
        namespace: A NamespaceTag, a tag name such as "dns", a uuid.UUID,
            or 16 raw bytes

    Returns:
        16-byte namespace value

    Raises:
        InvalidNamespaceError: If the value is not a known tag or is
            not exactly 16 bytes
    """
    if isinstance(namespace, NamespaceTag):
        return namespace.value_bytes

    if isinstance(namespace, str):
        try:
            return NamespaceTag(namespace.lower()).value_bytes
        except ValueError:
            raise InvalidNamespaceError(
                f"Unknown namespace tag: {namespace!r}", value=namespace
            ) from None

    if isinstance(namespace, uuid.UUID):
        return namespace.bytes

    if isinstance(namespace, (bytes, bytearray)):
        if len(namespace) != UUID_BYTES:
            raise InvalidNamespaceError(
                f"Namespace must be {UUID_BYTES} bytes, got {len(namespace)}",
                value=bytes(namespace).hex(),
            )
        return bytes(namespace)

    raise InvalidNamespaceError(
        f"Unsupported namespace type: {type(namespace).__name__}",
        value=namespace,
    )
