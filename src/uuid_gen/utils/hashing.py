"""
hashing.py - Digest helpers for name-based identifiers.

SHA-1 is used only because RFC 9562 fixes it for v5. It is not
used anywhere as a security primitive.

All hashing is deterministic: same input = same output.
"""

import hashlib


def sha1_bytes(data: bytes) -> bytes:
    """
    Compute SHA-1 hash of bytes.

    Args:
        data: Bytes to hash

    Returns:
        20-byte SHA-1 digest
    """
    return hashlib.sha1(data, usedforsecurity=False).digest()

