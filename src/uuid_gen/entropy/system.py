"""
system.py - Local entropy source backed by the OS CSPRNG.

Used where no remote entropy service is configured. os.urandom is
safe to call from many threads and every call returns fresh bytes.
"""

import os

from uuid_gen.entropy.base import EntropySource
from uuid_gen.errors import EntropyUnavailableError
from uuid_gen.utils.bits import int_to_bits


class SystemEntropySource(EntropySource):
    """Entropy from os.urandom."""

    @property
    def name(self) -> str:
        return "system"

    def random_bits(self, count: int) -> list[bool]:
        n_bytes = (count + 7) // 8
        try:
            raw = os.urandom(n_bytes)
        except NotImplementedError as e:
            raise EntropyUnavailableError(
                "No OS randomness source available", source=self.name, reason=str(e)
            ) from e

        # Drop the surplus low bits of the last byte
        value = int.from_bytes(raw, byteorder="big") >> (n_bytes * 8 - count)
        return int_to_bits(value, count)
