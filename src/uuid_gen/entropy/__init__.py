"""
entropy - Random-bit sources consumed by v7 generation.
"""

from uuid_gen.entropy.base import EntropySource, draw_bits
from uuid_gen.entropy.system import SystemEntropySource
from uuid_gen.entropy.http import HTTPEntropySource

__all__ = [
    "EntropySource",
    "draw_bits",
    "SystemEntropySource",
    "HTTPEntropySource",
]
