"""
v7.py - Time-ordered UUID v7 generation (RFC 9562 section 5.7).

Each identifier carries the wall-clock millisecond in its top 48 bits
and 74 fresh bits from an entropy source in the rest. Identifiers from
different milliseconds sort by time both as bytes and as hex text;
order inside one millisecond is random.

The clock is read as-is. If it steps backwards, ordering across the
step is lost but no error is raised.
"""

from typing import Callable

from uuid_gen.config import RAND_A_BITS, V7_RANDOM_BITS
from uuid_gen.entropy.base import EntropySource, draw_bits
from uuid_gen.errors import InvalidArgumentError
from uuid_gen.utils.bits import bits_to_int
from uuid_gen.utils.uuid7 import check_timestamp, construct_uuid_v7, current_unix_ms

Clock = Callable[[], int]


def check_batch_size(n: int) -> None:
    """Raise InvalidArgumentError unless n is a positive int."""
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidArgumentError(
            "Batch size must be a positive integer", field="n", value=n
        )


def generate_uuid_v7(entropy: EntropySource, clock: Clock | None = None) -> bytes:
    """
    Generate a single UUID v7 as raw 16 bytes.

    Args:
        entropy: Source of the 74 random bits
        clock: Callable returning Unix milliseconds; defaults to the
            system wall clock

    Raises:
        EntropyUnavailableError: If the draw fails
        ClockRangeError: If the clock reading does not fit in 48 bits
    """
    t_ms = check_timestamp((clock or current_unix_ms)())

    bits = draw_bits(entropy, V7_RANDOM_BITS)
    rand_a = bits_to_int(bits[:RAND_A_BITS])
    rand_b = bits_to_int(bits[RAND_A_BITS:])

    return construct_uuid_v7(t_ms, rand_a, rand_b)


def generate_uuid_v7_batch(
    entropy: EntropySource, n: int, clock: Clock | None = None
) -> list[bytes]:
    """
    Generate n independent UUID v7s.

    The batch is all-or-nothing: the first failing draw aborts it and
    no partial list is returned.

    Raises:
        InvalidArgumentError: If n is not a positive integer
        EntropyUnavailableError: If any draw fails
    """
    check_batch_size(n)
    return [generate_uuid_v7(entropy, clock) for _ in range(n)]
