"""
base.py - Abstract base class for entropy sources.

All entropy implementations must inherit from EntropySource.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from uuid_gen.errors import EntropyUnavailableError, InvalidArgumentError


class EntropySource(ABC):
    """
    Abstract base class for random-bit providers.

    Implementations must provide:
    - random_bits(count): exactly `count` independent unbiased bits

    A call may block while the source gathers randomness. Concurrent
    calls must each receive their own bits.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    def start(self) -> None:
        """Prepare the source for use. Raises EntropyUnavailableError on failure."""

    def close(self) -> None:
        """Release any resources held by the source."""

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @abstractmethod
    def random_bits(self, count: int) -> Sequence[bool | int]:
        """
        Draw fresh random bits.

        Args:
            count: Number of bits, must be positive

        Returns:
            Sequence of `count` bits (bools or 0/1 ints)

        Raises:
            EntropyUnavailableError: If the source cannot deliver
        """
        pass


def draw_bits(source: EntropySource, count: int) -> list[bool]:
    """
    Draw `count` bits from source and validate the result.

    Any failure, including an unexpected exception or a draw of the
    wrong size, surfaces as EntropyUnavailableError.

    Raises:
        InvalidArgumentError: If count is not a positive int
        EntropyUnavailableError: If the draw fails or is malformed
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidArgumentError("Bit count must be a positive integer", field="count", value=count)

    try:
        bits = source.random_bits(count)
        if bits is not None:
            bits = list(bits)
    except EntropyUnavailableError:
        raise
    except TypeError as e:
        raise EntropyUnavailableError(
            f"Entropy source returned a non-iterable draw: {e}",
            source=source.name,
            reason="malformed",
        ) from e
    except Exception as e:
        raise EntropyUnavailableError(
            f"Entropy source failed: {e}", source=source.name, reason=type(e).__name__
        ) from e

    if bits is None or len(bits) != count:
        got = None if bits is None else len(bits)
        raise EntropyUnavailableError(
            f"Entropy source returned {got} bits, expected {count}",
            source=source.name,
            reason="short_read",
        )

    result = []
    for bit in bits:
        if bit is True or bit is False:
            result.append(bit)
        elif isinstance(bit, int) and bit in (0, 1):
            result.append(bool(bit))
        else:
            raise EntropyUnavailableError(
                f"Entropy source returned a non-bit value: {bit!r}",
                source=source.name,
                reason="malformed",
            )
    return result
