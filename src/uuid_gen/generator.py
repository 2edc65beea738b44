"""
generator.py - Main identifier generator.

UuidGenerator is the primary public interface. It owns the entropy
source and coordinates:
- Explicit entropy start-up via initialize()
- v7 generation, single and batch
- v5 generation
- Rendering with the configured format policy
"""

import logging
import threading
import time

from uuid_gen.config import GeneratorConfig, VERSION_V5, VERSION_V7
from uuid_gen.entropy.base import EntropySource
from uuid_gen.entropy.http import HTTPEntropySource
from uuid_gen.entropy.system import SystemEntropySource
from uuid_gen.errors import ClockRangeError, EntropyUnavailableError, GeneratorNotInitializedError
from uuid_gen.metrics import GeneratorLogger, v7_generation_seconds
from uuid_gen.namespaces import NamespaceLike
from uuid_gen.render import UuidFormat, render as _render
from uuid_gen.v5 import generate_uuid_v5
from uuid_gen.v7 import Clock, check_batch_size, generate_uuid_v7, generate_uuid_v7_batch

logger = logging.getLogger(__name__)


class UuidGenerator:
    """
    Generator for RFC 9562 v5 and v7 identifiers.

    v5 and rendering work at any time. v7 needs the entropy source to
    be started first:

        with UuidGenerator() as gen:
            uid = gen.v7()
    """

    def __init__(
        self,
        entropy: EntropySource | None = None,
        clock: Clock | None = None,
        strict_format: bool = False,
    ):
        self._entropy = entropy or SystemEntropySource()
        self._clock = clock
        self._strict_format = strict_format
        self._initialized = False
        self._lock = threading.Lock()
        self._events = GeneratorLogger()

    @classmethod
    def from_config(cls, config: GeneratorConfig, clock: Clock | None = None) -> "UuidGenerator":
        """Build a generator, picking the remote source when a URL is configured."""
        if config.entropy_url:
            entropy = HTTPEntropySource(config.entropy_url, timeout=config.entropy_timeout)
        else:
            entropy = SystemEntropySource()
        return cls(entropy=entropy, clock=clock, strict_format=config.strict_format)

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def entropy(self) -> EntropySource:
        return self._entropy

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Start the entropy source. Safe to call more than once.

        Raises:
            EntropyUnavailableError: If the source fails to start
        """
        with self._lock:
            if self._initialized:
                return
            try:
                self._entropy.start()
            except EntropyUnavailableError as e:
                self._events.entropy_failed(self._entropy.name, str(e))
                raise
            except Exception as e:
                self._events.entropy_failed(self._entropy.name, str(e))
                raise EntropyUnavailableError(
                    f"Entropy source failed to start: {e}",
                    source=self._entropy.name,
                    reason=type(e).__name__,
                ) from e
            self._initialized = True
        self._events.generator_started(self._entropy.name)

    def close(self) -> None:
        """Release the entropy source."""
        with self._lock:
            if self._initialized:
                self._entropy.close()
                self._initialized = False

    def _require_initialized(self) -> None:
        if not self._initialized:
            logger.error("v7 requested before initialize()")
            raise GeneratorNotInitializedError(
                "Call initialize() before generating v7 identifiers"
            )

    def v7(self, n: int | None = None) -> bytes | list[bytes]:
        """
        Generate one v7 identifier, or a list of n when n is given.

        Raises:
            GeneratorNotInitializedError: If initialize() was not called
            InvalidArgumentError: If n is given and not positive
            EntropyUnavailableError: If a draw fails
        """
        if n is not None:
            return self.v7_batch(n)

        self._require_initialized()
        try:
            with v7_generation_seconds.time(source=self._entropy.name):
                uid = generate_uuid_v7(self._entropy, self._clock)
        except EntropyUnavailableError as e:
            self._events.entropy_failed(self._entropy.name, str(e))
            raise
        except ClockRangeError as e:
            logger.error(f"Clock reading out of range: {e}")
            raise
        self._events.generated(VERSION_V7)
        return uid

    def v7_batch(self, n: int) -> list[bytes]:
        """
        Generate n v7 identifiers, failing the whole batch on any error.

        Raises:
            InvalidArgumentError: If n is not positive
            GeneratorNotInitializedError: If initialize() was not called
            EntropyUnavailableError: If any draw fails
        """
        check_batch_size(n)
        self._require_initialized()
        start = time.perf_counter()
        try:
            uids = generate_uuid_v7_batch(self._entropy, n, self._clock)
        except EntropyUnavailableError as e:
            self._events.entropy_failed(self._entropy.name, str(e))
            raise
        except ClockRangeError as e:
            logger.error(f"Clock reading out of range: {e}")
            raise
        self._events.generated(VERSION_V7, len(uids))
        self._events.batch_generated(len(uids), (time.perf_counter() - start) * 1000)
        return uids

    def v5(self, namespace: NamespaceLike, name: str | bytes) -> bytes:
        """Generate a v5 identifier. Does not need initialize()."""
        uid = generate_uuid_v5(namespace, name)
        self._events.generated(VERSION_V5)
        return uid

    def render(self, uid: bytes, fmt: UuidFormat | str | None = UuidFormat.STANDARD) -> str:
        return _render(uid, fmt, strict=self._strict_format)
