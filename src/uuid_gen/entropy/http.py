"""
http.py - HTTP client for a remote entropy service.

Endpoints expected on the service:
- GET /health - {"status": "ok"} when the service can serve draws
- GET /entropy/bits?count=N - {"bits": "0110..."} or {"bits": [0, 1, ...]}
"""

import logging
import threading

import httpx

from uuid_gen.config import DEFAULT_ENTROPY_TIMEOUT
from uuid_gen.entropy.base import EntropySource
from uuid_gen.errors import EntropyUnavailableError

logger = logging.getLogger(__name__)


class HTTPEntropySource(EntropySource):
    """
    Entropy drawn from a remote service over HTTP.

    Each random_bits call issues its own request, so concurrent
    callers never share a draw. httpx.Client is safe to share
    between threads.

    An injected client is used as-is and never closed here. Without
    one, a client (on `transport` when given) is opened on first use
    and dropped by close(), so the source can be started again
    afterwards. The timeout applies to every request either way.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_ENTROPY_TIMEOUT,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip('/')
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client
        self._transport = transport
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "http"

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self._timeout, transport=self._transport
                )
            return self._client

    def start(self) -> None:
        """Check that the service is reachable and healthy."""
        try:
            response = self._get_client().get(
                f"{self._base_url}/health", timeout=self._timeout
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Entropy service health check failed: {e}")
            raise EntropyUnavailableError(
                "Entropy service is unreachable", source=self.name, reason=str(e)
            ) from e

        if not isinstance(data, dict) or data.get("status") != "ok":
            raise EntropyUnavailableError(
                "Entropy service reported unhealthy status",
                source=self.name,
                reason=repr(data)[:100],
            )

    def close(self) -> None:
        if not self._owns_client:
            return
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def random_bits(self, count: int) -> list[int]:
        try:
            response = self._get_client().get(
                f"{self._base_url}/entropy/bits",
                params={"count": count},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Entropy draw failed: {e}")
            raise EntropyUnavailableError(
                "Entropy draw failed", source=self.name, reason=str(e)
            ) from e

        bits = data.get("bits") if isinstance(data, dict) else None
        return self._parse_bits(bits)

    def _parse_bits(self, bits) -> list[int]:
        if isinstance(bits, str):
            if set(bits) - {"0", "1"}:
                raise EntropyUnavailableError(
                    "Entropy payload contains non-binary characters",
                    source=self.name,
                    reason="malformed",
                )
            return [1 if c == "1" else 0 for c in bits]

        if isinstance(bits, list):
            return bits

        raise EntropyUnavailableError(
            "Entropy payload has no 'bits' field",
            source=self.name,
            reason="malformed",
        )
