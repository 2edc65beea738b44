"""
test_entropy.py - Tests for entropy sources and draw validation.

The HTTP source is exercised against httpx.MockTransport, so no
network access is needed.
"""

import httpx
import pytest

from uuid_gen.entropy import HTTPEntropySource, SystemEntropySource, draw_bits
from uuid_gen.errors import EntropyUnavailableError, InvalidArgumentError

from conftest import FlakyEntropySource, ScriptedEntropySource

BASE_URL = "http://entropy.test"


def make_service(bits_payload=None, health=None, status_code=200, owned=False, timeout=None):
    """Build an HTTPEntropySource backed by a mock service."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/health":
            return httpx.Response(200, json=health if health is not None else {"status": "ok"})
        if request.url.path == "/entropy/bits":
            if status_code != 200:
                return httpx.Response(status_code, json={"error": "unavailable"})
            count = int(request.url.params["count"])
            payload = bits_payload(count) if bits_payload else {"bits": "10" * (count // 2) + "1" * (count % 2)}
            return httpx.Response(200, json=payload)
        return httpx.Response(404)

    transport = httpx.MockTransport(handler)
    kwargs = {} if timeout is None else {"timeout": timeout}
    if owned:
        return HTTPEntropySource(BASE_URL, transport=transport, **kwargs), requests
    client = httpx.Client(transport=transport)
    return HTTPEntropySource(BASE_URL, client=client, **kwargs), requests


class TestSystemEntropySource:
    """Tests for the OS-backed source."""

    @pytest.mark.parametrize("count", [1, 7, 8, 9, 74, 128])
    def test_exact_count(self, count):
        bits = SystemEntropySource().random_bits(count)
        assert len(bits) == count
        assert all(isinstance(b, bool) for b in bits)

    def test_draws_differ(self):
        source = SystemEntropySource()
        assert source.random_bits(128) != source.random_bits(128)

    def test_name(self):
        assert SystemEntropySource().name == "system"


class TestDrawBits:
    """Validation applied to every draw."""

    def test_normalizes_to_bools(self):
        assert draw_bits(ScriptedEntropySource([[1, 0, True, False]]), 4) == [True, False, True, False]

    def test_short_read(self):
        with pytest.raises(EntropyUnavailableError) as exc_info:
            draw_bits(ScriptedEntropySource([[1, 0]]), 3)
        assert exc_info.value.reason == "short_read"

    def test_non_bit_values(self):
        with pytest.raises(EntropyUnavailableError) as exc_info:
            draw_bits(ScriptedEntropySource([[1, 2, 0]]), 3)
        assert exc_info.value.reason == "malformed"

    def test_none_result(self):
        with pytest.raises(EntropyUnavailableError):
            draw_bits(ScriptedEntropySource([None]), 3)

    def test_lazy_iterable_draw(self):
        class LazySource(SystemEntropySource):
            def random_bits(self, count):
                return (True for _ in range(count))

        assert draw_bits(LazySource(), 5) == [True] * 5

    def test_non_iterable_draw(self):
        class NumberSource(SystemEntropySource):
            def random_bits(self, count):
                return 42

        with pytest.raises(EntropyUnavailableError) as exc_info:
            draw_bits(NumberSource(), 5)
        assert exc_info.value.reason == "malformed"

    def test_wraps_unexpected_errors(self):
        source = FlakyEntropySource(fail_on_call=1, error=OSError("device gone"))
        with pytest.raises(EntropyUnavailableError) as exc_info:
            draw_bits(source, 8)
        assert exc_info.value.source == "flaky"
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_passes_entropy_errors_through(self):
        original = EntropyUnavailableError("quorum lost", source="flaky")
        source = FlakyEntropySource(fail_on_call=1, error=original)
        with pytest.raises(EntropyUnavailableError) as exc_info:
            draw_bits(source, 8)
        assert exc_info.value is original

    @pytest.mark.parametrize("count", [0, -5, True, 1.5])
    def test_invalid_count(self, count):
        with pytest.raises(InvalidArgumentError):
            draw_bits(SystemEntropySource(), count)


class TestHTTPEntropySource:
    """Tests for the remote entropy client."""

    def test_string_payload(self):
        source, requests = make_service(lambda n: {"bits": "1" * n})
        assert draw_bits(source, 74) == [True] * 74
        assert requests[-1].url.params["count"] == "74"

    def test_list_payload(self):
        source, _ = make_service(lambda n: {"bits": [0] * n})
        assert draw_bits(source, 12) == [False] * 12

    def test_one_request_per_draw(self):
        source, requests = make_service()
        draw_bits(source, 10)
        draw_bits(source, 10)
        assert len([r for r in requests if r.url.path == "/entropy/bits"]) == 2

    def test_start_checks_health(self):
        source, requests = make_service()
        source.start()
        assert requests[0].url.path == "/health"

    def test_start_unhealthy(self):
        source, _ = make_service(health={"status": "degraded"})
        with pytest.raises(EntropyUnavailableError):
            source.start()

    def test_server_error(self):
        source, _ = make_service(status_code=503)
        with pytest.raises(EntropyUnavailableError):
            source.random_bits(74)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        source = HTTPEntropySource(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))
        with pytest.raises(EntropyUnavailableError):
            source.start()
        with pytest.raises(EntropyUnavailableError):
            source.random_bits(74)

    def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"not json")

        source = HTTPEntropySource(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(handler)))
        with pytest.raises(EntropyUnavailableError):
            source.random_bits(8)

    def test_missing_bits_field(self):
        source, _ = make_service(lambda n: {"entropy": "1" * n})
        with pytest.raises(EntropyUnavailableError):
            source.random_bits(8)

    def test_non_binary_string(self):
        source, _ = make_service(lambda n: {"bits": "2" * n})
        with pytest.raises(EntropyUnavailableError):
            source.random_bits(8)

    def test_short_payload(self):
        source, _ = make_service(lambda n: {"bits": "1" * (n - 1)})
        with pytest.raises(EntropyUnavailableError):
            draw_bits(source, 74)

    def test_trailing_slash_stripped(self):
        source = HTTPEntropySource(BASE_URL + "/")
        assert source.base_url == BASE_URL
        source.close()

    def test_injected_client_left_open(self):
        source, _ = make_service()
        source.close()
        assert not source._client.is_closed

    def test_owned_client_restarts_after_close(self):
        source, requests = make_service(owned=True)
        source.start()
        assert len(draw_bits(source, 8)) == 8
        source.close()
        assert source._client is None

        source.start()
        assert len(draw_bits(source, 8)) == 8
        assert [r.url.path for r in requests].count("/health") == 2
        source.close()

    def test_timeout_applies_to_injected_client(self):
        source, requests = make_service(timeout=2.5)
        source.start()
        draw_bits(source, 4)
        for request in requests:
            assert request.extensions["timeout"]["read"] == 2.5
