"""
test_namespaces.py - Tests for the predefined v5 namespaces.
"""

import uuid

import pytest

from uuid_gen.errors import InvalidArgumentError, InvalidNamespaceError
from uuid_gen.namespaces import (
    NamespaceTag,
    namespace_dns,
    namespace_oid,
    namespace_url,
    namespace_x500,
    resolve_namespace,
)


class TestNamespaceConstants:
    """The four constants must match RFC 9562 Appendix C exactly."""

    def test_dns(self):
        assert namespace_dns() == uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8").bytes

    def test_url(self):
        assert namespace_url() == uuid.UUID("6ba7b811-9dad-11d1-80b4-00c04fd430c8").bytes

    def test_oid(self):
        assert namespace_oid() == uuid.UUID("6ba7b812-9dad-11d1-80b4-00c04fd430c8").bytes

    def test_x500(self):
        assert namespace_x500() == uuid.UUID("6ba7b814-9dad-11d1-80b4-00c04fd430c8").bytes

    def test_match_stdlib(self):
        """Same values Python's uuid module ships."""
        assert namespace_dns() == uuid.NAMESPACE_DNS.bytes
        assert namespace_url() == uuid.NAMESPACE_URL.bytes
        assert namespace_oid() == uuid.NAMESPACE_OID.bytes
        assert namespace_x500() == uuid.NAMESPACE_X500.bytes

    def test_all_sixteen_bytes(self):
        for tag in NamespaceTag:
            assert len(tag.value_bytes) == 16


class TestResolveNamespace:
    """Tests for namespace argument resolution."""

    def test_tag_member(self):
        assert resolve_namespace(NamespaceTag.URL) == namespace_url()

    @pytest.mark.parametrize("tag", ["dns", "DNS", "Dns"])
    def test_tag_string_case_insensitive(self, tag):
        assert resolve_namespace(tag) == namespace_dns()

    def test_uuid_object(self):
        ns = uuid.UUID("12345678-1234-5678-1234-567812345678")
        assert resolve_namespace(ns) == ns.bytes

    def test_raw_bytes(self):
        raw = bytes(range(16))
        assert resolve_namespace(raw) == raw

    def test_bytearray_becomes_bytes(self):
        result = resolve_namespace(bytearray(range(16)))
        assert isinstance(result, bytes)
        assert result == bytes(range(16))

    @pytest.mark.parametrize("length", [0, 1, 15, 17, 20])
    def test_wrong_length_rejected(self, length):
        """Wrong-length namespaces are neither truncated nor padded."""
        with pytest.raises(InvalidNamespaceError):
            resolve_namespace(b"\x00" * length)

    def test_unknown_tag_rejected(self):
        with pytest.raises(InvalidNamespaceError):
            resolve_namespace("ldap")

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidNamespaceError):
            resolve_namespace(12345)

    def test_namespace_error_is_invalid_argument(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            resolve_namespace(b"short")
        assert exc_info.value.field == "namespace"
