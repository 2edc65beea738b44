"""
uuid_gen - RFC 9562 identifier generation core

Time-ordered v7 identifiers seeded from a pluggable entropy source,
deterministic name-based v5 identifiers, and their text forms.
"""

from uuid_gen.generator import UuidGenerator
from uuid_gen.config import GeneratorConfig
from uuid_gen.errors import (
    UuidGenError,
    InvalidArgumentError,
    InvalidNamespaceError,
    EntropyUnavailableError,
    ClockRangeError,
    GeneratorNotInitializedError,
)
from uuid_gen.namespaces import (
    NamespaceTag,
    namespace_dns,
    namespace_url,
    namespace_oid,
    namespace_x500,
    resolve_namespace,
)
from uuid_gen.v5 import generate_uuid_v5
from uuid_gen.v7 import generate_uuid_v7, generate_uuid_v7_batch
from uuid_gen.render import UuidFormat, render, to_string
from uuid_gen.utils.bits import timestamp_ms, variant_of, version_of
from uuid_gen.entropy import EntropySource, SystemEntropySource, HTTPEntropySource
from uuid_gen.metrics import configure_logging, get_registry

__version__ = "0.1.0"
__all__ = [
    # Core
    "UuidGenerator",
    "GeneratorConfig",
    # Generators
    "generate_uuid_v5",
    "generate_uuid_v7",
    "generate_uuid_v7_batch",
    # Namespaces
    "NamespaceTag",
    "namespace_dns",
    "namespace_url",
    "namespace_oid",
    "namespace_x500",
    "resolve_namespace",
    # Rendering
    "UuidFormat",
    "render",
    "to_string",
    # Field access
    "timestamp_ms",
    "version_of",
    "variant_of",
    # Entropy
    "EntropySource",
    "SystemEntropySource",
    "HTTPEntropySource",
    # Observability
    "configure_logging",
    "get_registry",
    # Errors
    "UuidGenError",
    "InvalidArgumentError",
    "InvalidNamespaceError",
    "EntropyUnavailableError",
    "ClockRangeError",
    "GeneratorNotInitializedError",
]
