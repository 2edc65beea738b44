"""
config.py - Configuration for uuid_gen.

Layout constants are immutable and defined at module level.
Runtime settings come from the environment through GeneratorConfig.
"""

import os
from dataclasses import dataclass
from typing import Final

from uuid_gen.errors import InvalidArgumentError

# Identifier size
UUID_BYTES: Final[int] = 16
UUID_BITS: Final[int] = 128

# v7 field widths (RFC 9562 section 5.7)
TIMESTAMP_BITS: Final[int] = 48
VERSION_BITS: Final[int] = 4
RAND_A_BITS: Final[int] = 12
VARIANT_BITS: Final[int] = 2
RAND_B_BITS: Final[int] = 62
V7_RANDOM_BITS: Final[int] = RAND_A_BITS + RAND_B_BITS

MAX_TIMESTAMP_MS: Final[int] = (1 << TIMESTAMP_BITS) - 1

# Version and variant values
VERSION_V5: Final[int] = 5
VERSION_V7: Final[int] = 7
VARIANT_RFC: Final[int] = 0b10

# Byte positions of the version nibble and variant bits
VERSION_BYTE_INDEX: Final[int] = 6
VARIANT_BYTE_INDEX: Final[int] = 8

URN_PREFIX: Final[str] = "urn:uuid:"

# Environment variables
ENV_ENTROPY_URL: Final[str] = "UUID_GEN_ENTROPY_URL"
ENV_ENTROPY_TIMEOUT: Final[str] = "UUID_GEN_ENTROPY_TIMEOUT"
ENV_STRICT_FORMAT: Final[str] = "UUID_GEN_STRICT_FORMAT"
ENV_LOG_LEVEL: Final[str] = "UUID_GEN_LOG_LEVEL"

DEFAULT_ENTROPY_TIMEOUT: Final[float] = 10.0
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})
_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Runtime settings for a UuidGenerator.

    Attributes:
        entropy_url: Base URL of a remote entropy service. None selects
            the local system source.
        entropy_timeout: HTTP timeout in seconds for remote draws.
        strict_format: Reject unknown render formats instead of falling
            back to the standard form.
        log_level: Level name passed to configure_logging.
    """
    entropy_url: str | None = None
    entropy_timeout: float = DEFAULT_ENTROPY_TIMEOUT
    strict_format: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "GeneratorConfig":
        """
        Build a config from environment variables.

        Raises:
            InvalidArgumentError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ

        url = env.get(ENV_ENTROPY_URL) or None

        raw_timeout = env.get(ENV_ENTROPY_TIMEOUT)
        timeout = DEFAULT_ENTROPY_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise InvalidArgumentError(
                    "Entropy timeout must be a number",
                    field=ENV_ENTROPY_TIMEOUT,
                    value=raw_timeout,
                ) from None
            if timeout <= 0:
                raise InvalidArgumentError(
                    "Entropy timeout must be positive",
                    field=ENV_ENTROPY_TIMEOUT,
                    value=raw_timeout,
                )

        raw_strict = env.get(ENV_STRICT_FORMAT, "").strip().lower()
        if raw_strict in _TRUE_VALUES:
            strict = True
        elif raw_strict in _FALSE_VALUES:
            strict = False
        else:
            raise InvalidArgumentError(
                "Strict format flag must be a boolean",
                field=ENV_STRICT_FORMAT,
                value=raw_strict,
            )

        level = env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
        if level not in _LOG_LEVELS:
            raise InvalidArgumentError(
                "Unknown log level", field=ENV_LOG_LEVEL, value=level
            )

        return cls(
            entropy_url=url,
            entropy_timeout=timeout,
            strict_format=strict,
            log_level=level,
        )
