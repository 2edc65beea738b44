"""
metrics.py - Observability for identifier generation.

Provides:
- Prometheus-style counters and a latency histogram
- Structured JSON logging
"""

import time
import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, List
from contextlib import contextmanager
import os


# =============================================================================
# Metric Collectors
# =============================================================================

@dataclass
class MetricValue:
    """Single metric value with labels."""
    name: str
    value: float
    labels: Dict[str, str] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)


class Counter:
    """Prometheus-style counter metric."""

    def __init__(self, name: str, help_text: str, labels: List[str] = None):
        self.name = name
        self.help = help_text
        self.labels = labels or []
        self._values: Dict[tuple, float] = {}
        self._lock = threading.Lock()

    def inc(self, value: float = 1, **label_values) -> None:
        """Increment counter."""
        key = self._label_key(label_values)
        with self._lock:
            self._values[key] = self._values.get(key, 0) + value

    def get(self, **label_values) -> float:
        """Get current value."""
        key = self._label_key(label_values)
        return self._values.get(key, 0)

    def collect(self) -> List[MetricValue]:
        with self._lock:
            return [
                MetricValue(
                    name=self.name,
                    value=value,
                    labels=dict(zip(self.labels, key))
                )
                for key, value in self._values.items()
            ]

    def _label_key(self, label_values: dict) -> tuple:
        return tuple(label_values.get(l, "") for l in self.labels)


class Histogram:
    """Prometheus-style histogram metric."""

    DEFAULT_BUCKETS = (
        0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, float('inf')
    )

    def __init__(
        self,
        name: str,
        help_text: str,
        labels: List[str] = None,
        buckets: tuple = None
    ):
        self.name = name
        self.help = help_text
        self.labels = labels or []
        self.buckets = buckets or self.DEFAULT_BUCKETS
        self._values: Dict[tuple, dict] = {}
        self._lock = threading.Lock()

    def observe(self, value: float, **label_values) -> None:
        """Observe a value."""
        key = self._label_key(label_values)

        with self._lock:
            if key not in self._values:
                self._values[key] = {
                    "count": 0,
                    "sum": 0.0,
                    "buckets": {b: 0 for b in self.buckets}
                }

            data = self._values[key]
            data["count"] += 1
            data["sum"] += value

            for bucket in self.buckets:
                if value <= bucket:
                    data["buckets"][bucket] += 1

    def count(self, **label_values) -> int:
        """Number of observations for a label set."""
        key = self._label_key(label_values)
        data = self._values.get(key)
        return data["count"] if data else 0

    @contextmanager
    def time(self, **label_values):
        """Context manager to time an operation."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start, **label_values)

    def collect(self) -> List[MetricValue]:
        results = []

        with self._lock:
            for key, data in self._values.items():
                labels = dict(zip(self.labels, key))
                results.append(MetricValue(name=f"{self.name}_sum", value=data["sum"], labels=labels))
                results.append(MetricValue(name=f"{self.name}_count", value=data["count"], labels=labels))
                for le, count in data["buckets"].items():
                    results.append(MetricValue(
                        name=f"{self.name}_bucket",
                        value=count,
                        labels={**labels, "le": str(le)}
                    ))

        return results

    def _label_key(self, label_values: dict) -> tuple:
        return tuple(label_values.get(l, "") for l in self.labels)


# =============================================================================
# Metrics Registry
# =============================================================================

class MetricsRegistry:
    """Global metrics registry."""

    def __init__(self, prefix: str = "uuid_gen"):
        self.prefix = prefix
        self._metrics: Dict[str, Counter | Histogram] = {}
        self._lock = threading.Lock()

    def counter(self, name: str, help_text: str, labels: List[str] = None) -> Counter:
        """Register or get a counter metric."""
        full_name = f"{self.prefix}_{name}"

        with self._lock:
            if full_name not in self._metrics:
                self._metrics[full_name] = Counter(full_name, help_text, labels)
            return self._metrics[full_name]

    def histogram(
        self,
        name: str,
        help_text: str,
        labels: List[str] = None,
        buckets: tuple = None
    ) -> Histogram:
        """Register or get a histogram metric."""
        full_name = f"{self.prefix}_{name}"

        with self._lock:
            if full_name not in self._metrics:
                self._metrics[full_name] = Histogram(full_name, help_text, labels, buckets)
            return self._metrics[full_name]

    def collect_all(self) -> List[MetricValue]:
        results = []

        with self._lock:
            for metric in self._metrics.values():
                results.extend(metric.collect())

        return results

    def export_prometheus(self) -> str:
        """Export metrics in Prometheus text format."""
        lines = []

        for metric in self.collect_all():
            if metric.labels:
                label_str = ",".join(
                    f'{k}="{v}"' for k, v in metric.labels.items()
                )
                lines.append(f"{metric.name}{{{label_str}}} {metric.value}")
            else:
                lines.append(f"{metric.name} {metric.value}")

        return "\n".join(lines)


_registry = MetricsRegistry()


def get_registry() -> MetricsRegistry:
    """Get the global metrics registry."""
    return _registry


uuids_generated_total = _registry.counter(
    "uuids_generated_total",
    "Total number of identifiers generated",
    labels=["version"]
)

entropy_failures_total = _registry.counter(
    "entropy_failures_total",
    "Total number of failed entropy draws",
    labels=["source"]
)

v7_generation_seconds = _registry.histogram(
    "v7_generation_seconds",
    "Latency of single v7 generation, entropy draw included, in seconds",
    labels=["source"]
)


# =============================================================================
# Structured Logging
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    _RESERVED = frozenset((
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'pathname', 'process', 'processName', 'relativeCreated',
        'stack_info', 'exc_info', 'exc_text', 'thread', 'threadName',
        'message', 'taskName'
    ))

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra
        self._hostname = os.environ.get("HOSTNAME", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "hostname": self._hostname
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.include_extra:
            for key, value in record.__dict__.items():
                if key not in self._RESERVED:
                    log_data[key] = value

        return json.dumps(log_data, default=str)


class GeneratorLogger:
    """
    Structured logger for generator events.

    Provides convenience methods for common generation events and
    keeps the counters in step with what is logged.
    """

    def __init__(self, name: str = "uuid_gen"):
        self._logger = logging.getLogger(name)

    def generator_started(self, source: str) -> None:
        self._logger.info(
            f"Generator started with entropy source {source}",
            extra={"event": "generator_started", "source": source}
        )

    def generated(self, version: int, count: int = 1) -> None:
        uuids_generated_total.inc(count, version=str(version))
        self._logger.debug(
            f"Generated {count} v{version} identifier(s)",
            extra={"event": "uuids_generated", "version": version, "count": count}
        )

    def batch_generated(self, count: int, duration_ms: float) -> None:
        self._logger.info(
            f"Batch generated: {count} identifiers in {duration_ms:.1f} ms",
            extra={"event": "batch_generated", "count": count, "duration_ms": duration_ms}
        )

    def entropy_failed(self, source: str, error: str) -> None:
        entropy_failures_total.inc(1, source=source)
        self._logger.error(
            f"Entropy draw failed: {error}",
            extra={"event": "entropy_failed", "source": source, "error": error}
        )


def configure_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_file: str = None
) -> None:
    """
    Configure logging for production.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting
        log_file: Optional log file path
    """
    handlers = []

    console = logging.StreamHandler()
    if json_format:
        console.setFormatter(JSONFormatter())
    else:
        console.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
    handlers.append(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True
    )
