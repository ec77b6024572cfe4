"""
Shared metrics configuration for the transition engine.
"""

from prometheus_client import Counter, Histogram, start_http_server, CollectorRegistry
from typing import Dict, Any, Optional
import threading
import time
from contextlib import contextmanager

# Ports with a running metrics server, and the collector each one serves
_servers: Dict[int, "MetricsCollector"] = {}
_servers_lock = threading.Lock()


class MetricsCollector:
    """Prometheus metrics for one or more engines.

    Every sample carries an ``engine`` label, so engines with different
    names can record into the same collector.
    """

    def __init__(self, engine_name: str, registry: Optional[CollectorRegistry] = None):
        self.engine_name = engine_name
        self.registry = registry if registry is not None else CollectorRegistry()
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up engine metrics."""

        # Step outcomes: "fired", "noop" or "error"
        self._metrics["engine_fires_total"] = Counter(
            "engine_fires_total",
            "Total fire calls by outcome",
            ["engine", "outcome"],
            registry=self.registry
        )

        self._metrics["engine_transitions_total"] = Counter(
            "engine_transitions_total",
            "Total activations applied, by transition",
            ["engine", "transition"],
            registry=self.registry
        )

        self._metrics["engine_fire_duration_seconds"] = Histogram(
            "engine_fire_duration_seconds",
            "Duration of a single fire call in seconds",
            ["engine"],
            registry=self.registry
        )

    def get_sample(self, name: str, **labels) -> Optional[float]:
        """Read a sample value from this collector's registry."""
        labels.setdefault("engine", self.engine_name)
        return self.registry.get_sample_value(name, labels)

    def start_metrics_server(self, port: int = 9090):
        """Start the Prometheus metrics server for this registry."""
        start_http_server(port, registry=self.registry)

    def record_fire(self, transition: Optional[str], engine: Optional[str] = None):
        """Record one completed fire call; transition is None when nothing applied."""
        engine = engine or self.engine_name
        outcome = "noop" if transition is None else "fired"
        self.increment_counter("engine_fires_total", engine=engine, outcome=outcome)
        if transition is not None:
            self.increment_counter("engine_transitions_total", engine=engine, transition=transition)

    def record_error(self, engine: Optional[str] = None):
        """Record a fire call aborted by a raising precondition or activation."""
        self.increment_counter("engine_fires_total", engine=engine or self.engine_name, outcome="error")

    @contextmanager
    def time_operation(self, operation_name: str, **labels):
        """Context manager to time an operation."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start_time
            self.observe_histogram(operation_name, duration, **labels)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        labels.setdefault("engine", self.engine_name)
        self._metrics[metric_name].labels(**labels).inc()

    def observe_histogram(self, metric_name: str, value: float, **labels):
        """Observe a histogram metric."""
        labels.setdefault("engine", self.engine_name)
        self._metrics[metric_name].labels(**labels).observe(value)


def get_metrics_collector(engine_name: str, registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector for an engine."""
    return MetricsCollector(engine_name, registry)


def get_served_collector(engine_name: str, port: int) -> MetricsCollector:
    """Return the collector served on ``port``, starting its server on first use."""
    with _servers_lock:
        collector = _servers.get(port)
        if collector is None:
            collector = MetricsCollector(engine_name)
            collector.start_metrics_server(port)
            _servers[port] = collector
        return collector
