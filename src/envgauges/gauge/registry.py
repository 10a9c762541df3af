"""Gauge – GaugeRegistry composes gauge sets under name prefixes."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from envgauges.gauge.ports import Gauge, GaugeSet, GaugeValue
from envgauges.observability.logging import get_logger
from envgauges.observability.metrics import Metrics

_log = get_logger(__name__)


class GaugeRegistry:
    """Holds gauges from several sets and evaluates them in a batch.

    Usage::

        registry = GaugeRegistry()
        registry.register("system", FileSystemGaugeSet())
        registry.register("process", RuntimeGaugeSet())
        registry.snapshot()  # {"system.fs.root.total_bytes": ..., "process.uptime_ms": ...}
    """

    def __init__(self) -> None:
        self._gauges: dict[str, Gauge] = {}

    def register(self, prefix: str, gauge_set: GaugeSet) -> None:
        for name, gauge in gauge_set.gauges().items():
            full_name = f"{prefix}.{name}" if prefix else name
            if full_name in self._gauges:
                _log.debug("gauge.name_collision", gauge=full_name)
            self._gauges[full_name] = gauge

    def gauges(self) -> Mapping[str, Gauge]:
        return MappingProxyType(self._gauges)

    def snapshot(self) -> dict[str, GaugeValue]:
        """Evaluate every registered gauge once."""
        return {name: gauge() for name, gauge in self._gauges.items()}

    def publish(self, metrics: Metrics) -> dict[str, GaugeValue]:
        """Push a fresh snapshot into *metrics* and return it."""
        values = self.snapshot()
        for name, value in values.items():
            metrics.gauge(name).set(value)
        return values

    def __len__(self) -> int:
        return len(self._gauges)


__all__ = ["GaugeRegistry"]
