"""Gauge sets – process start time and uptime."""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from envgauges.gauge import INT_SENTINEL, FunctionGauge, Gauge, GaugeSet
from envgauges.platform.ports import RuntimeInfo
from envgauges.platform.psutil_adapters import PsutilRuntimeInfo


class RuntimeGaugeSet(GaugeSet):
    """``starttime_ms`` (epoch ms) and ``uptime_ms`` of the running process."""

    def __init__(self, runtime: RuntimeInfo | None = None) -> None:
        if runtime is None:
            runtime = PsutilRuntimeInfo()
        self._gauges: dict[str, Gauge] = {
            "starttime_ms": FunctionGauge("starttime_ms", runtime.start_time_ms, INT_SENTINEL),
            "uptime_ms": FunctionGauge("uptime_ms", runtime.uptime_ms, INT_SENTINEL),
        }

    def gauges(self) -> Mapping[str, Gauge]:
        return MappingProxyType(self._gauges)


__all__ = ["RuntimeGaugeSet"]
