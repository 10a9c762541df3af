"""Testing fakes – scriptable platform sources and a recording Metrics backend."""
from __future__ import annotations

from typing import Any

from envgauges.observability.metrics import Metrics, SettableGauge
from envgauges.platform.ports import (
    Capability,
    FileSystemProvider,
    MountPoint,
    OperatingSystemInfo,
    RuntimeInfo,
)


class FakeMountPoint(MountPoint):
    """Mount point with mutable counters.

    Assign an exception instance to ``total``, ``unallocated`` or ``usable`` to
    make the matching query raise it.

    Usage::

        mount = FakeMountPoint("sda1", "/ (/dev/sda1)", total=1000, unallocated=400, usable=300)
        mount.usable = OSError("stale NFS handle")
    """

    def __init__(
        self,
        name: str,
        description: Any = None,
        *,
        total: int | BaseException = 0,
        unallocated: int | BaseException = 0,
        usable: int | BaseException = 0,
    ) -> None:
        self._name = name
        self._description = description if description is not None else name
        self.total = total
        self.unallocated = unallocated
        self.usable = usable
        self.reads = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Any:
        return self._description

    def _get(self, value: int | BaseException) -> int:
        self.reads += 1
        if isinstance(value, BaseException):
            raise value
        return value

    def total_space(self) -> int:
        return self._get(self.total)

    def unallocated_space(self) -> int:
        return self._get(self.unallocated)

    def usable_space(self) -> int:
        return self._get(self.usable)

    def __str__(self) -> str:
        return str(self._description)


class FakeFileSystem(FileSystemProvider):
    def __init__(self, *mounts: MountPoint) -> None:
        self.mounts = list(mounts)

    def mount_points(self) -> list[MountPoint]:
        return list(self.mounts)


class FakeOperatingSystemInfo(OperatingSystemInfo):
    """OS info whose optional counters come from a dict.

    Only keys of *counters* are advertised as capabilities. A value may be an
    exception instance, raised on read.
    """

    def __init__(
        self,
        counters: dict[Capability, int | float | BaseException] | None = None,
        *,
        load_average: float = 0.5,
        processors: int = 4,
    ) -> None:
        self.counters = dict(counters or {})
        self.load_average = load_average
        self.processors = processors

    def system_load_average(self) -> float:
        return self.load_average

    def available_processors(self) -> int:
        return self.processors

    def capabilities(self) -> frozenset[Capability]:
        return frozenset(self.counters)

    def _read(self, capability: Capability) -> int | float:
        value = self.counters[capability]
        if isinstance(value, BaseException):
            raise value
        return value


class FakeRuntimeInfo(RuntimeInfo):
    def __init__(self, start_time_ms: int = 1_767_268_800_000, uptime_ms: int = 0) -> None:
        self.start = start_time_ms
        self.uptime = uptime_ms

    def start_time_ms(self) -> int:
        return self.start

    def uptime_ms(self) -> int:
        return self.uptime


class _FakeGauge(SettableGauge):
    """In-memory gauge that records all set() calls."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.current: float | None = None
        self._calls: list[tuple[float, dict[str, str] | None]] = []

    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        self.current = value
        self._calls.append((value, labels))

    @property
    def call_count(self) -> int:
        return len(self._calls)


class FakeMetricsRegistry(Metrics):
    """In-memory :class:`Metrics` double that records gauge writes.

    Usage::

        metrics = FakeMetricsRegistry()
        registry.publish(metrics)
        metrics.assert_gauge_value("process.starttime_ms", 1767268800000)
    """

    def __init__(self) -> None:
        self._gauges: dict[str, _FakeGauge] = {}

    def gauge(self, name: str, description: str = "", unit: str = "") -> _FakeGauge:
        if name not in self._gauges:
            self._gauges[name] = _FakeGauge(name)
        return self._gauges[name]

    @property
    def names(self) -> set[str]:
        return set(self._gauges)

    def assert_gauge_value(self, name: str, value: float) -> None:
        """Assert that *name* gauge currently holds *value*."""
        gauge = self._gauges.get(name)
        assert gauge is not None, f"Gauge '{name}' was never created"
        assert gauge.current == value, f"Gauge '{name}' is {gauge.current}, expected {value}"

    def reset(self) -> None:
        self._gauges.clear()


__all__ = [
    "FakeFileSystem",
    "FakeMetricsRegistry",
    "FakeMountPoint",
    "FakeOperatingSystemInfo",
    "FakeRuntimeInfo",
]
