"""Gauge sets – basic operating system metrics.

``load.average`` and ``cpu.num_available`` are always reported. The remaining
gauges depend on counters only some platforms expose; each one is probed once
at construction and registered only when the probe returns a real value.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable

from envgauges.errors import CapabilityUnavailableError
from envgauges.gauge import FLOAT_SENTINEL, INT_SENTINEL, FunctionGauge, Gauge, GaugeSet, GaugeValue
from envgauges.observability.logging import get_logger
from envgauges.platform.ports import Capability, OperatingSystemInfo
from envgauges.platform.psutil_adapters import PsutilOperatingSystemInfo

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class OptionalGauge:
    """An opportunistic gauge: metric name, backing capability and failure sentinel."""

    name: str
    capability: Capability
    sentinel: GaugeValue


OPTIONAL_GAUGES: tuple[OptionalGauge, ...] = (
    OptionalGauge("cpu.usage", Capability.SYSTEM_CPU_LOAD, FLOAT_SENTINEL),
    OptionalGauge("cpu.process.usage", Capability.PROCESS_CPU_LOAD, FLOAT_SENTINEL),
    OptionalGauge("cpu.process.ns", Capability.PROCESS_CPU_TIME, INT_SENTINEL),
    OptionalGauge("mem.committed", Capability.COMMITTED_VIRTUAL_MEMORY_SIZE, INT_SENTINEL),
    OptionalGauge("mem.free", Capability.FREE_PHYSICAL_MEMORY_SIZE, INT_SENTINEL),
    OptionalGauge("mem.size", Capability.TOTAL_PHYSICAL_MEMORY_SIZE, INT_SENTINEL),
    OptionalGauge("swap.free", Capability.FREE_SWAP_SPACE_SIZE, INT_SENTINEL),
    OptionalGauge("swap.size", Capability.TOTAL_SWAP_SPACE_SIZE, INT_SENTINEL),
    OptionalGauge("file.descriptors.max", Capability.MAX_FILE_DESCRIPTOR_COUNT, INT_SENTINEL),
    OptionalGauge("file.descriptors.open", Capability.OPEN_FILE_DESCRIPTOR_COUNT, INT_SENTINEL),
)


class OperatingSystemGaugeSet(GaugeSet):
    """CPU, memory, swap and file-descriptor gauges for the host.

    Args:
        os_info: OS counter source; the psutil adapter when omitted.
    """

    def __init__(self, os_info: OperatingSystemInfo | None = None) -> None:
        if os_info is None:
            os_info = PsutilOperatingSystemInfo()
        self._os = os_info
        self._gauges = self._build()

    def gauges(self) -> Mapping[str, Gauge]:
        return MappingProxyType(self._gauges)

    def _build(self) -> dict[str, Gauge]:
        os_info = self._os
        gauges: dict[str, Gauge] = {
            "load.average": FunctionGauge("load.average", os_info.system_load_average, FLOAT_SENTINEL),
            "cpu.num_available": FunctionGauge("cpu.num_available", os_info.available_processors, INT_SENTINEL),
        }
        for spec in OPTIONAL_GAUGES:
            if self._probe(spec):
                gauges[spec.name] = FunctionGauge(spec.name, self._reader(spec.capability), spec.sentinel)
        return gauges

    def _probe(self, spec: OptionalGauge) -> bool:
        try:
            value = self._os.read(spec.capability)
        except CapabilityUnavailableError:
            _log.debug("capability.absent", gauge=spec.name, capability=str(spec.capability))
            return False
        except Exception as exc:  # noqa: BLE001
            _log.debug("capability.probe_failed", gauge=spec.name, capability=str(spec.capability), error=repr(exc))
            return False
        return value != spec.sentinel

    def _reader(self, capability: Capability) -> Callable[[], GaugeValue]:
        os_info = self._os

        def read() -> GaugeValue:
            return os_info.read(capability)

        return read


__all__ = ["OPTIONAL_GAUGES", "OperatingSystemGaugeSet", "OptionalGauge"]
