"""Platform – psutil-backed implementations of the platform ports."""
from __future__ import annotations

import os
import time
from typing import Any, Callable

import psutil

from envgauges.platform.ports import (
    Capability,
    FileSystemProvider,
    MountPoint,
    OperatingSystemInfo,
    RuntimeInfo,
)


class PsutilMountPoint(MountPoint):
    """A partition reported by :func:`psutil.disk_partitions`."""

    def __init__(self, device: str, mountpoint: str, fstype: str = "") -> None:
        self._device = device
        self._mountpoint = mountpoint
        self._fstype = fstype

    @classmethod
    def from_partition(cls, partition: Any) -> PsutilMountPoint:
        return cls(partition.device, partition.mountpoint, partition.fstype)

    @property
    def name(self) -> str:
        return self._device

    @property
    def description(self) -> str:
        return f"{self._mountpoint} ({self._device})"

    @property
    def mountpoint(self) -> str:
        return self._mountpoint

    @property
    def fstype(self) -> str:
        return self._fstype

    def total_space(self) -> int:
        return psutil.disk_usage(self._mountpoint).total

    def unallocated_space(self) -> int:
        if hasattr(os, "statvfs"):
            st = os.statvfs(self._mountpoint)
            return st.f_bfree * st.f_frsize
        return psutil.disk_usage(self._mountpoint).free

    def usable_space(self) -> int:
        return psutil.disk_usage(self._mountpoint).free

    def __repr__(self) -> str:
        return f"PsutilMountPoint(device={self._device!r}, mountpoint={self._mountpoint!r})"


class PsutilFileSystem(FileSystemProvider):
    """Enumerate mount points through psutil.

    ``all_partitions=True`` also lists pseudo filesystems (``proc``, ``sysfs``...).
    """

    def __init__(self, all_partitions: bool = False) -> None:
        self._all = all_partitions

    def mount_points(self) -> list[MountPoint]:
        return [PsutilMountPoint.from_partition(p) for p in psutil.disk_partitions(all=self._all)]


class PsutilOperatingSystemInfo(OperatingSystemInfo):
    """OS counters from psutil.

    CPU loads are fractions in ``[0, 1]``; process CPU time is in nanoseconds.
    File-descriptor counters are advertised only where psutil supports them.
    """

    def __init__(self, process: psutil.Process | None = None) -> None:
        self._process = process or psutil.Process()
        self._readers: dict[Capability, Callable[[], int | float]] = {
            Capability.SYSTEM_CPU_LOAD: self._system_cpu_load,
            Capability.PROCESS_CPU_LOAD: self._process_cpu_load,
            Capability.PROCESS_CPU_TIME: self._process_cpu_time,
            Capability.COMMITTED_VIRTUAL_MEMORY_SIZE: lambda: self._process.memory_info().vms,
            Capability.FREE_PHYSICAL_MEMORY_SIZE: lambda: psutil.virtual_memory().free,
            Capability.TOTAL_PHYSICAL_MEMORY_SIZE: lambda: psutil.virtual_memory().total,
            Capability.FREE_SWAP_SPACE_SIZE: lambda: psutil.swap_memory().free,
            Capability.TOTAL_SWAP_SPACE_SIZE: lambda: psutil.swap_memory().total,
        }
        if hasattr(psutil, "RLIMIT_NOFILE") and hasattr(self._process, "rlimit"):
            self._readers[Capability.MAX_FILE_DESCRIPTOR_COUNT] = self._max_fds
        if hasattr(self._process, "num_fds"):
            self._readers[Capability.OPEN_FILE_DESCRIPTOR_COUNT] = self._process.num_fds

    def system_load_average(self) -> float:
        try:
            return psutil.getloadavg()[0]
        except (AttributeError, OSError):
            return -1.0

    def available_processors(self) -> int:
        return psutil.cpu_count(logical=True) or 1

    def capabilities(self) -> frozenset[Capability]:
        return frozenset(self._readers)

    def _read(self, capability: Capability) -> int | float:
        return self._readers[capability]()

    def _system_cpu_load(self) -> float:
        return psutil.cpu_percent(interval=None) / 100.0

    def _process_cpu_load(self) -> float:
        return self._process.cpu_percent(interval=None) / (100.0 * self.available_processors())

    def _process_cpu_time(self) -> int:
        times = self._process.cpu_times()
        return int((times.user + times.system) * 1_000_000_000)

    def _max_fds(self) -> int:
        soft, _hard = self._process.rlimit(psutil.RLIMIT_NOFILE)
        return soft


class PsutilRuntimeInfo(RuntimeInfo):
    """Start time and uptime of the current process.

    Uptime is anchored to :func:`time.monotonic` at construction so wall-clock
    adjustments never make it go backwards.
    """

    def __init__(self, process: psutil.Process | None = None) -> None:
        process = process or psutil.Process()
        self._start_ms = int(process.create_time() * 1000)
        self._anchor_uptime_ms = time.time() * 1000 - self._start_ms
        self._anchor_monotonic = time.monotonic()

    def start_time_ms(self) -> int:
        return self._start_ms

    def uptime_ms(self) -> int:
        elapsed = time.monotonic() - self._anchor_monotonic
        return int(self._anchor_uptime_ms + elapsed * 1000)


__all__ = [
    "PsutilFileSystem",
    "PsutilMountPoint",
    "PsutilOperatingSystemInfo",
    "PsutilRuntimeInfo",
]
