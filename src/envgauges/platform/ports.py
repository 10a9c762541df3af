"""Platform – MountPoint, FileSystemProvider, OperatingSystemInfo, RuntimeInfo ports.

Every reader here may block on a syscall (a hung network mount blocks
``MountPoint`` queries); no timeout is applied.
"""
from __future__ import annotations

import abc
from enum import Enum

from envgauges.errors import CapabilityUnavailableError


class MountPoint(abc.ABC):
    """A filesystem volume exposing capacity counters.

    Each space query may raise :class:`OSError` independently of the others.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Platform identifier, e.g. the backing device ``/dev/sda1``."""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Human-readable form, e.g. ``/mnt/data (/dev/sdb1)``."""

    @abc.abstractmethod
    def total_space(self) -> int: ...

    @abc.abstractmethod
    def unallocated_space(self) -> int:
        """Raw free bytes, including blocks reserved for privileged users."""

    @abc.abstractmethod
    def usable_space(self) -> int:
        """Free bytes available to the current user."""

    def __str__(self) -> str:
        return self.description


class FileSystemProvider(abc.ABC):
    """Port: enumerate visible mount points."""

    @abc.abstractmethod
    def mount_points(self) -> list[MountPoint]: ...


class Capability(str, Enum):
    """Optional OS counters that only some platforms expose."""

    SYSTEM_CPU_LOAD = "system_cpu_load"
    PROCESS_CPU_LOAD = "process_cpu_load"
    PROCESS_CPU_TIME = "process_cpu_time"
    COMMITTED_VIRTUAL_MEMORY_SIZE = "committed_virtual_memory_size"
    FREE_PHYSICAL_MEMORY_SIZE = "free_physical_memory_size"
    TOTAL_PHYSICAL_MEMORY_SIZE = "total_physical_memory_size"
    FREE_SWAP_SPACE_SIZE = "free_swap_space_size"
    TOTAL_SWAP_SPACE_SIZE = "total_swap_space_size"
    MAX_FILE_DESCRIPTOR_COUNT = "max_file_descriptor_count"
    OPEN_FILE_DESCRIPTOR_COUNT = "open_file_descriptor_count"

    def __str__(self) -> str:
        return self.value


class OperatingSystemInfo(abc.ABC):
    """Port: OS resource counters.

    The baseline (load average, processor count) is always present. The
    optional counters are addressed by :class:`Capability`; :meth:`read` raises
    :class:`CapabilityUnavailableError` for anything outside
    :meth:`capabilities`.
    """

    @abc.abstractmethod
    def system_load_average(self) -> float:
        """One-minute load average, or a negative value if unavailable."""

    @abc.abstractmethod
    def available_processors(self) -> int: ...

    @abc.abstractmethod
    def capabilities(self) -> frozenset[Capability]: ...

    @abc.abstractmethod
    def _read(self, capability: Capability) -> int | float: ...

    def read(self, capability: Capability) -> int | float:
        if capability not in self.capabilities():
            raise CapabilityUnavailableError(capability)
        return self._read(capability)


class RuntimeInfo(abc.ABC):
    """Port: process start time and uptime, both in milliseconds."""

    @abc.abstractmethod
    def start_time_ms(self) -> int:
        """Process start time as epoch milliseconds."""

    @abc.abstractmethod
    def uptime_ms(self) -> int: ...


__all__ = ["Capability", "FileSystemProvider", "MountPoint", "OperatingSystemInfo", "RuntimeInfo"]
