"""Platform – capability ports consumed by the gauge sets, and psutil adapters."""
from envgauges.platform.ports import (
    Capability,
    FileSystemProvider,
    MountPoint,
    OperatingSystemInfo,
    RuntimeInfo,
)
from envgauges.platform.psutil_adapters import (
    PsutilFileSystem,
    PsutilMountPoint,
    PsutilOperatingSystemInfo,
    PsutilRuntimeInfo,
)

__all__ = [
    "Capability",
    "FileSystemProvider",
    "MountPoint",
    "OperatingSystemInfo",
    "PsutilFileSystem",
    "PsutilMountPoint",
    "PsutilOperatingSystemInfo",
    "PsutilRuntimeInfo",
    "RuntimeInfo",
]
