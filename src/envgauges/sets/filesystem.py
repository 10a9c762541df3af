"""Gauge sets – basic properties of the visible filesystems.

For each filesystem the following gauges are reported:

* ``fs.<name>.total_bytes`` – total number of bytes
* ``fs.<name>.used_bytes`` – total minus unallocated bytes
* ``fs.<name>.free_bytes`` – bytes usable by this process
* ``fs.<name>.used_pc`` – percentage used, from unallocated space
* ``fs.<name>.free_pc`` – percentage free, from unallocated space

``free_bytes`` honours quotas and reserved blocks while the percentages are
computed from raw unallocated space, so ``free_bytes`` and ``free_pc`` can
disagree.

Filesystem names are highly platform-specific. The default strategy escapes
:attr:`MountPoint.name`; :func:`name_by_mount_path` derives a name from the
mount path instead. Pass ``naming=`` or override
:meth:`FileSystemGaugeSet.fs_name` to plug in another scheme.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable

from envgauges.gauge import FLOAT_SENTINEL, INT_SENTINEL, FunctionGauge, Gauge, GaugeSet
from envgauges.observability.logging import get_logger
from envgauges.platform.ports import FileSystemProvider, MountPoint
from envgauges.platform.psutil_adapters import PsutilFileSystem

_log = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_]")

NamingStrategy = Callable[[MountPoint], str]


def escape_name(raw: str) -> str:
    """Replace every character outside ``[a-zA-Z0-9_]`` with ``_``."""
    return _UNSAFE_CHARS.sub("_", raw)


def name_by_name(mount: MountPoint) -> str:
    return escape_name(mount.name)


def name_by_mount_path(mount: MountPoint) -> str:
    """Name a filesystem after its mount path, best effort.

    Expects descriptions like ``/ (/dev/disk0s2)`` or ``/mnt/volume1 (/dev/sdb1)``,
    i.e. Unix-like platforms. ``/`` is named ``root``; other paths lose their
    leading ``/`` and are escaped. An empty path falls back to
    :func:`name_by_name`. There is no portable way to get at the real
    mount path from a :class:`MountPoint`, so treat the result as a heuristic.
    """
    description = mount.description
    try:
        # mount path is the first word
        path = description.split(" ", 1)[0]
    except (AttributeError, TypeError):
        path = str(description)

    if path == "/":
        return "root"
    if path.startswith("/"):
        path = path[1:]
    if not path:
        return name_by_name(mount)
    return escape_name(path)


def _ratio(numerator: float, denominator: float) -> float:
    """Float division with IEEE results (``nan``/``inf``) for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class FileSystemGaugeSet(GaugeSet):
    """Gauges for every filesystem visible through *file_system*.

    Args:
        file_system: Mount point enumerator; the psutil adapter when omitted.
        skip_zero_usable: Hide filesystems that report no usable space,
            typically pseudo filesystems of no monitoring interest.
        naming: Strategy turning a mount point into a metric-safe name.
    """

    def __init__(
        self,
        file_system: FileSystemProvider | None = None,
        skip_zero_usable: bool = True,
        naming: NamingStrategy = name_by_name,
    ) -> None:
        if file_system is None:
            file_system = PsutilFileSystem()
        self._file_system = file_system
        self._skip_zero_usable = skip_zero_usable
        self._naming = naming
        self._gauges = self._build()

    def gauges(self) -> Mapping[str, Gauge]:
        return MappingProxyType(self._gauges)

    def fs_name(self, mount: MountPoint) -> str:
        """Return the metric-safe name for *mount*."""
        return self._naming(mount)

    def _build(self) -> dict[str, Gauge]:
        gauges: dict[str, Gauge] = {}
        for mount in self._file_system.mount_points():
            try:
                usable = mount.usable_space()
            except OSError as exc:
                # no longer visible, e.g. a network filesystem that went away
                _log.debug("mount_point.skipped", mount=str(mount), reason="unreadable", error=repr(exc))
                continue
            if self._skip_zero_usable and usable == 0:
                _log.debug("mount_point.skipped", mount=str(mount), reason="zero_usable")
                continue

            for name, gauge in self._mount_gauges(mount).items():
                if name in gauges:
                    _log.debug("gauge.name_collision", gauge=name)
                gauges[name] = gauge
        return gauges

    def _mount_gauges(self, mount: MountPoint) -> dict[str, Gauge]:
        prefix = f"fs.{self.fs_name(mount)}"

        def used_bytes() -> int:
            return mount.total_space() - mount.unallocated_space()

        def used_pc() -> float:
            return (1.0 - _ratio(float(mount.unallocated_space()), float(mount.total_space()))) * 100.0

        def free_pc() -> float:
            return _ratio(float(mount.unallocated_space()), float(mount.total_space())) * 100.0

        specs: list[tuple[str, Callable[[], int | float], int | float]] = [
            ("total_bytes", mount.total_space, INT_SENTINEL),
            ("used_bytes", used_bytes, INT_SENTINEL),
            ("free_bytes", mount.usable_space, INT_SENTINEL),
            ("used_pc", used_pc, FLOAT_SENTINEL),
            ("free_pc", free_pc, FLOAT_SENTINEL),
        ]
        return {
            f"{prefix}.{suffix}": FunctionGauge(f"{prefix}.{suffix}", fn, sentinel)
            for suffix, fn, sentinel in specs
        }


__all__ = ["FileSystemGaugeSet", "NamingStrategy", "escape_name", "name_by_mount_path", "name_by_name"]
