"""Bootstrap – build a GaugeRegistry holding the standard gauge sets."""
from __future__ import annotations

from envgauges.config.settings import EnvSettingsLoader, GaugeSettings
from envgauges.gauge import GaugeRegistry
from envgauges.observability.logging import configure_logging, get_logger
from envgauges.platform.ports import FileSystemProvider, OperatingSystemInfo, RuntimeInfo
from envgauges.platform.psutil_adapters import PsutilFileSystem
from envgauges.sets import (
    FileSystemGaugeSet,
    OperatingSystemGaugeSet,
    RuntimeGaugeSet,
    name_by_mount_path,
    name_by_name,
)

_log = get_logger(__name__)

_NAMING = {
    "name": name_by_name,
    "mount_path": name_by_mount_path,
}


def build_registry(
    settings: GaugeSettings | None = None,
    *,
    file_system: FileSystemProvider | None = None,
    os_info: OperatingSystemInfo | None = None,
    runtime: RuntimeInfo | None = None,
) -> GaugeRegistry:
    """Construct the filesystem, OS and runtime gauge sets and register them.

    *settings* defaults to ``GaugeSettings`` loaded from ``ENVGAUGES_*``
    environment variables. Any platform source left as ``None`` uses its psutil
    adapter.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(GaugeSettings)
    if settings.log_level:
        configure_logging(settings.log_level)
    if file_system is None:
        file_system = PsutilFileSystem(all_partitions=settings.all_partitions)

    registry = GaugeRegistry()
    registry.register(
        settings.fs_prefix,
        FileSystemGaugeSet(
            file_system,
            skip_zero_usable=settings.skip_zero_usable,
            naming=_NAMING[settings.fs_naming],
        ),
    )
    registry.register(settings.os_prefix, OperatingSystemGaugeSet(os_info))
    registry.register(settings.runtime_prefix, RuntimeGaugeSet(runtime))
    _log.info("registry.built", gauges=len(registry))
    return registry


__all__ = ["build_registry"]
