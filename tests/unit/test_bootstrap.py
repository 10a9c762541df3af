"""Unit tests for build_registry."""

from __future__ import annotations

import logging

import pytest
import structlog

from envgauges.bootstrap import build_registry
from envgauges.config import GaugeSettings
from envgauges.observability.logging import PACKAGE_LOGGER
from envgauges.platform.ports import Capability
from envgauges.testing import (
    FakeFileSystem,
    FakeMetricsRegistry,
    FakeMountPoint,
    FakeOperatingSystemInfo,
    FakeRuntimeInfo,
)


@pytest.fixture
def sources() -> dict:
    return {
        "file_system": FakeFileSystem(
            FakeMountPoint("/dev/sda1", "/ (/dev/sda1)", total=1000, unallocated=400, usable=300),
            FakeMountPoint("proc", "/proc (proc)", total=0, unallocated=0, usable=0),
        ),
        "os_info": FakeOperatingSystemInfo({Capability.TOTAL_PHYSICAL_MEMORY_SIZE: 8192}),
        "runtime": FakeRuntimeInfo(start_time_ms=10, uptime_ms=20),
    }


class TestBuildRegistry:
    def test_default_prefixes(self, sources: dict) -> None:
        registry = build_registry(GaugeSettings(), **sources)
        assert registry.snapshot() == {
            "system.fs._dev_sda1.total_bytes": 1000,
            "system.fs._dev_sda1.used_bytes": 600,
            "system.fs._dev_sda1.free_bytes": 300,
            "system.fs._dev_sda1.used_pc": pytest.approx(60.0),
            "system.fs._dev_sda1.free_pc": pytest.approx(40.0),
            "system.load.average": 0.5,
            "system.cpu.num_available": 4,
            "system.mem.size": 8192,
            "process.starttime_ms": 10,
            "process.uptime_ms": 20,
        }

    def test_settings_drive_construction(self, sources: dict) -> None:
        settings = GaugeSettings(
            skip_zero_usable=False,
            fs_naming="mount_path",
            fs_prefix="disk",
            os_prefix="host",
            runtime_prefix="jvm",
        )
        names = set(build_registry(settings, **sources).gauges())
        assert "disk.fs.root.total_bytes" in names
        assert "disk.fs.proc.total_bytes" in names
        assert "host.mem.size" in names
        assert "jvm.uptime_ms" in names

    def test_settings_loaded_from_env(self, sources: dict, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVGAUGES_FS_NAMING", "mount_path")
        monkeypatch.setenv("ENVGAUGES_RUNTIME_PREFIX", "rt")
        names = set(build_registry(**sources).gauges())
        assert "system.fs.root.free_bytes" in names
        assert "rt.starttime_ms" in names

    def test_publish(self, sources: dict) -> None:
        metrics = FakeMetricsRegistry()
        build_registry(GaugeSettings(), **sources).publish(metrics)
        metrics.assert_gauge_value("process.uptime_ms", 20)
        metrics.assert_gauge_value("system.fs._dev_sda1.used_bytes", 600)

    def test_real_host(self) -> None:
        registry = build_registry(GaugeSettings())
        values = registry.snapshot()
        assert values["process.uptime_ms"] >= 0
        assert values["system.cpu.num_available"] >= 1
        assert all(isinstance(v, (int, float)) for v in values.values())

    def test_log_level_setting_configures_package_logger(self, sources: dict) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        handlers, level, propagate = list(package.handlers), package.level, package.propagate
        try:
            build_registry(GaugeSettings(log_level="debug"), **sources)
            assert package.level == logging.DEBUG
            assert any(h.get_name() == "envgauges.json" for h in package.handlers)
        finally:
            structlog.reset_defaults()
            package.handlers[:] = handlers
            package.setLevel(level)
            package.propagate = propagate

    def test_logging_left_alone_by_default(self, sources: dict) -> None:
        package = logging.getLogger(PACKAGE_LOGGER)
        handlers = list(package.handlers)
        build_registry(GaugeSettings(), **sources)
        assert package.handlers == handlers
