"""Testing – in-memory doubles for the platform ports and the Metrics port."""
from envgauges.testing.fakes import (
    FakeFileSystem,
    FakeMetricsRegistry,
    FakeMountPoint,
    FakeOperatingSystemInfo,
    FakeRuntimeInfo,
)

__all__ = [
    "FakeFileSystem",
    "FakeMetricsRegistry",
    "FakeMountPoint",
    "FakeOperatingSystemInfo",
    "FakeRuntimeInfo",
]
