"""Gauge sets – filesystem, operating system and runtime gauges."""
from envgauges.sets.filesystem import FileSystemGaugeSet, escape_name, name_by_mount_path, name_by_name
from envgauges.sets.operating_system import OPTIONAL_GAUGES, OperatingSystemGaugeSet, OptionalGauge
from envgauges.sets.runtime import RuntimeGaugeSet

__all__ = [
    "FileSystemGaugeSet",
    "OPTIONAL_GAUGES",
    "OperatingSystemGaugeSet",
    "OptionalGauge",
    "RuntimeGaugeSet",
    "escape_name",
    "name_by_mount_path",
    "name_by_name",
]
