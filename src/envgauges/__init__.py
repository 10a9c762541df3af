"""
envgauges – operating-environment gauges for metrics collectors.

Import path convention::

    from envgauges.gauge import Gauge, GaugeSet, GaugeRegistry
    from envgauges.sets import FileSystemGaugeSet, OperatingSystemGaugeSet, RuntimeGaugeSet
    from envgauges.bootstrap import build_registry
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
