"""Gauge – named on-demand numeric readings and their collections."""
from envgauges.gauge.ports import FLOAT_SENTINEL, INT_SENTINEL, Gauge, GaugeSet, GaugeValue
from envgauges.gauge.function import FunctionGauge
from envgauges.gauge.registry import GaugeRegistry

__all__ = [
    "FLOAT_SENTINEL",
    "FunctionGauge",
    "Gauge",
    "GaugeRegistry",
    "GaugeSet",
    "GaugeValue",
    "INT_SENTINEL",
]
