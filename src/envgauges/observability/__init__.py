"""Observability – structured logging and the metrics push port."""

from envgauges.observability.logging import configure_logging, get_logger
from envgauges.observability.metrics import Metrics, NoopMetrics, SettableGauge

__all__ = ["Metrics", "NoopMetrics", "SettableGauge", "configure_logging", "get_logger"]
