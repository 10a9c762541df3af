"""Gauge – FunctionGauge, a gauge backed by a closure."""
from __future__ import annotations

from typing import Callable

from envgauges.gauge.ports import Gauge, GaugeValue
from envgauges.observability.logging import get_logger

_log = get_logger(__name__)


class FunctionGauge(Gauge):
    """Evaluate *fn* on every read, returning *sentinel* if it raises.

    Usage::

        gauge = FunctionGauge("fs.root.total_bytes", store.total_space, sentinel=-1)
        gauge()  # -> 500107862016, or -1 when the read fails
    """

    def __init__(self, name: str, fn: Callable[[], GaugeValue], sentinel: GaugeValue) -> None:
        self._name = name
        self._fn = fn
        self._sentinel = sentinel

    @property
    def name(self) -> str:
        return self._name

    @property
    def sentinel(self) -> GaugeValue:
        return self._sentinel

    def value(self) -> GaugeValue:
        try:
            return self._fn()
        except Exception as exc:  # noqa: BLE001
            _log.debug("gauge.read_failed", gauge=self._name, error=repr(exc))
            return self._sentinel

    def __repr__(self) -> str:
        return f"FunctionGauge(name={self._name!r}, sentinel={self._sentinel!r})"


__all__ = ["FunctionGauge"]
