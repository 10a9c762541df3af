"""Gauge – Gauge and GaugeSet ports."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Union

GaugeValue = Union[int, float]

INT_SENTINEL: int = -1
FLOAT_SENTINEL: float = -1.0


class Gauge(abc.ABC):
    """A zero-argument numeric reading evaluated on demand.

    ``value()`` must never raise: implementations report a failed read as a
    sentinel (:data:`INT_SENTINEL` or :data:`FLOAT_SENTINEL`).
    """

    @abc.abstractmethod
    def value(self) -> GaugeValue: ...

    def __call__(self) -> GaugeValue:
        return self.value()


class GaugeSet(abc.ABC):
    """A collection of gauges whose membership is fixed at construction."""

    @abc.abstractmethod
    def gauges(self) -> Mapping[str, Gauge]: ...


__all__ = ["FLOAT_SENTINEL", "INT_SENTINEL", "Gauge", "GaugeSet", "GaugeValue"]
