"""Observability – push-style Metrics port used by GaugeRegistry.publish()."""
from __future__ import annotations

import abc


class SettableGauge(abc.ABC):
    """Backend gauge instrument that accepts an absolute value."""

    @abc.abstractmethod
    def set(self, value: float, labels: dict[str, str] | None = None) -> None: ...


class Metrics(abc.ABC):
    """Port: factory for backend gauge instruments."""

    @abc.abstractmethod
    def gauge(self, name: str, description: str = "", unit: str = "") -> SettableGauge: ...


class _NoopGauge(SettableGauge):
    def set(self, value: float, labels: dict[str, str] | None = None) -> None:
        pass


class NoopMetrics(Metrics):
    """Silent no-op metrics (useful when no backend is configured)."""

    def gauge(self, name: str, description: str = "", unit: str = "") -> SettableGauge:
        return _NoopGauge()


__all__ = ["Metrics", "NoopMetrics", "SettableGauge"]
