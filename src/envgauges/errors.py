"""Error hierarchy for envgauges.

Hierarchy::

    BaseError
    ├── GaugeError
    │   └── CapabilityUnavailableError
    └── ConfigError
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug.
        detail: Arbitrary extra context (serialisable dict).
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class GaugeError(BaseError):
    """Raised by gauge data sources."""

    default_code = "gauge_error"


class CapabilityUnavailableError(GaugeError):
    """The platform does not expose the requested optional counter."""

    default_code = "capability_unavailable"

    def __init__(self, capability: object, **kwargs: Any) -> None:
        super().__init__(
            f"Capability '{capability}' is not available on this platform",
            detail={"capability": str(capability)},
            **kwargs,
        )
        self.capability = capability


class ConfigError(BaseError):
    """Raised when configuration is invalid or loading failed."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "BaseError",
    "CapabilityUnavailableError",
    "ConfigError",
    "GaugeError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
