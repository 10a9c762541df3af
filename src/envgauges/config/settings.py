"""Config – Settings base class, EnvSettingsLoader and GaugeSettings."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, ClassVar, TypeVar

from envgauges.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables named ``<PREFIX>_<FIELD>``."""

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            kwargs[field.name] = self._coerce(raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        origin = getattr(type_hint, "__origin__", None)
        if type_hint is bool or type_hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int or type_hint == "int":
            return int(value)
        if type_hint is float or type_hint == "float":
            return float(value)
        if origin is list or (isinstance(type_hint, str) and type_hint.startswith("list")):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


FS_NAMING_CHOICES = frozenset({"name", "mount_path"})


@dataclasses.dataclass
class GaugeSettings(Settings):
    """Knobs for :func:`envgauges.bootstrap.build_registry`.

    Loaded from ``ENVGAUGES_*`` variables, e.g. ``ENVGAUGES_SKIP_ZERO_USABLE=false``.
    A non-empty ``log_level`` makes :func:`build_registry` call
    :func:`envgauges.observability.logging.configure_logging`.
    """

    _prefix: ClassVar[str] = "ENVGAUGES"

    skip_zero_usable: bool = True
    fs_naming: str = "name"
    all_partitions: bool = False
    fs_prefix: str = "system"
    os_prefix: str = "system"
    runtime_prefix: str = "process"
    log_level: str = ""

    def _validate(self) -> None:
        if self.fs_naming not in FS_NAMING_CHOICES:
            raise InvalidSettingValueError(
                "fs_naming", self.fs_naming, f"expected one of {sorted(FS_NAMING_CHOICES)}"
            )


__all__ = ["EnvSettingsLoader", "FS_NAMING_CHOICES", "GaugeSettings", "Settings", "SettingsLoader"]
