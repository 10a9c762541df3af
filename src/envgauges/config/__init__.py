"""Config – 12-factor settings for gauge construction."""

from envgauges.config.settings import EnvSettingsLoader, GaugeSettings, Settings, SettingsLoader

__all__ = ["EnvSettingsLoader", "GaugeSettings", "Settings", "SettingsLoader"]
