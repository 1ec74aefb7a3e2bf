"""Module de configuration."""

from inifile_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
)
from inifile_utils.config.settings import (
    IniFileSettings,
    build_logger,
    load_settings,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "IniFileSettings",
    "build_logger",
    "load_settings",
]
