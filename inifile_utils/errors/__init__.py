"""Module de gestion des erreurs."""

from inifile_utils.errors.exceptions import (IniFileError,
                                             LineIndexError,
                                             ConfigurationError,
                                             FileConfigurationError,
                                             UnknownCultureError)


__all__ = [
    "IniFileError",
    "LineIndexError",
    "ConfigurationError",
    "FileConfigurationError",
    "UnknownCultureError",
]
