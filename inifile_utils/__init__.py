"""
IniFile Utils - Manipulation de fichiers INI préservant l'ordre.

Modules disponibles:
- document: Document INI en mémoire (CachedIniFile, LineStore)
- formatting: Conversions typées et cultures (FormatProvider)
- storage: Lecture/écriture des lignes (TextStorage, LinuxTextStorage)
- config: Réglages (IniFileSettings, TOML, JSON, .env)
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions de la bibliothèque
"""

__version__ = "1.0.0"

from inifile_utils.logging import Logger, FileLogger, NullLogger
from inifile_utils.errors import (
    IniFileError,
    LineIndexError,
    ConfigurationError,
    FileConfigurationError,
    UnknownCultureError,
)
from inifile_utils.formatting import (
    FormatProvider,
    CultureFormatProvider,
    INVARIANT_CULTURE,
    available_cultures,
    get_culture,
)
from inifile_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    IniFileSettings,
    build_logger,
    load_settings,
)
from inifile_utils.storage import (
    TextStorage,
    LinuxTextStorage,
    MemoryTextStorage,
)
from inifile_utils.document import (
    IniFile,
    TypedIniFile,
    CachedIniFile,
    LineStore,
    open_ini_file,
    strip_comments,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "NullLogger",
    # Errors
    "IniFileError",
    "LineIndexError",
    "ConfigurationError",
    "FileConfigurationError",
    "UnknownCultureError",
    # Formatting
    "FormatProvider",
    "CultureFormatProvider",
    "INVARIANT_CULTURE",
    "available_cultures",
    "get_culture",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "IniFileSettings",
    "build_logger",
    "load_settings",
    # Storage
    "TextStorage",
    "LinuxTextStorage",
    "MemoryTextStorage",
    # Document
    "IniFile",
    "TypedIniFile",
    "CachedIniFile",
    "LineStore",
    "open_ini_file",
    "strip_comments",
]
