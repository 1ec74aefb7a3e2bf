"""Module Document pour la manipulation de fichiers INI ligne à ligne.

Le document est une liste ordonnée de lignes : les lectures et écritures
préservent commentaires, lignes vides et ordre d'origine. Les
modifications restent en mémoire jusqu'au flush.

Classes principales:
    - IniFile: Interface abstraite d'un document INI
    - TypedIniFile: Accesseurs typés (bool, entier, flottant, date)
    - CachedIniFile: Implémentation en mémoire avec flush explicite
    - LineStore: Séquence mutable des lignes

Example:
    >>> from inifile_utils.document import CachedIniFile
    >>> with CachedIniFile("settings.ini") as ini:
    ...     ini.write_string("main", "name", "demo")
    ...     ini.read_bool("main", "enabled", False)
    False
"""

from inifile_utils.document.base import IniFile
from inifile_utils.document.cached import CachedIniFile, open_ini_file
from inifile_utils.document.comments import strip_comments
from inifile_utils.document.lines import LineStore
from inifile_utils.document.typed import TypedIniFile

__all__ = [
    "IniFile",
    "TypedIniFile",
    "CachedIniFile",
    "LineStore",
    "open_ini_file",
    "strip_comments",
]
