"""Module de formatage des valeurs typées.

Fournit l'interface FormatProvider, les cultures prédéfinies et les
conversions invariantes des booléens et des entiers.
"""

from inifile_utils.formatting.base import FormatProvider
from inifile_utils.formatting.cultures import (
    INVARIANT_CULTURE,
    CultureFormatProvider,
    available_cultures,
    get_culture,
)
from inifile_utils.formatting.invariant import (
    format_bool,
    format_integer,
    parse_bool,
    parse_integer,
)

__all__ = [
    "FormatProvider",
    "CultureFormatProvider",
    "INVARIANT_CULTURE",
    "available_cultures",
    "get_culture",
    "format_bool",
    "format_integer",
    "parse_bool",
    "parse_integer",
]
