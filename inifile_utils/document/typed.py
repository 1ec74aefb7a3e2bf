"""Accesseurs typés construits sur la lecture/écriture texte."""

from datetime import datetime
from typing import Any, Callable, Optional, TypeVar

from inifile_utils.document.base import IniFile
from inifile_utils.formatting.base import FormatProvider
from inifile_utils.formatting.cultures import INVARIANT_CULTURE
from inifile_utils.formatting.invariant import (
    format_bool,
    format_integer,
    parse_bool,
    parse_integer,
)

T = TypeVar("T")


class TypedIniFile(IniFile):
    """Document INI avec conversions booléen, entier, flottant et date.

    Chaque lecture retourne la valeur par défaut si la clé est absente
    ou si le texte ne peut pas être interprété. Les conversions
    sensibles à la culture utilisent le fournisseur passé en argument,
    sinon celui du document.

    Attributes:
        format_provider: Fournisseur par défaut des conversions
            flottant/date (invariant si non précisé).
    """

    def __init__(self, format_provider: Optional[FormatProvider] = None) -> None:
        self.format_provider = format_provider or INVARIANT_CULTURE

    def _provider(self, provider: Optional[FormatProvider]) -> FormatProvider:
        return provider or self.format_provider

    def _read_typed(
        self,
        section: Optional[str],
        key: Optional[str],
        default: T,
        parse: Callable[[str], T],
    ) -> T:
        text = self.read_string(section, key, None)
        if text is None:
            return default
        try:
            return parse(text)
        except ValueError:
            return default

    def _write_typed(
        self,
        section: Optional[str],
        key: Optional[str],
        value: Any,
        fmt: Callable[[Any], str],
    ) -> None:
        if value is None:
            return
        self.write_string(section, key, fmt(value))

    def read_bool(
        self, section: Optional[str], key: Optional[str], default: bool
    ) -> bool:
        """Lit "true"/"false" (casse ignorée)."""
        return self._read_typed(section, key, default, parse_bool)

    def write_bool(
        self, section: Optional[str], key: Optional[str], value: bool
    ) -> None:
        """Écrit "True" ou "False"."""
        self._write_typed(section, key, value, format_bool)

    def read_integer(
        self, section: Optional[str], key: Optional[str], default: int
    ) -> int:
        """Lit un entier base 10 indépendant de la culture."""
        return self._read_typed(section, key, default, parse_integer)

    def write_integer(
        self, section: Optional[str], key: Optional[str], value: int
    ) -> None:
        """Écrit un entier base 10 indépendant de la culture."""
        self._write_typed(section, key, value, format_integer)

    def read_float(
        self,
        section: Optional[str],
        key: Optional[str],
        default: float,
        provider: Optional[FormatProvider] = None,
    ) -> float:
        """Lit un flottant selon la culture donnée ou celle du document.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            default: Retournée si la clé est absente ou illisible.
            provider: Culture de lecture (ex: "1,23" en de-DE).

        Returns:
            Valeur lue ou default.
        """
        return self._read_typed(
            section, key, default, self._provider(provider).parse_float
        )

    def read_float_invariant(
        self, section: Optional[str], key: Optional[str], default: float
    ) -> float:
        """Lit un flottant avec le point comme séparateur décimal."""
        return self.read_float(section, key, default, INVARIANT_CULTURE)

    def write_float(
        self,
        section: Optional[str],
        key: Optional[str],
        value: float,
        provider: Optional[FormatProvider] = None,
    ) -> None:
        """Écrit un flottant selon la culture donnée ou celle du document."""
        formatter = self._provider(provider).format_float
        self._write_typed(
            section, key, value, lambda v: formatter(float(v))
        )

    def write_float_invariant(
        self, section: Optional[str], key: Optional[str], value: float
    ) -> None:
        """Écrit un flottant avec le point comme séparateur décimal."""
        self.write_float(section, key, value, INVARIANT_CULTURE)

    def read_datetime(
        self,
        section: Optional[str],
        key: Optional[str],
        default: datetime,
        provider: Optional[FormatProvider] = None,
    ) -> datetime:
        """Lit une date selon les motifs de la culture, puis ISO 8601."""
        return self._read_typed(
            section, key, default, self._provider(provider).parse_datetime
        )

    def read_datetime_exact(
        self,
        section: Optional[str],
        key: Optional[str],
        pattern: str,
        default: datetime,
        provider: Optional[FormatProvider] = None,
    ) -> datetime:
        """Lit une date qui doit respecter exactement le motif strptime.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            pattern: Motif strptime (ex: "%Y-%m-%d").
            default: Retournée si la clé est absente ou illisible.
            provider: Fournisseur de formats.

        Returns:
            Date lue ou default.
        """
        parser = self._provider(provider).parse_datetime_exact
        return self._read_typed(
            section, key, default, lambda text: parser(text, pattern)
        )

    def write_datetime(
        self,
        section: Optional[str],
        key: Optional[str],
        value: datetime,
        provider: Optional[FormatProvider] = None,
    ) -> None:
        """Écrit une date selon le motif général de la culture."""
        self._write_typed(
            section, key, value, self._provider(provider).format_datetime
        )

    def write_datetime_exact(
        self,
        section: Optional[str],
        key: Optional[str],
        value: datetime,
        pattern: str,
        provider: Optional[FormatProvider] = None,
    ) -> None:
        """Écrit une date selon un motif strftime explicite."""
        formatter = self._provider(provider).format_datetime_exact
        self._write_typed(
            section, key, value, lambda v: formatter(v, pattern)
        )
