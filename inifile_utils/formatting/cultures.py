"""Cultures de formatage prédéfinies.

Chaque culture est une dataclass immuable décrivant les séparateurs
numériques et les motifs de date. Le registre ne contient aucun état
global modifiable : la culture par défaut d'un document est passée
explicitement à sa construction.
"""

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from inifile_utils.errors.exceptions import UnknownCultureError
from inifile_utils.formatting.base import FormatProvider

# À partir de ce seuil, repr() passe en notation exponentielle.
_INTEGRAL_LIMIT = 1e16


@dataclass(frozen=True)
class CultureFormatProvider(FormatProvider):
    """Fournisseur de formats décrit par une culture.

    Les nombres acceptent un signe, des chiffres, le séparateur décimal
    de la culture et un exposant. Le séparateur de milliers n'est pas
    accepté en lecture et n'est jamais écrit.

    Attributes:
        culture_name: Nom de la culture.
        decimal_separator: Séparateur décimal.
        group_separator: Séparateur de milliers (informatif).
        short_date_pattern: Motif strftime de la date courte.
        long_time_pattern: Motif strftime de l'heure longue.
        nan_symbol: Texte de NaN.
        positive_infinity_symbol: Texte de +inf.
        negative_infinity_symbol: Texte de -inf.
        am_designator: Indicateur du matin, écrit à la place de %p.
        pm_designator: Indicateur de l'après-midi, écrit à la place de %p.
    """

    culture_name: str
    decimal_separator: str = "."
    group_separator: str = ","
    short_date_pattern: str = "%m/%d/%Y"
    long_time_pattern: str = "%H:%M:%S"
    nan_symbol: str = "NaN"
    positive_infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"
    am_designator: str = "AM"
    pm_designator: str = "PM"

    @property
    def name(self) -> str:
        return self.culture_name

    @property
    def general_pattern(self) -> str:
        """Motif date courte + heure longue."""
        return f"{self.short_date_pattern} {self.long_time_pattern}"

    def _number_pattern(self) -> re.Pattern:
        sep = re.escape(self.decimal_separator)
        return re.compile(
            rf"[+-]?(?:[0-9]+(?:{sep}[0-9]*)?|{sep}[0-9]+)"
            r"(?:[eE][+-]?[0-9]+)?"
        )

    def format_float(self, value: float) -> str:
        if math.isnan(value):
            return self.nan_symbol
        if math.isinf(value):
            if value > 0:
                return self.positive_infinity_symbol
            return self.negative_infinity_symbol

        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
            return str(int(value))

        mantissa, _, exponent = repr(value).partition("e")
        mantissa = mantissa.replace(".", self.decimal_separator)
        if not exponent:
            return mantissa
        power = int(exponent)
        sign = "+" if power >= 0 else "-"
        return f"{mantissa}E{sign}{abs(power):02d}"

    def parse_float(self, text: str) -> float:
        stripped = text.strip()
        if stripped == self.nan_symbol:
            return math.nan
        if stripped == self.positive_infinity_symbol:
            return math.inf
        if stripped == self.negative_infinity_symbol:
            return -math.inf

        if not self._number_pattern().fullmatch(stripped):
            raise ValueError(
                f"Nombre invalide pour la culture {self.name} : {text!r}"
            )
        return float(stripped.replace(self.decimal_separator, "."))

    def _with_designator(self, pattern: str, designator: str) -> str:
        return pattern.replace("%p", designator.replace("%", "%%"))

    def _strftime(self, value: datetime, pattern: str) -> str:
        if "%p" in pattern:
            designator = (
                self.pm_designator if value.hour >= 12 else self.am_designator
            )
            pattern = self._with_designator(pattern, designator)
        return value.strftime(pattern)

    def _strptime(self, text: str, pattern: str) -> datetime:
        """Lit une date ; %p est remplacé par les indicateurs de la culture.

        Sans %p, strptime lit %I 12 comme 0 heure : l'après-midi est
        obtenu en ajoutant douze heures.
        """
        if "%p" not in pattern:
            return datetime.strptime(text, pattern)
        for designator, offset in (
            (self.am_designator, 0),
            (self.pm_designator, 12),
        ):
            try:
                parsed = datetime.strptime(
                    text, self._with_designator(pattern, designator)
                )
            except ValueError:
                continue
            if parsed.hour < 12:
                parsed += timedelta(hours=offset)
            return parsed
        raise ValueError(
            f"time data {text!r} does not match format {pattern!r}"
        )

    def format_datetime(self, value: datetime) -> str:
        return self._strftime(value, self.general_pattern)

    def parse_datetime(self, text: str) -> datetime:
        stripped = text.strip()
        patterns = (
            self.general_pattern,
            f"{self.short_date_pattern} %H:%M:%S",
            self.short_date_pattern,
        )
        for pattern in patterns:
            try:
                return self._strptime(stripped, pattern)
            except ValueError:
                continue
        try:
            return datetime.fromisoformat(stripped)
        except ValueError:
            raise ValueError(
                f"Date invalide pour la culture {self.name} : {text!r}"
            ) from None

    def format_datetime_exact(self, value: datetime, pattern: str) -> str:
        return self._strftime(value, pattern)

    def parse_datetime_exact(self, text: str, pattern: str) -> datetime:
        return self._strptime(text, pattern)


INVARIANT_CULTURE = CultureFormatProvider("invariant")

_CULTURES: dict[str, CultureFormatProvider] = {
    culture.name: culture
    for culture in (
        INVARIANT_CULTURE,
        CultureFormatProvider(
            "en-US",
            long_time_pattern="%I:%M:%S %p",
            negative_infinity_symbol="-∞",
            positive_infinity_symbol="∞",
        ),
        CultureFormatProvider(
            "en-GB",
            short_date_pattern="%d/%m/%Y",
            negative_infinity_symbol="-∞",
            positive_infinity_symbol="∞",
        ),
        CultureFormatProvider(
            "de-DE",
            decimal_separator=",",
            group_separator=".",
            short_date_pattern="%d.%m.%Y",
            negative_infinity_symbol="-∞",
            positive_infinity_symbol="∞",
        ),
        CultureFormatProvider(
            "fr-FR",
            decimal_separator=",",
            group_separator=" ",
            short_date_pattern="%d/%m/%Y",
            negative_infinity_symbol="-∞",
            positive_infinity_symbol="∞",
        ),
    )
}


def available_cultures() -> list[str]:
    """Liste les noms de cultures enregistrées."""
    return list(_CULTURES)


def get_culture(name: str) -> CultureFormatProvider:
    """
    Retourne la culture enregistrée sous ce nom.

    Args:
        name: Nom de la culture (ex: "de-DE")

    Returns:
        Fournisseur de formats correspondant

    Raises:
        UnknownCultureError: Si la culture n'existe pas
    """
    try:
        return _CULTURES[name]
    except KeyError:
        raise UnknownCultureError(name, available_cultures()) from None
