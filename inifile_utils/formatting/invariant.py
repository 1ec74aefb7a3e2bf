"""Conversions indépendantes de la culture (booléens et entiers)."""

import re

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def format_bool(value: bool) -> str:
    """Retourne "True" ou "False"."""
    return "True" if value else "False"


def parse_bool(text: str) -> bool:
    """
    Interprète "true"/"false" sans tenir compte de la casse.

    Les blancs autour du texte sont ignorés.

    Raises:
        ValueError: Pour tout autre texte
    """
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ValueError(f"Booléen invalide : {text!r}")


def format_integer(value: int) -> str:
    """Formate un entier en base 10 sans séparateur de milliers."""
    return str(int(value))


def parse_integer(text: str) -> int:
    """
    Interprète un entier en base 10.

    Accepte des blancs autour et un signe optionnel ; refuse les
    séparateurs de milliers, les tirets bas et les chiffres non ASCII.

    Raises:
        ValueError: Si le texte n'est pas un entier valide
    """
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"Entier invalide : {text!r}")
    return int(text)
