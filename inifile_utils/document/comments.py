"""Normalisation des lignes pour les comparaisons structurelles."""

from typing import Optional

COMMENT_CHAR = ";"


def strip_comments(line: Optional[str]) -> str:
    """Retire le commentaire (à partir du premier ';') et les blancs.

    Il n'existe pas d'échappement : un ';' dans une valeur ouvre
    toujours un commentaire.

    Args:
        line: Ligne brute, ou None.

    Returns:
        Ligne normalisée ; chaîne vide pour None.
    """
    if line is None:
        return ""
    return line.partition(COMMENT_CHAR)[0].strip()
