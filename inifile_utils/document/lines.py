"""Stockage ordonné des lignes d'un document INI."""

from typing import Iterable, Iterator

from inifile_utils.errors.exceptions import LineIndexError


class LineStore:
    """Séquence mutable de lignes de texte.

    Seule représentation physique du document : commentaires, lignes
    vides et lignes mal formées sont conservés tels quels. Les index
    négatifs sont refusés (pas de parcours depuis la fin).
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def _check_index(self, index: int, upper: int) -> None:
        if not 0 <= index < upper:
            raise LineIndexError(index, len(self._lines))

    def count(self) -> int:
        """Retourne le nombre de lignes."""
        return len(self._lines)

    def get(self, index: int) -> str:
        """
        Retourne la ligne à l'index donné.

        Raises:
            LineIndexError: Si index n'est pas dans [0, count)
        """
        self._check_index(index, len(self._lines))
        return self._lines[index]

    def set(self, index: int, line: str) -> None:
        """
        Remplace la ligne à l'index donné.

        Raises:
            LineIndexError: Si index n'est pas dans [0, count)
        """
        self._check_index(index, len(self._lines))
        self._lines[index] = line

    def append(self, line: str) -> None:
        """Ajoute une ligne en fin de document."""
        self._lines.append(line)

    def insert_at(self, index: int, line: str) -> None:
        """
        Insère une ligne ; les lignes suivantes sont décalées.

        Raises:
            LineIndexError: Si index n'est pas dans [0, count]
        """
        self._check_index(index, len(self._lines) + 1)
        self._lines.insert(index, line)

    def remove_at(self, index: int) -> None:
        """
        Supprime une ligne ; les lignes suivantes remontent.

        Raises:
            LineIndexError: Si index n'est pas dans [0, count)
        """
        self._check_index(index, len(self._lines))
        del self._lines[index]

    def lines(self) -> list[str]:
        """Retourne une copie des lignes."""
        return list(self._lines)
