"""Interface abstraite du stockage texte ligne à ligne."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]


class TextStorage(ABC):
    """Interface pour le stockage des lignes d'un document."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """
        Vérifie si le document existe.

        Args:
            path: Chemin du document

        Returns:
            True si le document existe, False sinon
        """
        pass

    @abstractmethod
    def load_lines(self, path: PathLike) -> list[str]:
        """
        Lit toutes les lignes du document, sans fin de ligne.

        Args:
            path: Chemin du document

        Returns:
            Lignes dans l'ordre du fichier

        Raises:
            OSError: Si la lecture échoue
        """
        pass

    @abstractmethod
    def save_lines(self, path: PathLike, lines: Iterable[str]) -> None:
        """
        Écrit toutes les lignes, en créant ou tronquant le document.

        Args:
            path: Chemin du document
            lines: Lignes à écrire

        Raises:
            OSError: Si l'écriture échoue
        """
        pass
