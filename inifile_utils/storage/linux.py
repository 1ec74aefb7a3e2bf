"""Implémentation Linux du stockage texte."""

from pathlib import Path
from typing import Iterable, Optional

from inifile_utils.logging.base import Logger
from inifile_utils.logging.null_logger import NullLogger
from inifile_utils.storage.base import PathLike, TextStorage


class LinuxTextStorage(TextStorage):
    """
    Stockage des documents dans des fichiers texte.

    Toutes les opérations sont loggées via l'instance Logger. Les
    erreurs d'entrée/sortie sont loggées puis propagées telles quelles.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        encoding: str = "utf-8",
        newline: str = "\n",
        errors: str = "replace",
    ) -> None:
        """
        Initialise le stockage.

        Args:
            logger: Instance de Logger pour le logging
            encoding: Encodage des fichiers
            newline: Fin de ligne écrite après chaque ligne
            errors: Traitement des octets non décodables en lecture
        """
        self.logger = logger or NullLogger()
        self.encoding = encoding
        self.newline = newline
        self.errors = errors

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def load_lines(self, path: PathLike) -> list[str]:
        """
        Lit toutes les lignes d'un fichier.

        Les fins de ligne \\n, \\r\\n et \\r sont reconnues. Avec
        errors="replace", un octet non décodable devient U+FFFD et la
        lecture continue.

        Raises:
            OSError: Si la lecture échoue
            UnicodeDecodeError: Si errors="strict" et qu'un octet est invalide
        """
        try:
            with open(
                path, 'r', encoding=self.encoding, errors=self.errors
            ) as f:
                lines = [line.rstrip('\n') for line in f]
        except (OSError, UnicodeDecodeError) as e:
            self.logger.log_error(
                f"Erreur lors de la lecture du fichier {path}: {e}"
            )
            raise
        self.logger.log_debug(f"Fichier {path} lu ({len(lines)} lignes).")
        return lines

    def save_lines(self, path: PathLike, lines: Iterable[str]) -> None:
        """
        Écrit chaque ligne suivie de la fin de ligne configurée.

        Raises:
            OSError: Si l'écriture échoue
        """
        try:
            with open(path, 'w', encoding=self.encoding, newline='') as f:
                for line in lines:
                    f.write(line)
                    f.write(self.newline)
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de l'écriture du fichier {path}: {e}"
            )
            raise
        self.logger.log_debug(f"Fichier {path} écrit avec succès.")
