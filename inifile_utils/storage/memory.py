"""Stockage en mémoire, sans accès disque."""

from typing import Iterable, Optional

from inifile_utils.storage.base import PathLike, TextStorage


class MemoryTextStorage(TextStorage):
    """Conserve les documents dans un dictionnaire {chemin: lignes}.

    Les chemins sont comparés sous leur forme texte.
    """

    def __init__(self, files: Optional[dict[str, list[str]]] = None) -> None:
        self.files: dict[str, list[str]] = {
            str(path): list(lines) for path, lines in (files or {}).items()
        }

    def exists(self, path: PathLike) -> bool:
        return str(path) in self.files

    def load_lines(self, path: PathLike) -> list[str]:
        try:
            return list(self.files[str(path)])
        except KeyError:
            raise FileNotFoundError(f"Document non trouvé : {path}") from None

    def save_lines(self, path: PathLike, lines: Iterable[str]) -> None:
        self.files[str(path)] = list(lines)
