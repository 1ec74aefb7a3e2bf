"""Document INI mis en cache en mémoire.

Ce module fournit CachedIniFile : le fichier est lu une fois à la
construction, toutes les opérations travaillent sur les lignes en
mémoire, et le contenu n'est réécrit qu'au flush (update_file, close
ou sortie du bloc with). Les commentaires, lignes vides et lignes mal
formées sont conservés à l'identique.
"""

from pathlib import Path
from typing import Optional, Union

from inifile_utils.config.settings import IniFileSettings, build_logger
from inifile_utils.document.comments import strip_comments
from inifile_utils.document.lines import LineStore
from inifile_utils.document.typed import TypedIniFile
from inifile_utils.formatting.base import FormatProvider
from inifile_utils.formatting.cultures import get_culture
from inifile_utils.logging.base import Logger
from inifile_utils.logging.null_logger import NullLogger
from inifile_utils.storage.base import TextStorage
from inifile_utils.storage.linux import LinuxTextStorage


def _key_prefixes(key: str) -> tuple[str, str]:
    return (f"{key}=", f"{key} =")


class CachedIniFile(TypedIniFile):
    """Document INI ordonné, modifié en mémoire puis écrit au flush.

    Une section est l'en-tête [nom] et les lignes qui le suivent jusqu'au
    prochain en-tête. Seule la première section d'un nom donné est
    trouvée. Chaque recherche est un parcours linéaire des lignes.

    L'instance n'est pas thread-safe et aucun verrou de fichier n'est
    pris : deux instances sur le même chemin s'écrasent mutuellement
    au flush (le dernier l'emporte).

    Attributes:
        settings: Réglages de lecture/écriture.
        logger: Instance de Logger pour tracer les opérations.
        storage: Stockage des lignes (fichiers texte par défaut).

    Example:
        >>> with CachedIniFile("/etc/app.ini") as ini:
        ...     ini.write_integer("main", "retries", 3)
        ...     timeout = ini.read_float_invariant("main", "timeout", 1.5)
    """

    def __init__(
        self,
        file_name: Union[str, Path],
        storage: Optional[TextStorage] = None,
        logger: Optional[Logger] = None,
        format_provider: Optional[FormatProvider] = None,
        settings: Optional[IniFileSettings] = None,
    ) -> None:
        """Initialise le document et charge le fichier s'il existe.

        Args:
            file_name: Chemin du fichier associé.
            storage: Stockage injectable (défaut: LinuxTextStorage).
            logger: Logger injectable (défaut: NullLogger).
            format_provider: Culture par défaut des accesseurs typés
                (défaut: culture des réglages).
            settings: Réglages (défaut: IniFileSettings()).

        Raises:
            OSError: Si la lecture du fichier existant échoue.
        """
        self.settings = settings or IniFileSettings()
        super().__init__(format_provider or get_culture(self.settings.culture))
        self.logger = logger or NullLogger()
        self.storage = storage or LinuxTextStorage(
            self.logger,
            self.settings.encoding,
            self.settings.newline,
            self.settings.decode_errors,
        )
        self._file_name = str(file_name)
        self._lines = LineStore()
        self._closed = False

        if self.storage.exists(self._file_name):
            for line in self.storage.load_lines(self._file_name):
                self._lines.append(
                    line.strip() if self.settings.trim_lines else line
                )
            self.logger.log_info(
                f"Fichier {self._file_name} chargé "
                f"({self._lines.count()} lignes)."
            )
        else:
            self.logger.log_info(
                f"Fichier {self._file_name} absent : document vide."
            )

    def __enter__(self) -> "CachedIniFile":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    @property
    def file_name(self) -> str:
        return self._file_name

    def lines(self) -> list[str]:
        """Retourne une copie des lignes du document."""
        return self._lines.lines()

    def find_section(self, name: Optional[str]) -> Optional[int]:
        """Retourne l'index du premier en-tête [name], ou None."""
        if name is None:
            return None
        needle = f"[{name}]"
        for index, line in enumerate(self._lines):
            if strip_comments(line) == needle:
                return index
        return None

    def find_key(self, key: Optional[str], start: int) -> Optional[int]:
        """Retourne l'index de la première ligne key=... depuis start.

        La recherche n'est pas bornée par la section suivante.

        Args:
            key: Nom de la clé.
            start: Index de départ inclus.

        Returns:
            Index de la ligne trouvée, ou None.
        """
        if key is None:
            return None
        prefixes = _key_prefixes(key)
        for index in range(start, self._lines.count()):
            if strip_comments(self._lines.get(index)).startswith(prefixes):
                return index
        return None

    def section_exists(self, name: Optional[str]) -> bool:
        return self.find_section(name) is not None

    def delete_key(self, section: Optional[str], key: Optional[str]) -> None:
        """Supprime la première ligne brute commençant par key= ou key =.

        Le parcours part de l'en-tête de section et continue jusqu'à la
        fin du document : si la clé manque dans la section, une clé de
        même nom dans une section suivante est supprimée.
        """
        start = self.find_section(section)
        if start is None or key is None:
            return
        prefixes = _key_prefixes(key)
        for index in range(start, self._lines.count()):
            if self._lines.get(index).startswith(prefixes):
                self._lines.remove_at(index)
                self.logger.log_debug(
                    f"Clé {key} supprimée (ligne {index}) de [{section}]."
                )
                return

    def erase_section(self, section: Optional[str]) -> None:
        index = self.find_section(section)
        if index is None:
            return
        self._lines.remove_at(index)
        while index < self._lines.count():
            line = strip_comments(self._lines.get(index))
            if line.startswith("[") and line.endswith("]"):
                break
            self._lines.remove_at(index)
        self.logger.log_info(f"Section [{section}] supprimée.")

    def read_string(
        self,
        section: Optional[str],
        key: Optional[str],
        default: Optional[str] = "",
    ) -> Optional[str]:
        start = self.find_section(section)
        if start is None:
            return default
        index = self.find_key(key, start)
        if index is None:
            return default
        line = strip_comments(self._lines.get(index))
        return line.partition("=")[2].strip(' "\r')

    def write_string(
        self,
        section: Optional[str],
        key: Optional[str],
        value: Optional[str],
    ) -> None:
        """Écrit key=value ; crée la section ou la clé si nécessaire.

        Une clé existante est remplacée sur place (son commentaire en
        ligne est perdu). Une nouvelle clé devient la première entrée de
        sa section. Une nouvelle section est ajoutée en fin de document.
        """
        if section is None or key is None or value is None:
            return
        new_line = f"{key}={value}"
        start = self.find_section(section)
        if start is None:
            self._lines.append(f"[{section}]")
            self._lines.append(new_line)
            self.logger.log_debug(f"Section [{section}] créée.")
            return

        index = self.find_key(key, start + 1)
        if index is not None:
            self._lines.set(index, new_line)
        else:
            self._lines.insert_at(start + 1, new_line)

    def update_file(self) -> None:
        self.storage.save_lines(self._file_name, self._lines.lines())
        self.logger.log_info(
            f"Fichier {self._file_name} écrit "
            f"({self._lines.count()} lignes)."
        )

    def close(self) -> None:
        """Écrit le document sur le stockage ; sans effet s'il est déjà fermé.

        Raises:
            OSError: Si l'écriture échoue (le document reste ouvert).
        """
        if self._closed:
            return
        self.update_file()
        self._closed = True


def open_ini_file(
    file_name: Union[str, Path],
    settings: Optional[IniFileSettings] = None,
    storage: Optional[TextStorage] = None,
    logger: Optional[Logger] = None,
    format_provider: Optional[FormatProvider] = None,
) -> CachedIniFile:
    """Ouvre un document en construisant le logger depuis les réglages.

    Args:
        file_name: Chemin du fichier.
        settings: Réglages (défaut: IniFileSettings()).
        storage: Stockage injectable.
        logger: Logger prioritaire sur celui des réglages.
        format_provider: Culture prioritaire sur celle des réglages.

    Returns:
        Document prêt à l'emploi, utilisable dans un bloc with.
    """
    settings = settings or IniFileSettings()
    return CachedIniFile(
        file_name,
        storage=storage,
        logger=logger or build_logger(settings),
        format_provider=format_provider,
        settings=settings,
    )
