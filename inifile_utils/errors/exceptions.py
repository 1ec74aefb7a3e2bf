"""
Module contenant les exceptions personnalisées pour inifile_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Les données absentes (section, clé, valeur illisible) ne lèvent jamais
d'exception : elles sont résolues par les valeurs par défaut fournies
par l'appelant.
"""


class IniFileError(Exception):
    """Exception de base pour toute la bibliothèque."""
    pass

class LineIndexError(IniFileError, IndexError):
    """Accès à une ligne hors de l'intervalle valide du document.

    Hérite aussi de IndexError : il s'agit d'une violation de
    précondition par l'appelant, pas d'une erreur récupérable.
    """

    def __init__(self, index: int, count: int) -> None:
        """Construit le message à partir de l'index fautif.

        Args:
            index: Index demandé.
            count: Nombre de lignes du document au moment de l'accès.
        """
        super().__init__(
            f"Index de ligne {index} hors limites (document de {count} lignes)"
        )
        self.index = index
        self.count = count

class ConfigurationError(IniFileError):
    """Exception de base pour toutes les Configurations."""
    pass

class FileConfigurationError(ConfigurationError):
    """Fichier de configuration introuvable, illisible ou non supporté."""
    pass

class UnknownCultureError(ConfigurationError):
    """Nom de culture absent du registre des formats."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Culture inconnue : {name!r}. "
            f"Cultures disponibles : {available}"
        )
        self.name = name
