"""Interface abstraite d'un document INI modifiable.

Ce module définit le contrat (ABC) commun aux documents INI : recherche
de sections, lecture et écriture de valeurs texte, suppression de clés
et de sections, et écriture du cache sur le stockage.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IniFile(ABC):
    """Interface pour un document INI dont l'ordre est préservé.

    Les sections et les clés absentes ne lèvent jamais d'exception :
    les lectures retournent la valeur par défaut et les suppressions
    ne font rien. Les arguments None des écritures sont ignorés.
    """

    @property
    @abstractmethod
    def file_name(self) -> str:
        """Chemin du fichier associé."""
        pass

    @abstractmethod
    def section_exists(self, name: Optional[str]) -> bool:
        """Indique si la section [name] existe.

        Args:
            name: Nom exact de la section (sensible à la casse).

        Returns:
            True si un en-tête correspondant est présent.
        """
        pass

    @abstractmethod
    def delete_key(self, section: Optional[str], key: Optional[str]) -> None:
        """Supprime la première ligne key=... à partir de la section.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
        """
        pass

    @abstractmethod
    def erase_section(self, section: Optional[str]) -> None:
        """Supprime l'en-tête de section et tout son contenu.

        Args:
            section: Nom de la section à supprimer.
        """
        pass

    @abstractmethod
    def read_string(
        self,
        section: Optional[str],
        key: Optional[str],
        default: Optional[str] = "",
    ) -> Optional[str]:
        """Lit la valeur texte d'une clé.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            default: Retournée si la section ou la clé est absente.

        Returns:
            Valeur sans commentaire, sans espaces ni guillemets autour.
        """
        pass

    @abstractmethod
    def write_string(
        self,
        section: Optional[str],
        key: Optional[str],
        value: Optional[str],
    ) -> None:
        """Écrit key=value dans la section, en la créant si besoin.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            value: Valeur texte écrite telle quelle.
        """
        pass

    @abstractmethod
    def update_file(self) -> None:
        """Écrit le contenu en cache sur le stockage.

        Raises:
            OSError: Si l'écriture échoue.
        """
        pass
