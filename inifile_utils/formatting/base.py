"""Interface abstraite du fournisseur de formats."""

from abc import ABC, abstractmethod
from datetime import datetime


class FormatProvider(ABC):
    """Interface pour la conversion texte des nombres et des dates.

    Les accesseurs typés du document INI délèguent toute conversion
    sensible à la culture à une instance de FormatProvider. Les
    méthodes parse_* lèvent ValueError sur un texte invalide.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom de la culture (ex: "invariant", "de-DE")."""
        pass

    @abstractmethod
    def format_float(self, value: float) -> str:
        """
        Formate un flottant.

        Args:
            value: Valeur à formater

        Returns:
            Texte aller-retour (relu à l'identique par parse_float)
        """
        pass

    @abstractmethod
    def parse_float(self, text: str) -> float:
        """
        Interprète un flottant.

        Args:
            text: Texte à interpréter

        Returns:
            Valeur lue

        Raises:
            ValueError: Si le texte n'est pas un nombre valide
        """
        pass

    @abstractmethod
    def format_datetime(self, value: datetime) -> str:
        """Formate une date selon le motif général de la culture."""
        pass

    @abstractmethod
    def parse_datetime(self, text: str) -> datetime:
        """
        Interprète une date librement selon les motifs de la culture.

        Raises:
            ValueError: Si aucun motif ne correspond
        """
        pass

    @abstractmethod
    def format_datetime_exact(self, value: datetime, pattern: str) -> str:
        """Formate une date selon un motif strftime explicite."""
        pass

    @abstractmethod
    def parse_datetime_exact(self, text: str, pattern: str) -> datetime:
        """
        Interprète une date selon un motif strptime explicite.

        Raises:
            ValueError: Si le texte ne respecte pas le motif
        """
        pass
