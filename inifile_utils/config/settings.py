"""Réglages du document INI.

Les réglages proviennent, par ordre de priorité croissante :
des valeurs par défaut du modèle, d'un fichier TOML/JSON (table
``[inifile]`` ou niveau racine), puis des variables d'environnement
``INIFILE_<CHAMP>``. Un fichier ``.env`` optionnel est lu via
python-dotenv ; les variables déjà présentes dans le shell restent
prioritaires.
"""

import codecs
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, field_validator

from inifile_utils.config.loader import ConfigLoader, FileConfigLoader
from inifile_utils.formatting.cultures import available_cultures
from inifile_utils.logging import FileLogger, Logger, NullLogger

ENV_PREFIX = "INIFILE_"

NEWLINE_ALIASES = {
    "lf": "\n",
    "crlf": "\r\n",
    "cr": "\r",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class IniFileSettings(BaseModel):
    """Réglages de lecture/écriture d'un document INI.

    Attributes:
        encoding: Encodage du fichier sur disque.
        decode_errors: Traitement des octets non décodables (défaut:
            "replace", remplacés par U+FFFD).
        newline: Fin de ligne écrite après chaque ligne au flush.
        trim_lines: Supprime les blancs de chaque ligne au chargement.
        culture: Culture par défaut des accesseurs typés.
        log_file: Fichier de log ; None désactive le logging.
        log_level: Niveau de log du FileLogger.
    """

    encoding: str = "utf-8"
    decode_errors: str = "replace"
    newline: str = "\n"
    trim_lines: bool = True
    culture: str = "invariant"
    log_file: Optional[str] = None
    log_level: str = "INFO"

    model_config = {"extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def encoding_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Encodage inconnu : {v}")
        return v

    @field_validator("decode_errors")
    @classmethod
    def decode_errors_must_exist(cls, v: str) -> str:
        try:
            codecs.lookup_error(v)
        except LookupError:
            raise ValueError(f"Gestionnaire d'erreurs inconnu : {v}")
        return v

    @field_validator("newline")
    @classmethod
    def newline_must_be_terminator(cls, v: str) -> str:
        v = NEWLINE_ALIASES.get(v.lower(), v)
        if v not in NEWLINE_ALIASES.values():
            raise ValueError(
                "La fin de ligne doit être LF, CRLF ou CR"
            )
        return v

    @field_validator("culture")
    @classmethod
    def culture_must_be_registered(cls, v: str) -> str:
        if v not in available_cultures():
            raise ValueError(
                f"Culture inconnue : {v}. "
                f"Cultures disponibles : {available_cultures()}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Niveau de log invalide : {v}")
        return v


def _environment_overrides(
    environ: Mapping[str, Optional[str]]
) -> dict[str, Any]:
    """Extrait les champs INIFILE_* présents dans l'environnement."""
    overrides: dict[str, Any] = {}
    for name in IniFileSettings.model_fields:
        value = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings(
    config_path: Union[str, Path, None] = None,
    env_file: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_loader: Optional[ConfigLoader] = None,
) -> IniFileSettings:
    """Construit les réglages depuis fichier, .env et environnement.

    Args:
        config_path: Fichier TOML ou JSON optionnel.
        env_file: Fichier .env optionnel.
        environ: Environnement à utiliser (défaut: os.environ).
        config_loader: Chargeur injectable (défaut: FileConfigLoader).

    Returns:
        Réglages validés.

    Raises:
        FileConfigurationError: Si le fichier de configuration est
            absent, illisible ou non supporté.
        pydantic.ValidationError: Si une valeur est invalide.
    """
    data: dict[str, Any] = {}

    if config_path is not None:
        loader = config_loader or FileConfigLoader()
        raw = loader.load(config_path)
        section = raw.get("inifile")
        data.update(section if isinstance(section, dict) else raw)

    env: dict[str, Optional[str]] = {}
    if env_file is not None:
        env.update(dotenv_values(env_file))
    env.update(os.environ if environ is None else environ)
    data.update(_environment_overrides(env))

    return IniFileSettings.model_validate(data)


def build_logger(settings: IniFileSettings) -> Logger:
    """Crée le logger décrit par les réglages.

    Args:
        settings: Réglages validés.

    Returns:
        FileLogger si log_file est défini, NullLogger sinon.
    """
    if settings.log_file:
        return FileLogger(settings.log_file, level=settings.log_level)
    return NullLogger()
