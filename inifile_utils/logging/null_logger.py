"""Logger silencieux utilisé quand aucun logger n'est injecté."""

from inifile_utils.logging.base import Logger


class NullLogger(Logger):
    """Logger qui ignore tous les messages."""

    def log_debug(self, message: str) -> None:
        pass

    def log_info(self, message: str) -> None:
        pass

    def log_warning(self, message: str) -> None:
        pass

    def log_error(self, message: str) -> None:
        pass
