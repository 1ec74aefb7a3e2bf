"""Module de logging."""

from inifile_utils.logging.base import Logger
from inifile_utils.logging.file_logger import FileLogger
from inifile_utils.logging.null_logger import NullLogger

__all__ = [
    "Logger",
    "FileLogger",
    "NullLogger",
]
