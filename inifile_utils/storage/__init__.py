"""Module de stockage des documents."""

from inifile_utils.storage.base import TextStorage
from inifile_utils.storage.linux import LinuxTextStorage
from inifile_utils.storage.memory import MemoryTextStorage

__all__ = [
    "TextStorage",
    "LinuxTextStorage",
    "MemoryTextStorage",
]
