"""
Logger Service Handlers.

Each handler installs one loguru sink:
- ConsoleHandler: coloured stdout output
- FileHandler: rotating, compressed log files
"""

from .console_handler import ConsoleHandler
from .file_handler import FileHandler

__all__ = ["ConsoleHandler", "FileHandler"]
