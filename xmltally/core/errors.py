# File: xmltally/core/errors.py

from pathlib import Path
from typing import Optional


class XmlTallyError(Exception):
    """Base class for every error raised by xmltally."""


class XmlParseError(XmlTallyError):
    """
    A document could not be parsed as well-formed XML.
    Recoverable: the aggregator skips the file and keeps going.
    """

    def __init__(self, reason: str, path: Optional[Path] = None):
        self.reason = reason
        self.path = path
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{reason}")


class InvalidScanRootError(XmlTallyError):
    """
    The directory to scan does not exist or is not a directory.
    Fatal: nothing is scanned.
    """
