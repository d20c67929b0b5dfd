import logging
import os
from pathlib import Path
from typing import Iterator
from ..domain.interfaces import IFileWalker

logger = logging.getLogger(__name__)

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Symlinked directories are not followed, so a link cycle cannot loop the walk.
    """

    def walk(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_error, followlinks=False):
            for filename in filenames:
                yield Path(dirpath) / filename

    @staticmethod
    def _on_error(error: OSError) -> None:
        # Best-effort walk: permission problems on a sub-tree are not fatal
        logger.debug(f"Skipping unreadable directory {error.filename}: {error.strerror}")
