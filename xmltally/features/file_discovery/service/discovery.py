import logging
from pathlib import Path
from typing import Iterable, List, Set

from ..domain.interfaces import IFileWalker
from ..domain.models import FileCandidate
from ..data.file_walker import LocalFileWalker
from ..data.pattern_rules import PatternRules

logger = logging.getLogger(__name__)

class FileDiscovery:
    """
    Facade for the File Discovery Feature.
    Walks a directory tree and collects files matching any of the glob patterns.
    """

    def __init__(self, walker: IFileWalker = None):
        self.walker = walker or LocalFileWalker()

    def discover(self, root_directory: Path, extensions: Iterable[str]) -> Set[FileCandidate]:
        """
        Returns the deduplicated set of candidates below root_directory.
        A file matched by several patterns, or reachable through a symlink,
        appears once. No matches gives an empty set.
        """
        patterns = tuple(extensions)
        candidates: Set[FileCandidate] = set()

        for file_path in self.walker.walk(Path(root_directory)):
            if not PatternRules.matches(file_path.name, patterns):
                continue

            candidate = FileCandidate.from_path(file_path)
            # A symlink may point outside the tree or at a directory
            if not candidate.path.is_file():
                logger.debug(f"Ignoring {file_path}: not a regular file")
                continue
            candidates.add(candidate)

        logger.info(f"Discovered {len(candidates)} file(s) under {root_directory} matching {', '.join(patterns)}")
        return candidates

    def discover_sorted(self, root_directory: Path, extensions: Iterable[str]) -> List[FileCandidate]:
        """Same as discover(), in deterministic path order."""
        return sorted(self.discover(root_directory, extensions))

# Singleton Instance for easy import
discovery = FileDiscovery()

def discover(root_directory: Path, extensions: Iterable[str]) -> Set[FileCandidate]:
    return discovery.discover(root_directory, extensions)
