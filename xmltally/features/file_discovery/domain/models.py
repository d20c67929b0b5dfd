from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True, order=True)
class FileCandidate:
    """
    A file selected by discovery as eligible for parsing.
    The path is canonical (absolute, symlinks resolved), which makes
    candidates safe to deduplicate in a set.
    """
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "FileCandidate":
        return cls(path=Path(path).resolve())

    @property
    def name(self) -> str:
        return self.path.name
