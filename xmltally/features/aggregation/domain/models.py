from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple

from xmltally.core.config.settings import settings
from xmltally.features.file_discovery.data.pattern_rules import PatternRules

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to count one tag across a directory tree.
    """
    root_directory: Path
    tag_name: str
    extensions: Tuple[str, ...] = field(
        default_factory=lambda: PatternRules.parse_extensions(settings.DEFAULT_EXTENSIONS)
    )

    def __post_init__(self):
        if not self.root_directory.exists():
            raise FileNotFoundError(f"Scan root not found: {self.root_directory}")
        if not self.root_directory.is_dir():
            raise NotADirectoryError(f"Scan root is not a directory: {self.root_directory}")
        if not self.tag_name:
            raise ValueError("Tag name must not be empty")

        # Ordered set: keep first occurrence of each pattern
        object.__setattr__(self, "extensions", tuple(dict.fromkeys(self.extensions)))
        if not self.extensions:
            raise ValueError("At least one file pattern is required")

@dataclass(frozen=True)
class ScanResult:
    """
    Report returned after scanning completes.
    per_file_counts only holds files with at least one match, ordered by path.
    Two results compare equal regardless of how long the scans took.
    """
    total_count: int = 0
    per_file_counts: Dict[Path, int] = field(default_factory=dict)
    files_processed: int = 0
    files_skipped: int = 0
    skipped_files: Dict[Path, str] = field(default_factory=dict)
    elapsed_seconds: float = field(default=0.0, compare=False)

    @property
    def files_matched(self) -> int:
        return len(self.per_file_counts)

    @property
    def files_seen(self) -> int:
        return self.files_processed + self.files_skipped

@dataclass
class ScanResultBuilder:
    """
    Mutable accumulator used while the scan runs.
    """
    total_count: int = 0
    per_file_counts: Dict[Path, int] = field(default_factory=dict)
    files_processed: int = 0
    files_skipped: int = 0
    skipped_files: Dict[Path, str] = field(default_factory=dict)

    def add_match(self, path: Path, count: int) -> None:
        self.files_processed += 1
        if count > 0:
            self.per_file_counts[path] = count
            self.total_count += count

    def add_skip(self, path: Path, reason: str) -> None:
        self.files_skipped += 1
        self.skipped_files[path] = reason

    def build(self, elapsed_seconds: float) -> ScanResult:
        return ScanResult(
            total_count=self.total_count,
            per_file_counts=dict(sorted(self.per_file_counts.items())),
            files_processed=self.files_processed,
            files_skipped=self.files_skipped,
            skipped_files=dict(sorted(self.skipped_files.items())),
            elapsed_seconds=elapsed_seconds,
        )
