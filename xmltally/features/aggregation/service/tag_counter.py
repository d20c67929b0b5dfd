import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from xmltally.core.common.enums import OutcomeStatus
from xmltally.features.file_discovery.service.discovery import FileDiscovery
from xmltally.features.tag_counting.service.counter import TagCountingService
from ..domain.models import ScanRequest, ScanResult
from .aggregator import aggregate

logger = logging.getLogger(__name__)

class TagCounter:
    """
    High-level API: discovery + counting + aggregation for one ScanRequest.
    Not safe to share between threads.
    """

    def __init__(self, discovery: FileDiscovery = None, counter: TagCountingService = None):
        self.discovery = discovery or FileDiscovery()
        self.counter = counter or TagCountingService()

    def scan(self, request: ScanRequest, show_progress: bool = False) -> ScanResult:
        logger.info(f"Starting scan of: {request.root_directory} for <{request.tag_name}>")

        candidates = self.discovery.discover_sorted(request.root_directory, request.extensions)

        if not show_progress:
            result = aggregate(candidates, request.tag_name, counter=self.counter)
        else:
            # Progress goes to stderr so stdout carries only the report
            with tqdm(total=len(candidates), desc="Scanning", unit="file", file=sys.stderr) as bar:
                def on_progress(index: int, total: int, path: Path) -> None:
                    bar.set_postfix_str(path.name, refresh=False)
                    bar.update(1)

                result = aggregate(candidates, request.tag_name, on_progress=on_progress, counter=self.counter)

        logger.info(
            f"Scan complete. {result.total_count} match(es) in {result.files_matched} file(s); "
            f"processed {result.files_processed}, skipped {result.files_skipped}"
        )
        return result

    def pick_debug_target(self, request: ScanRequest, result: ScanResult) -> Optional[Path]:
        """
        The file worth inspecting with --show-debug: the first one with matches,
        else the first one that parsed at all (useful when nothing matched).
        """
        if result.per_file_counts:
            return next(iter(result.per_file_counts))

        for candidate in self.discovery.discover_sorted(request.root_directory, request.extensions):
            if candidate.path in result.skipped_files:
                continue
            if self.counter.parse_file(candidate.path).status == OutcomeStatus.PARSED:
                return candidate.path
        return None
