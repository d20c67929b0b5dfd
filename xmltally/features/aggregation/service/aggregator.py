import logging
import time
from typing import Callable, Iterable, Optional
from pathlib import Path

from xmltally.core.common.enums import OutcomeStatus
from xmltally.features.file_discovery.domain.models import FileCandidate
from xmltally.features.tag_counting.service.counter import TagCountingService, tag_counting
from ..domain.models import ScanResult, ScanResultBuilder

logger = logging.getLogger(__name__)

ProgressCb = Callable[[int, int, Path], None]  # (index, total, current_path)

def aggregate(candidates: Iterable[FileCandidate],
              tag_name: str,
              on_progress: Optional[ProgressCb] = None,
              counter: TagCountingService = tag_counting) -> ScanResult:
    """
    Parses every candidate and folds the outcomes into a ScanResult.

    Files are processed in path order so repeated runs report identically.
    A file that fails to parse is counted as skipped and the batch goes on.
    """
    ordered = sorted(set(candidates))
    total = len(ordered)
    builder = ScanResultBuilder()
    t0 = time.perf_counter()

    for index, candidate in enumerate(ordered, start=1):
        outcome = counter.parse_file(candidate.path)

        if outcome.status == OutcomeStatus.PARSED:
            builder.add_match(candidate.path, outcome.count(tag_name))
        else:
            logger.warning(f"Skipping {candidate.path}: {outcome.reason}")
            builder.add_skip(candidate.path, outcome.reason)

        if on_progress:
            on_progress(index, total, candidate.path)

    return builder.build(elapsed_seconds=time.perf_counter() - t0)
