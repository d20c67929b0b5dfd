from pathlib import Path
from typing import Dict, List

from xmltally.core.config.settings import settings
from xmltally.features.aggregation.domain.models import ScanRequest, ScanResult
from ..domain.models import DocumentInsight
from ..data.console_style import ConsoleStyle

RULE_WIDTH = 60

def format_duration(seconds: float) -> str:
    """
    Human friendly elapsed time: "0.42s", "1m 05.3s", "1h 02m 03s".
    """
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{int(minutes)}m {secs:04.1f}s"
    hours, minutes = divmod(int(minutes), 60)
    return f"{hours}h {minutes:02d}m {int(secs):02d}s"

class ReportFormatter:
    """
    Renders a ScanResult as the plain-text console report.
    """

    def __init__(self, style: ConsoleStyle = None,
                 full_listing_limit: int = settings.FULL_LISTING_LIMIT,
                 truncated_listing_size: int = settings.TRUNCATED_LISTING_SIZE):
        self.style = style or ConsoleStyle(enabled=False)
        self.full_listing_limit = full_listing_limit
        self.truncated_listing_size = truncated_listing_size

    def render(self, result: ScanResult, request: ScanRequest) -> str:
        s = self.style
        lines = [
            "=" * RULE_WIDTH,
            s.heading("XML Tag Count Report"),
            "=" * RULE_WIDTH,
            f"Directory          : {request.root_directory}",
            f"Tag name           : {request.tag_name}",
            f"File patterns      : {', '.join(request.extensions)}",
            "-" * RULE_WIDTH,
        ]

        total = f"{result.total_count}"
        lines.append(f"Total occurrences  : {s.success(total) if result.total_count else s.warning(total)}")
        lines.append(f"Files processed    : {result.files_processed}")
        skipped = f"{result.files_skipped}"
        lines.append(f"Files skipped      : {s.warning(skipped) if result.files_skipped else skipped}")
        lines.append(f"Files with matches : {result.files_matched}")
        lines.append(f"Processing time    : {format_duration(result.elapsed_seconds)}")

        if result.per_file_counts:
            lines.append("-" * RULE_WIDTH)
            lines.append(s.bold("Occurrences per file:"))
            entries = {self._display_path(p, request): f"{c}" for p, c in result.per_file_counts.items()}
            lines.extend(self._listing(entries))

        if result.skipped_files:
            lines.append("-" * RULE_WIDTH)
            lines.append(s.warning("Skipped files (not well-formed XML):"))
            entries = {self._display_path(p, request): reason for p, reason in result.skipped_files.items()}
            lines.extend(self._listing(entries))

        if result.total_count == 0:
            lines.append("-" * RULE_WIDTH)
            lines.extend(self._troubleshooting(result, request))

        lines.append("=" * RULE_WIDTH)
        return "\n".join(lines)

    def render_insight(self, insight: DocumentInsight) -> str:
        s = self.style
        lines = [
            s.heading("Debug information"),
            f"File               : {insight.path}",
            f"Root element       : {insight.root_local_name}",
            f"Root namespace     : {insight.root_namespace or '(none)'}",
            s.bold(f"First {len(insight.samples)} element(s):"),
        ]
        for i, sample in enumerate(insight.samples, start=1):
            lines.append(
                f"  {i:>2}. local={sample.local_name} "
                f"qualified={sample.qualified_name} "
                f"namespace={sample.namespace or '(none)'}"
            )
        return "\n".join(lines)

    def _listing(self, entries: Dict[str, str]) -> List[str]:
        """
        Lists everything up to the full listing limit, otherwise only the
        head of the list followed by a remainder line.
        """
        items = list(entries.items())
        shown = items if len(items) <= self.full_listing_limit else items[:self.truncated_listing_size]
        lines = [f"  {name}: {value}" for name, value in shown]
        remaining = len(items) - len(shown)
        if remaining:
            lines.append(f"  ... and {remaining} more file(s)")
        return lines

    def _troubleshooting(self, result: ScanResult, request: ScanRequest) -> List[str]:
        lines = [self.style.warning(f"No <{request.tag_name}> elements were found."), "Troubleshooting:"]
        if result.files_seen == 0:
            lines.append(f"  - No files matched the patterns {', '.join(request.extensions)}; try --extensions.")
        else:
            lines.append(f"  - Tag names are case-sensitive; check the exact spelling of '{request.tag_name}'.")
            lines.append(f"  - Confirm the files matching {', '.join(request.extensions)} are the ones you expect.")
        lines.append("  - Re-run with --show-debug to see the element names of a sample file.")
        return lines

    @staticmethod
    def _display_path(path: Path, request: ScanRequest) -> str:
        try:
            return str(path.relative_to(request.root_directory.resolve()))
        except ValueError:
            return str(path)
