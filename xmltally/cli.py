# File: xmltally/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from xmltally.core.config.settings import settings
from xmltally.core.errors import InvalidScanRootError, XmlParseError
from xmltally.core.logging_config import configure_logging
from xmltally.features.aggregation.domain.models import ScanRequest
from xmltally.features.aggregation.service.tag_counter import TagCounter
from xmltally.features.file_discovery.data.pattern_rules import PatternRules
from xmltally.features.reporting.data.console_style import ConsoleStyle
from xmltally.features.reporting.data.xml_inspector import inspect_document
from xmltally.features.reporting.service.formatter import ReportFormatter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_ROOT = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Count XML elements by local name across a directory tree, ignoring namespaces.",
    )
    parser.add_argument("-d", "--directory", required=True, help="Root directory to scan recursively.")
    parser.add_argument("-t", "--tag-name", required=True, help="Element local name to count (case-sensitive).")
    parser.add_argument(
        "-e", "--extensions",
        default=settings.DEFAULT_EXTENSIONS,
        help="Comma separated file name patterns (default: %(default)s).",
    )
    parser.add_argument("--show-debug", action="store_true", help="Print root element and a sample of elements.")
    parser.add_argument("--show-progress", action="store_true", help="Show a progress bar with ETA on stderr.")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output.")
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: %(default)s).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    return parser


def build_request(directory: str, tag_name: str, extensions) -> ScanRequest:
    """
    Raises:
        InvalidScanRootError if the directory is missing or not a directory.
    """
    try:
        return ScanRequest(root_directory=Path(directory), tag_name=tag_name, extensions=tuple(extensions))
    except (FileNotFoundError, NotADirectoryError) as e:
        raise InvalidScanRootError(str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 1. Validate the cheap stuff before touching the filesystem
    if not args.tag_name.strip():
        parser.error("--tag-name must not be empty")
    try:
        extensions = PatternRules.parse_extensions(args.extensions)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.log_level)
    style = ConsoleStyle(enabled=settings.USE_COLOR and not args.no_color and sys.stdout.isatty())

    # 2. Fatal: bad root directory, nothing gets scanned
    try:
        request = build_request(args.directory, args.tag_name, extensions)
    except InvalidScanRootError as e:
        print(style.error(f"Error: {e}"), file=sys.stderr)
        return EXIT_INVALID_ROOT

    # 3. Scan
    counter = TagCounter()
    result = counter.scan(request, show_progress=args.show_progress)

    # 4. Report
    formatter = ReportFormatter(style=style)
    print(formatter.render(result, request))

    if args.show_debug:
        target = counter.pick_debug_target(request, result)
        if target is None:
            print(style.warning("Debug: no parsable file to inspect."))
        else:
            try:
                print()
                print(formatter.render_insight(inspect_document(target)))
            except XmlParseError as e:
                logger.warning(f"Could not inspect {target}: {e.reason}")
            except OSError as e:
                logger.warning(f"Could not read {target}: {e}")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
