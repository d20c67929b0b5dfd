# File: xmltally/core/logging_config.py

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """
    Sends log records to stderr so they never mix with the report on stdout.
    Only the CLI calls this; library modules just use getLogger(__name__).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
