# File: tests/conftest.py

import pytest
import os
import sys
import logging
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())

from xmltally.features.aggregation.domain.models import ScanRequest


# --- Sample documents ---

PLAIN_TWO_RECORDS = """<?xml version="1.0" encoding="UTF-8"?>
<Batch>
    <RecordID>1</RecordID>
    <Item><RecordID>2</RecordID></Item>
</Batch>
"""

DEFAULT_NS_ONE_RECORD = """<?xml version="1.0"?>
<Batch xmlns="urn:example:records">
    <RecordID>3</RecordID>
</Batch>
"""

MALFORMED = """<Batch><RecordID>4</Batch>"""


@pytest.fixture(autouse=True)
def isolate_logging(caplog):
    """
    Captures xmltally warnings and undoes configure_logging() after each test,
    so a handler bound to one test's stderr never leaks into the next.
    """
    caplog.set_level(logging.WARNING, logger="xmltally")
    root = logging.getLogger()
    level = root.level

    yield

    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    """
    Factory: write_file("sub/a.xml", "<a/>") creates the file (and parents)
    under tmp_path and returns its path.
    """
    def _write(relative: str, content) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def record_tree(tmp_path, write_file):
    """
    /tmp_path
      a.xml            2 x <RecordID>
      nested/b.xml     1 x <RecordID> in a default namespace
    """
    write_file("a.xml", PLAIN_TWO_RECORDS)
    write_file("nested/b.xml", DEFAULT_NS_ONE_RECORD)
    return tmp_path


@pytest.fixture
def make_request():
    def _make(root, tag_name="RecordID", extensions=("*.xml", "*.out")):
        return ScanRequest(root_directory=root, tag_name=tag_name, extensions=extensions)

    return _make
