# File: xmltally/core/common/enums.py

from enum import Enum, unique

@unique
class OutcomeStatus(str, Enum):
    PARSED = "parsed"
    FAILED = "failed"
