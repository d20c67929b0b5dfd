from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from xmltally.core.common.enums import OutcomeStatus

@dataclass(frozen=True)
class Parsed:
    """
    A file that parsed cleanly, reduced to the multiset of its element local names.
    """
    path: Path
    element_local_names: Counter = field(default_factory=Counter)
    status: OutcomeStatus = field(default=OutcomeStatus.PARSED, init=False)

    def count(self, tag_name: str) -> int:
        return self.element_local_names[tag_name]

@dataclass(frozen=True)
class Failed:
    """
    A file that could not be read or is not well-formed XML.
    """
    path: Path
    reason: str
    status: OutcomeStatus = field(default=OutcomeStatus.FAILED, init=False)

    def count(self, tag_name: str) -> int:
        return 0

# Created once per file, consumed by the aggregator, then dropped
ParseOutcome = Union[Parsed, Failed]
