from dataclasses import dataclass, field
from pathlib import Path
from typing import List

@dataclass(frozen=True)
class ElementSample:
    local_name: str
    qualified_name: str
    namespace: str = ""

@dataclass
class DocumentInsight:
    """
    Debug view of one document: its root element and the first few elements.
    """
    path: Path
    root_local_name: str
    root_namespace: str = ""
    samples: List[ElementSample] = field(default_factory=list)
