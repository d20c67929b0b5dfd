from fnmatch import fnmatchcase
from typing import Iterable, Tuple

class PatternRules:
    """
    Central logic for which file names the scanner picks up.
    """

    @staticmethod
    def parse_extensions(raw: str) -> Tuple[str, ...]:
        """
        Splits a comma separated pattern list ("*.xml, *.out") into an
        ordered, duplicate-free tuple.
        """
        patterns = []
        for part in raw.split(","):
            pattern = part.strip()
            if pattern and pattern not in patterns:
                patterns.append(pattern)

        if not patterns:
            raise ValueError(f"No file patterns given in {raw!r}")
        return tuple(patterns)

    @staticmethod
    def matches(file_name: str, patterns: Iterable[str]) -> bool:
        """
        True if the bare file name matches any glob pattern.
        Case-sensitive on every platform so results don't depend on the filesystem.
        """
        return any(fnmatchcase(file_name, pattern) for pattern in patterns)
