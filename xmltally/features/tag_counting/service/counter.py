import logging
from collections import Counter
from pathlib import Path
from typing import Union

from xmltally.core.errors import XmlParseError
from ..domain.interfaces import IXmlParser
from ..domain.models import Parsed, Failed, ParseOutcome
from ..data.etree_parser import EtreeXmlParser

logger = logging.getLogger(__name__)

class TagCountingService:
    """
    Facade for the Tag Counting Feature.
    Parses documents and counts elements by local name, ignoring namespaces.
    """

    def __init__(self, parser: IXmlParser = None):
        self.parser = parser or EtreeXmlParser()

    def count_tag(self, contents: Union[bytes, str], tag_name: str) -> int:
        """
        Number of elements whose local name equals tag_name exactly
        (case-sensitive). Attributes, text, comments and processing
        instructions never count.

        Raises:
            XmlParseError if contents are not well-formed XML.
        """
        return sum(1 for name in self.parser.iter_local_names(contents) if name == tag_name)

    def parse_file(self, path: Path) -> ParseOutcome:
        """
        Reads and parses one file, folding every failure into a Failed outcome
        so nothing escapes into the batch loop.
        """
        try:
            # Bytes, so the XML declaration decides the encoding
            contents = Path(path).read_bytes()
        except OSError as e:
            return Failed(path=path, reason=f"could not read file: {e.strerror or e}")

        try:
            names = Counter(self.parser.iter_local_names(contents))
        except XmlParseError as e:
            return Failed(path=path, reason=e.reason)

        logger.debug(f"Parsed {path}: {sum(names.values())} element(s)")
        return Parsed(path=path, element_local_names=names)

# Singleton Instance for easy import
tag_counting = TagCountingService()

def count_tag(contents: Union[bytes, str], tag_name: str) -> int:
    return tag_counting.count_tag(contents, tag_name)

