import xml.etree.ElementTree as ET
from typing import Iterator, Tuple, Union

from xmltally.core.errors import XmlParseError
from ..domain.interfaces import IXmlParser

def split_tag(tag: str) -> Tuple[str, str]:
    """
    Splits ElementTree's "{uri}local" notation into (uri, local).
    Un-namespaced tags give an empty uri.
    """
    if tag.startswith("{"):
        uri, _, local = tag[1:].partition("}")
        return uri, local
    return "", tag

def local_name(tag: str) -> str:
    return split_tag(tag)[1]

class EtreeXmlParser(IXmlParser):
    """
    Concrete implementation on the standard xml.etree.ElementTree parser.

    ElementTree expands every prefix (and the default namespace) into
    "{uri}local", so stripping the braces is all that is needed to compare
    by local name. Comments and processing instructions are dropped by the
    default tree builder and never reach iter().
    """

    def parse(self, contents: Union[bytes, str]) -> ET.Element:
        try:
            return ET.fromstring(contents)
        except ET.ParseError as e:
            raise XmlParseError(str(e)) from e
        except (LookupError, ValueError) as e:
            # Unknown or undecodable encodings that surface before expat reports them
            raise XmlParseError(f"encoding error: {e}") from e

    def iter_local_names(self, contents: Union[bytes, str]) -> Iterator[str]:
        root = self.parse(contents)
        for element in root.iter():
            yield local_name(element.tag)
