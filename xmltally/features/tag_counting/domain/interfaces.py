from abc import ABC, abstractmethod
from typing import Iterator, Union

class IXmlParser(ABC):
    """
    Contract for turning raw document contents into element names.
    Abstracts the concrete XML library.
    """
    @abstractmethod
    def iter_local_names(self, contents: Union[bytes, str]) -> Iterator[str]:
        """
        Yields the local name of every element in document order
        (depth-first, root included).
        Must raise XmlParseError for malformed input.
        """
        pass
