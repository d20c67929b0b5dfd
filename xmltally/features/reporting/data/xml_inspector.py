import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List

from xmltally.core.config.settings import settings
from xmltally.core.errors import XmlParseError
from xmltally.features.tag_counting.data.etree_parser import split_tag
from ..domain.models import DocumentInsight, ElementSample

def inspect_document(path: Path, sample_size: int = settings.DEBUG_SAMPLE_SIZE) -> DocumentInsight:
    """
    Streams the start of a document and records its root element plus the
    first sample_size elements in document order.

    ElementTree discards prefixes, so qualified names are rebuilt from the
    start-ns events: each element sees the prefix bindings in scope at its
    opening tag.
    """
    insight = None
    samples: List[ElementSample] = []
    scopes: List[Dict[str, str]] = [{}]  # uri -> prefix, one mapping per open element
    pending: Dict[str, str] = {}

    try:
        with open(path, "rb") as source:
            for event, item in ET.iterparse(source, events=("start-ns", "start", "end")):
                if event == "start-ns":
                    prefix, uri = item
                    pending[uri] = prefix
                    continue

                if event == "end":
                    scopes.pop()
                    continue

                scope = {**scopes[-1], **pending}
                pending = {}
                scopes.append(scope)

                uri, local = split_tag(item.tag)
                prefix = scope.get(uri, "") if uri else ""
                qualified = f"{prefix}:{local}" if prefix else local

                if insight is None:
                    insight = DocumentInsight(path=path, root_local_name=local, root_namespace=uri)
                samples.append(ElementSample(local_name=local, qualified_name=qualified, namespace=uri))

                if len(samples) >= sample_size:
                    break
    except ET.ParseError as e:
        raise XmlParseError(str(e), path=path) from e

    if insight is None:
        raise XmlParseError("no element found", path=path)

    insight.samples = samples
    return insight
