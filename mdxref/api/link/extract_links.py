"""Link extractor (UNO: single function)."""

from ..config.MdxrefConfig import MdxrefConfig
from ..corpus.Document import Document
from .LinkSequence import LinkSequence


def extract_links(document: Document, config: MdxrefConfig | None = None) -> LinkSequence:
    """Return the internal links of ``document`` as a lazy LinkSequence."""
    if config is None:
        return LinkSequence(document)
    return LinkSequence(document, external_schemes=config.external_schemes)
