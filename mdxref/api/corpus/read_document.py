"""Read one corpus file into a Document."""

from pathlib import Path

from ...logging_config import get_logger
from .Document import Document
from .extract_title import extract_title
from .SkippedDocument import SkippedDocument

logger = get_logger("corpus")


def read_document(root: Path, path: Path, encoding: str = "utf-8") -> Document | SkippedDocument:
    """Read ``path`` and build its Document.

    Unreadable files (permissions, bad encoding) are returned as a
    SkippedDocument instead of raising, so one bad file never stops a scan.
    """
    rel_path = path.relative_to(root).as_posix()
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping %s: %s", rel_path, exc)
        return SkippedDocument(path=rel_path, reason=str(exc))

    return Document(
        path=rel_path,
        title=extract_title(text, fallback=path.stem),
        content=text,
    )
