"""Corpus loader (UNO: single function)."""

import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from ...logging_config import get_logger
from ..config.MdxrefConfig import MdxrefConfig
from .Corpus import Corpus
from .Document import Document
from .iter_corpus_files import iter_corpus_files
from .LoadError import LoadError
from .read_document import read_document
from .SkippedDocument import SkippedDocument

logger = get_logger("corpus")


def load_corpus(root: Path | str, config: MdxrefConfig | None = None) -> Corpus:
    """Load every document under ``root``.

    With ``config.workers > 1`` files are read in a thread pool. All reads
    are joined before returning and results are sorted by path, so the
    corpus is the same regardless of the worker count.

    Args:
        root: Corpus root directory
        config: Run configuration (defaults when omitted)

    Returns:
        Corpus with the readable documents and the skipped files

    Raises:
        LoadError: If ``root`` is missing, not a directory, or not readable
    """
    if config is None:
        config = MdxrefConfig()

    root_path = Path(root).expanduser().absolute()
    if not root_path.exists():
        raise LoadError(root_path, "Root directory does not exist")
    if not root_path.is_dir():
        raise LoadError(root_path, "Root path is not a directory")
    if not os.access(root_path, os.R_OK | os.X_OK):
        raise LoadError(root_path, "Root directory is not readable")

    files = list(iter_corpus_files(root_path, config.extensions, config.exclude_dirnames))
    logger.info("Found %d candidate files under %s", len(files), root_path)

    read = partial(read_document, root_path, encoding=config.encoding)
    if config.workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=config.workers) as pool:
            results = list(pool.map(read, files))
    else:
        results = [read(path) for path in files]

    documents = sorted((r for r in results if isinstance(r, Document)), key=lambda d: d.path)
    skipped = sorted((r for r in results if isinstance(r, SkippedDocument)), key=lambda s: s.path)

    logger.info("Loaded %d documents (%d skipped)", len(documents), len(skipped))
    return Corpus(root=root_path, documents=tuple(documents), skipped=tuple(skipped))
