"""Corpus file discovery."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from ...logging_config import get_logger

logger = get_logger("corpus")


def iter_corpus_files(root: Path, extensions: Iterable[str], exclude_dirnames: Iterable[str] = ()) -> Iterator[Path]:
    """Yield document files under ``root`` in sorted order.

    Args:
        root: Directory to walk
        extensions: Lowercase extensions including the dot (``.md``)
        exclude_dirnames: Directory names that are never descended into

    Yields:
        Absolute paths of regular files whose suffix matches ``extensions``
    """
    wanted = {ext.lower() for ext in extensions}
    excluded = set(exclude_dirnames)

    def _on_error(exc: OSError) -> None:
        logger.warning("Cannot list directory %s: %s", exc.filename, exc.strerror or exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        # Prune in place so os.walk skips excluded directories
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if path.suffix.lower() in wanted and path.is_file():
                yield path
