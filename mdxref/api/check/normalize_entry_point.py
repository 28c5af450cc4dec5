"""Entry point normalization."""

import posixpath
from pathlib import Path


def normalize_entry_point(entry: str, root: Path | None = None) -> str:
    """Turn an entry point as typed by a user into a document identifier.

    ``./index.md``, ``index.md`` and ``/abs/root/index.md`` (when under
    ``root``) all normalize to ``index.md``.
    """
    entry = entry.strip().replace("\\", "/")
    if root is not None and Path(entry).is_absolute():
        try:
            entry = Path(entry).relative_to(root).as_posix()
        except ValueError:
            pass
    normalized = posixpath.normpath(entry.lstrip("/")) if entry else ""
    return "" if normalized == "." else normalized
