"""Link target resolution (UNO: single function)."""

import posixpath

from .split_target import split_target


def resolve_target(source_path: str, raw_target: str) -> tuple[str, str]:
    """Resolve a raw link target written in ``source_path``.

    Pure function of its arguments. Relative targets (``./B.md``,
    ``../x/B.md``, bare ``B.md``) are joined to the source document's
    directory; targets starting with ``/`` are relative to the corpus root.
    ``./`` and ``../`` segments are collapsed. A target that climbs above
    the root keeps its leading ``..`` and can never match a document.

    Args:
        source_path: Root-relative POSIX path of the linking document
        raw_target: Target text as written in the markdown

    Returns:
        Tuple of (root-relative resolved path, fragment). A pure fragment
        target resolves to ``source_path`` itself.
    """
    path, fragment = split_target(raw_target)
    if not path:
        return source_path, fragment

    if path.startswith("/"):
        joined = path.lstrip("/")
    else:
        joined = posixpath.join(posixpath.dirname(source_path), path)

    resolved = posixpath.normpath(joined) if joined else ""
    if resolved == ".":
        resolved = ""
    return resolved, fragment
