"""External link predicate."""

import re
from collections.abc import Iterable

from .._constants import DEFAULT_EXTERNAL_SCHEMES

URL_SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")


def is_external_target(target: str, schemes: Iterable[str] = DEFAULT_EXTERNAL_SCHEMES) -> bool:
    """Return True if ``target`` is an absolute URL rather than a repository path.

    A target is external when it starts with ``scheme://`` for any scheme,
    with ``scheme:`` for one of ``schemes`` (``mailto:``), or with ``//``
    (protocol-relative URL).
    """
    target = target.strip().lstrip("<")
    if target.startswith("//"):
        return True
    match = URL_SCHEME_PATTERN.match(target)
    if not match:
        return False
    if target[match.end() :].startswith("//"):
        return True
    return match.group(1).lower() in {s.lower() for s in schemes}
