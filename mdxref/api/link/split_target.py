"""Split a raw link target into a decoded path and fragment."""

import re
from urllib.parse import unquote

# Optional CommonMark link title after the destination: "title" or 'title'
LINK_TITLE_PATTERN = re.compile(r"""^(.*?)\s+(?:"[^"]*"|'[^']*')$""")


def split_target(raw_target: str) -> tuple[str, str]:
    """Split ``raw_target`` into ``(path, fragment)``.

    ``<...>`` delimiters and a trailing link title are removed, the
    ``#fragment`` is split off, a ``?query`` is dropped, and both parts are
    percent-decoded.

    >>> split_target("Explore%20SwiftUI%20animation.md#anatomy-of-an-update")
    ('Explore SwiftUI animation.md', 'anatomy-of-an-update')
    """
    target = raw_target.strip()
    if target.startswith("<") and ">" in target:
        target = target[1 : target.index(">")]
    else:
        title_match = LINK_TITLE_PATTERN.match(target)
        if title_match:
            target = title_match.group(1)

    path, _, fragment = target.partition("#")
    path = path.partition("?")[0]
    return unquote(path).strip(), unquote(fragment)
