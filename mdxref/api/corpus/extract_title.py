"""Document title extractor."""

import re

from ..iter_prose_lines import iter_prose_lines

# ATX heading: up to 3 spaces, 1-6 hashes, whitespace, text, optional closing hashes
HEADING_PATTERN = re.compile(r"^ {0,3}#{1,6}[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")


def extract_title(text: str, fallback: str) -> str:
    """Return the text of the first heading in ``text``.

    Headings inside fenced code blocks are ignored (a ``# comment`` in a
    shell snippet is not a title).

    Args:
        text: Markdown content
        fallback: Title used when no heading is found

    Returns:
        Heading text, or ``fallback``
    """
    for _, line in iter_prose_lines(text.lstrip("\ufeff")):
        match = HEADING_PATTERN.match(line)
        if match:
            title = match.group(1).strip()
            if title:
                return title
    return fallback
