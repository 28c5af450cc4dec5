"""Iterate markdown lines that are outside code blocks."""

import re
from collections.abc import Iterator

# Opening/closing fence: up to 3 spaces of indent, then 3+ backticks or tildes
FENCE_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})")
INDENTED_CODE_PATTERN = re.compile(r"^(?: {4}| {0,3}\t)")
LIST_ITEM_PATTERN = re.compile(r"^ {0,3}(?:[-*+]|\d{1,9}[.)])(?:[ \t]|$)")
HEADING_LINE_PATTERN = re.compile(r"^ {0,3}#{1,6}(?:[ \t]|$)")


def iter_prose_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every line outside a code block.

    Fenced blocks: a fence is opened by a run of backticks or tildes and
    closes on a line holding only a run of the same character that is at
    least as long as the opening run. An unclosed fence swallows the rest
    of the document, as in CommonMark. Fence lines themselves are never
    yielded.

    Indented blocks: a line indented by four spaces (or a tab) is code
    unless it continues a paragraph or a list item. Indented lines right
    after a paragraph line, or anywhere inside a list, stay prose.

    Args:
        text: Markdown content

    Yields:
        1-based line number and the line text (without newline)
    """
    fence: str | None = None
    indented = False
    in_paragraph = False
    in_list = False
    for line_num, line in enumerate(text.splitlines(), start=1):
        if fence is not None:
            match = FENCE_PATTERN.match(line)
            if match and match.group(1)[0] == fence[0] and len(match.group(1)) >= len(fence):
                if not line.strip().lstrip(fence[0]):
                    fence = None
            continue

        if not line.strip():
            in_paragraph = False
            yield line_num, line
            continue

        if INDENTED_CODE_PATTERN.match(line) and (indented or not (in_paragraph or in_list)):
            indented = True
            continue
        indented = False

        match = FENCE_PATTERN.match(line)
        if match:
            fence = match.group(1)
            in_paragraph = False
            continue

        if LIST_ITEM_PATTERN.match(line):
            in_list = True
        elif not in_paragraph and not line[0].isspace():
            in_list = False
        in_paragraph = not HEADING_LINE_PATTERN.match(line)
        yield line_num, line
