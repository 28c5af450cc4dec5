"""Markdown inline link parser (UNO: single function)."""

import re
from collections.abc import Iterator

from ..iter_prose_lines import iter_prose_lines
from .MarkdownLink import MarkdownLink

# (!)?[label](target): label has no ']', target allows one level of balanced parens
MARKDOWN_LINK_PATTERN = re.compile(r"(!)?\[([^\]]*)\]\(((?:[^()]|\([^()]*\))+)\)")
INLINE_CODE_PATTERN = re.compile(r"`[^`]*`")


def _mask_inline_code(line: str) -> str:
    """Blank out inline code spans, keeping column positions intact."""
    return INLINE_CODE_PATTERN.sub(lambda m: " " * len(m.group(0)), line)


def parse_markdown_links(text: str) -> Iterator[MarkdownLink]:
    """Extract all inline markdown links from text.

    Fenced code blocks and inline code spans are skipped. Malformed link
    syntax simply does not match and is ignored.

    Args:
        text: Markdown content to parse

    Yields:
        MarkdownLink objects for each [label](target) or ![alt](target) found
    """
    for line_num, line in iter_prose_lines(text):
        for match in MARKDOWN_LINK_PATTERN.finditer(_mask_inline_code(line)):
            target = match.group(3).strip()
            if not target:
                continue
            yield MarkdownLink(
                line_number=line_num,
                column_number=match.start() + 1,
                label=match.group(2).strip(),
                target=target,
                is_embed=bool(match.group(1)),
            )
