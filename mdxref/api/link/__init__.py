"""Link extraction and resolution."""

from .extract_links import extract_links
from .is_external_target import is_external_target
from .LinkReference import LinkReference
from .LinkSequence import LinkSequence
from .MarkdownLink import MarkdownLink
from .parse_markdown_links import parse_markdown_links
from .resolve_target import resolve_target
from .split_target import split_target

__all__ = [
    "LinkReference",
    "LinkSequence",
    "MarkdownLink",
    "extract_links",
    "is_external_target",
    "parse_markdown_links",
    "resolve_target",
    "split_target",
]
