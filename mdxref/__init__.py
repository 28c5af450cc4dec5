"""mdxref - markdown cross-reference and link integrity checker."""

__version__ = "0.1.0"
