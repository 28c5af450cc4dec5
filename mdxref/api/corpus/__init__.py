"""Corpus loading."""

from .Corpus import Corpus
from .Document import Document
from .extract_title import extract_title
from .iter_corpus_files import iter_corpus_files
from .load_corpus import load_corpus
from .LoadError import LoadError
from .SkippedDocument import SkippedDocument

__all__ = [
    "Corpus",
    "Document",
    "LoadError",
    "SkippedDocument",
    "extract_title",
    "iter_corpus_files",
    "load_corpus",
]
