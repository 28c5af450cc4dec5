"""Integrity checking."""

from .check_integrity import check_integrity
from .DanglingLink import DanglingLink
from .EmptyCorpusError import EmptyCorpusError
from .IntegrityReport import IntegrityReport
from .normalize_entry_point import normalize_entry_point
from .ResourceLink import ResourceLink
from .SelfReference import SelfReference

__all__ = [
    "DanglingLink",
    "EmptyCorpusError",
    "IntegrityReport",
    "ResourceLink",
    "SelfReference",
    "check_integrity",
    "normalize_entry_point",
]
