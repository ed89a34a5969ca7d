"""
Core functionality for JSON equivalence checks.

This package contains the canonicalizer, the recursive structural comparator
and the equivalence checks built on top of them.
"""

from .canonicalization import (
    DecodeError,
    canonical_json_dumps,
    canonicalize,
    format_array_json,
    format_json,
)
from .diff import compare_maps
from .equivalence import is_equivalent, is_equivalent_array
from .models import ComparisonResult, Side

__all__ = [
    'DecodeError',
    'canonical_json_dumps',
    'canonicalize',
    'format_json',
    'format_array_json',
    'compare_maps',
    'is_equivalent',
    'is_equivalent_array',
    'ComparisonResult',
    'Side',
]
