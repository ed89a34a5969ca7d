"""
JSON Equiv - Logical equality of JSON documents for test assertions.

This package compares JSON payloads while ignoring key order and formatting,
and reports the smallest diverging object pair when they differ.
"""

from importlib.metadata import PackageNotFoundError, version

# Set up version
__version__ = "0.1.0"

try:
    __version__ = version("json-equiv")
except PackageNotFoundError:
    pass

# Core components
from json_equiv.core.canonicalization import (
    DecodeError,
    canonical_json_dumps,
    canonicalize,
    format_array_json,
    format_json,
)
from json_equiv.core.diff import compare_maps
from json_equiv.core.equivalence import is_equivalent, is_equivalent_array
from json_equiv.core.models import ComparisonResult, JSONValue, Record, RecordSequence, Side
from json_equiv.testing import assert_equivalent, assert_equivalent_array

__all__ = [
    # Core functionality
    "canonicalize",
    "canonical_json_dumps",
    "format_json",
    "format_array_json",
    "compare_maps",
    "is_equivalent",
    "is_equivalent_array",
    # Assertions
    "assert_equivalent",
    "assert_equivalent_array",
    # Models
    "ComparisonResult",
    "DecodeError",
    "JSONValue",
    "Record",
    "RecordSequence",
    "Side",
]
