"""
Assertion helpers built on the equivalence checks.

Each helper returns True when the documents are equivalent and raises
``AssertionError`` otherwise. A decode failure prints both raw inputs; a
structural difference prints the two canonical renderings side by side.
"""

from typing import Callable, Optional

from json_equiv.core.canonicalization import Source
from json_equiv.core.equivalence import is_equivalent, is_equivalent_array
from json_equiv.core.models import ComparisonResult

SEPARATOR = "-----------------------------------"


def _raw(src: Optional[Source]) -> str:
    if src is None:
        return ""
    if isinstance(src, (bytes, bytearray)):
        return bytes(src).decode("utf-8", errors="replace")
    return src


def _check(
    compare: Callable[..., ComparisonResult],
    expected: Optional[Source],
    actual: Optional[Source],
    context_msg: str = "",
) -> bool:
    result = compare(expected, actual)

    if result.error is not None:
        msg = (
            f"{result.error}\n\n"
            f"Actual:\n{_raw(actual)}\n\n"
            f"{SEPARATOR}\n\n"
            f"Expected:\n{_raw(expected)}"
        )
    elif not result.equal:
        msg = (
            "JSON documents are not equivalent.\n\n"
            f"Expected:\n{result.expected}\n\n"
            f"Actual:\n{result.actual}"
        )
    else:
        return True

    raise AssertionError(f"{context_msg}\n{msg}" if context_msg else msg)


def assert_equivalent(expected: Source, actual: Source, context_msg: str = "") -> bool:
    """Assert that two JSON objects are logically equivalent."""
    return _check(is_equivalent, expected, actual, context_msg)


def assert_equivalent_array(
    expected: Optional[Source], actual: Optional[Source], context_msg: str = ""
) -> bool:
    """Assert that two JSON arrays of objects are logically equivalent."""
    return _check(is_equivalent_array, expected, actual, context_msg)
