"""
Logical equivalence checks for JSON documents.

Both checks canonicalize their inputs, take a byte-equality fast path, and
fall back to the structural comparator to report the first diverging object
pair. Decode failures are reported through ``ComparisonResult.error`` rather
than raised, so callers can tell "could not compare" from "not equal".
"""

import logging
from typing import Optional, Tuple

from json_equiv.core.canonicalization import (
    DecodeError,
    Source,
    format_array_json,
    format_json,
)
from json_equiv.core.diff import compare_maps
from json_equiv.core.models import ComparisonResult, Record, Side

logger = logging.getLogger(__name__)


def _decode_failure(error: DecodeError, side: Side) -> ComparisonResult:
    labeled = error.for_side(side)
    logger.warning("%s", labeled)
    return ComparisonResult(error=labeled)


def _locate(expected: Record, actual: Record) -> Tuple[str, str]:
    # An empty pair sends the caller to the whole-document fallback.
    try:
        return compare_maps(expected, actual)
    except (RecursionError, DecodeError):
        # Only nesting depth can fail here; both sides already rendered once.
        logger.debug("Structural walk exceeded the recursion limit")
        return "", ""


def is_equivalent(expected: Source, actual: Source) -> ComparisonResult:
    """
    Compare two JSON objects from a logical perspective.

    Key order and formatting are ignored. When the documents differ, the
    result holds the canonical renderings of the innermost object pair where
    the first difference was found, ready for a side-by-side assertion
    message.

    Args:
        expected: Raw JSON text of the reference object
        actual: Raw JSON text of the object under test

    Returns:
        ComparisonResult: ``equal`` is True when the documents match
    """
    try:
        expected_map, expected_formatted = format_json(expected)
    except DecodeError as e:
        return _decode_failure(e, Side.EXPECTED)

    try:
        actual_map, actual_formatted = format_json(actual)
    except DecodeError as e:
        return _decode_failure(e, Side.ACTUAL)

    if expected_formatted == actual_formatted:
        logger.debug("Canonical forms match")
        return ComparisonResult(equal=True)

    expected_version, actual_version = _locate(expected_map, actual_map)
    if expected_version or actual_version:
        return ComparisonResult(expected=expected_version, actual=actual_version)

    # Default to the whole documents.
    logger.debug("No keyed divergence found; reporting whole documents")
    return ComparisonResult(
        expected=expected_formatted.decode("utf-8"),
        actual=actual_formatted.decode("utf-8"),
    )


def is_equivalent_array(expected: Optional[Source], actual: Optional[Source]) -> ComparisonResult:
    """
    Compare two JSON arrays of objects from a logical perspective.

    Elements are compared position by position; reordering the elements is a
    difference. Empty input on either side decodes as an empty array.

    Args:
        expected: Raw JSON text of the reference array
        actual: Raw JSON text of the array under test

    Returns:
        ComparisonResult: ``equal`` is True when the arrays match
    """
    try:
        expected_maps, expected_formatted = format_array_json(expected)
    except DecodeError as e:
        return _decode_failure(e, Side.EXPECTED)

    try:
        actual_maps, actual_formatted = format_array_json(actual)
    except DecodeError as e:
        return _decode_failure(e, Side.ACTUAL)

    if expected_formatted == actual_formatted:
        logger.debug("Canonical forms match")
        return ComparisonResult(equal=True)

    if len(expected_maps) != len(actual_maps):
        logger.debug("Array lengths differ: %d != %d", len(expected_maps), len(actual_maps))
        return ComparisonResult()

    # Every position is compared and the last one wins.
    # TODO: stop at the first diverging index, as compare_maps does for keys.
    expected_version, actual_version = "", ""
    for expected_map, actual_map in zip(expected_maps, actual_maps):
        expected_version, actual_version = _locate(expected_map, actual_map)

    if expected_version or actual_version:
        return ComparisonResult(expected=expected_version, actual=actual_version)

    logger.debug("No keyed divergence found; reporting whole documents")
    return ComparisonResult(
        expected=expected_formatted.decode("utf-8"),
        actual=actual_formatted.decode("utf-8"),
    )
