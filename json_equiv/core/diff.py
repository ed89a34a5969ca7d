"""
Recursive structural comparison of decoded JSON objects.
"""

import logging
from typing import Tuple

from json_equiv.core.canonicalization import canonicalize
from json_equiv.core.models import Record

logger = logging.getLogger(__name__)


def _render(record: Record) -> str:
    return canonicalize(record).decode("utf-8")


def compare_maps(expected: Record, actual: Record, _depth: int = 0) -> Tuple[str, str]:
    """
    Locate the first divergence between two decoded JSON objects.

    The walk is driven by the keys of ``expected`` only, in sorted order. A
    key missing from ``actual`` compares as ``null``; keys that only exist in
    ``actual`` are not visited at this level.

    When a value differs, the whole containing object is rendered on both
    sides so the differing key can be found among its siblings. Nested
    objects are descended into first, so the reported pair is the innermost
    object holding the divergence.

    Args:
        expected: The reference object
        actual: The object under test

    Returns:
        Tuple of canonical renderings ``(expected, actual)``, or ``("", "")``
        when no divergence was found.
    """
    for key in sorted(expected):
        expected_value = expected[key]
        actual_value = actual.get(key)

        if isinstance(expected_value, dict):
            if not isinstance(actual_value, dict):
                logger.debug("Type mismatch at key %r (depth %d)", key, _depth)
                return _render(expected), _render(actual)

            expected_version, actual_version = compare_maps(expected_value, actual_value, _depth + 1)
            if expected_version or actual_version:
                return expected_version, actual_version

        if canonicalize(expected_value) != canonicalize(actual_value):
            logger.debug("Value mismatch at key %r (depth %d)", key, _depth)
            return _render(expected), _render(actual)

    return "", ""
