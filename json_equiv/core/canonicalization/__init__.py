"""
Deterministic JSON canonicalization for logical comparison.

This module decodes raw JSON documents and re-serializes them in a canonical
form: object keys sorted by code point, one tab of indentation per nesting
level, UTF-8 without escaping of non-ASCII characters. Two documents that only
differ in key order or whitespace canonicalize to identical bytes.
"""

import json
import math
import re
from typing import Any, Optional, Tuple, Union

from json_equiv.core.models import JSONValue, Record, RecordSequence, Side

INDENT = "\t"

# json.loads joins valid surrogate pairs, so any code unit left in this range
# came from a lone \uXXXX escape.
LONE_SURROGATE = re.compile("[\ud800-\udfff]")
REPLACEMENT_CHARACTER = "\ufffd"

Source = Union[bytes, bytearray, str]


class DecodeError(ValueError):
    """Raised when input is not JSON of the expected shape.

    ``side`` is set once the error has been attributed to one input of a
    comparison; ``array`` tells whether the array variant was decoding.
    """

    def __init__(self, message: str, side: Optional[Side] = None, array: bool = False):
        self.reason = message
        self.side = side
        self.array = array
        if side is not None:
            label = f"array {side.value}" if array else side.value
            message = f"error while formatting {label}: {message}"
        super().__init__(message)

    def for_side(self, side: Side) -> "DecodeError":
        """Return a copy of this error labeled with the input it came from."""
        labeled = DecodeError(self.reason, side=side, array=self.array)
        labeled.__cause__ = self.__cause__
        return labeled


def _parse_float(literal: str) -> Union[int, float]:
    # Integral values decode as int so that 1.0 and 1 canonicalize alike.
    value = float(literal)
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number: {name}")


def _decode(src: Source) -> Any:
    try:
        return json.loads(src, parse_float=_parse_float, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError(f"Document nested too deeply: {e}") from e


def canonical_json_dumps(value: JSONValue) -> str:
    """Render a decoded JSON value in canonical form.

    Lone surrogates are replaced with U+FFFD so the result always encodes as
    UTF-8.
    """
    text = json.dumps(
        value,
        sort_keys=True,
        indent=INDENT,
        ensure_ascii=False,
        allow_nan=False,
    )
    return LONE_SURROGATE.sub(REPLACEMENT_CHARACTER, text)


def canonicalize(value: JSONValue) -> bytes:
    """
    Convert a decoded JSON value to canonical UTF-8 bytes.

    Args:
        value: A JSON-compatible value (dict, list or primitive)

    Returns:
        bytes: The canonical representation

    Raises:
        DecodeError: If the value holds something JSON cannot represent
    """
    try:
        return canonical_json_dumps(value).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Failed to canonicalize data: {e}") from e
    except RecursionError as e:
        raise DecodeError(f"Document nested too deeply: {e}") from e


def format_json(src: Source) -> Tuple[Record, bytes]:
    """
    Decode a JSON object and return it with its canonical bytes.

    Raises:
        DecodeError: If ``src`` is not valid JSON or its root is not an object
    """
    if src is None:
        raise DecodeError("Expected a JSON object, got no input")
    try:
        decoded = _decode(src)
    except ValueError as e:
        raise DecodeError(str(e)) from e

    if not isinstance(decoded, dict):
        raise DecodeError(f"Expected a JSON object, got {type(decoded).__name__}")

    return decoded, canonicalize(decoded)


def format_array_json(src: Optional[Source]) -> Tuple[RecordSequence, bytes]:
    """
    Decode a JSON array of objects and return it with its canonical bytes.

    Empty input is accepted and yields an empty sequence with empty canonical
    bytes, so that "no records" can be compared.

    Raises:
        DecodeError: If ``src`` is not valid JSON, its root is not an array,
            or one of its elements is not an object
    """
    if not src:
        return [], b""
    try:
        decoded = _decode(src)
    except ValueError as e:
        raise DecodeError(str(e), array=True) from e

    if not isinstance(decoded, list):
        raise DecodeError(f"Expected a JSON array, got {type(decoded).__name__}", array=True)
    for index, item in enumerate(decoded):
        if not isinstance(item, dict):
            raise DecodeError(
                f"Expected a JSON object at index {index}, got {type(item).__name__}",
                array=True,
            )

    try:
        return decoded, canonicalize(decoded)
    except DecodeError as e:
        e.array = True
        raise


__all__ = [
    "DecodeError",
    "canonical_json_dumps",
    "canonicalize",
    "format_json",
    "format_array_json",
]
