"""pytest plugin exposing the JSON equivalence assertions as fixtures.

Registered through the ``pytest11`` entry point, so installing the package is
enough for the fixtures to be available::

    def test_payload(assert_json_equivalent):
        assert_json_equivalent(b'{"a": 1, "b": 2}', response.content)
"""

from typing import Callable

import pytest

from json_equiv.testing import assert_equivalent, assert_equivalent_array


@pytest.fixture(scope="session")
def assert_json_equivalent() -> Callable[..., bool]:
    """Return the object equivalence asserter."""
    return assert_equivalent


@pytest.fixture(scope="session")
def assert_json_array_equivalent() -> Callable[..., bool]:
    """Return the array equivalence asserter."""
    return assert_equivalent_array
