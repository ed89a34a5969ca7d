"""Unit tests for the recursive structural comparator."""

from json_equiv.core.diff import compare_maps


def test_equal_maps_have_no_divergence() -> None:
    expected = {"A": "1", "B": {"C": [1, 2]}}
    actual = {"B": {"C": [1, 2]}, "A": "1"}
    assert compare_maps(expected, actual) == ("", "")


def test_empty_maps() -> None:
    assert compare_maps({}, {}) == ("", "")


def test_missing_key_renders_containing_object() -> None:
    expected = {"A": "1", "B": "2", "C": "3"}
    actual = {"B": "2", "A": "1"}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"A": "1",\n\t"B": "2",\n\t"C": "3"\n}'
    assert actual_version == '{\n\t"A": "1",\n\t"B": "2"\n}'


def test_nested_divergence_renders_only_nested_object() -> None:
    expected = {"A": "1", "B": "2", "C": {"FU": 111, "BAR": 222}}
    actual = {"A": "1", "B": "2", "C": {"FU": 111}}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"BAR": 222,\n\t"FU": 111\n}'
    assert actual_version == '{\n\t"FU": 111\n}'


def test_deep_divergence_renders_innermost_object() -> None:
    expected = {"l1": {"l2": {"l3": {"value": "a", "other": 1}}}}
    actual = {"l1": {"l2": {"l3": {"value": "b", "other": 1}}}}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"other": 1,\n\t"value": "a"\n}'
    assert actual_version == '{\n\t"other": 1,\n\t"value": "b"\n}'


def test_type_mismatch_renders_parent_object() -> None:
    expected = {"A": {"x": 1}, "B": 2}
    actual = {"A": "not an object", "B": 2}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"A": {\n\t\t"x": 1\n\t},\n\t"B": 2\n}'
    assert actual_version == '{\n\t"A": "not an object",\n\t"B": 2\n}'


def test_missing_nested_object_renders_parent_object() -> None:
    expected = {"A": {"x": 1}}
    actual = {}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"A": {\n\t\t"x": 1\n\t}\n}'
    assert actual_version == "{}"


def test_actual_only_keys_are_ignored() -> None:
    """Keys that only exist in actual are never visited at the walked level."""
    assert compare_maps({"A": 1}, {"A": 1, "Z": 99}) == ("", "")


def test_actual_only_keys_in_nested_object_render_parent() -> None:
    expected = {"A": 1, "C": {"FU": 1}}
    actual = {"A": 1, "C": {"FU": 1, "X": 2}}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"A": 1,\n\t"C": {\n\t\t"FU": 1\n\t}\n}'
    assert actual_version == '{\n\t"A": 1,\n\t"C": {\n\t\t"FU": 1,\n\t\t"X": 2\n\t}\n}'


def test_missing_key_compares_as_null() -> None:
    assert compare_maps({"A": None}, {}) == ("", "")


def test_array_values_are_compared_whole() -> None:
    expected = {"list": [1, 2, 3]}
    actual = {"list": [3, 2, 1]}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"list": [\n\t\t1,\n\t\t2,\n\t\t3\n\t]\n}'
    assert actual_version == '{\n\t"list": [\n\t\t3,\n\t\t2,\n\t\t1\n\t]\n}'


def test_first_divergence_in_sorted_key_order_wins() -> None:
    expected = {"b": {"x": 1}, "a": {"y": 1}}
    actual = {"b": {"x": 2}, "a": {"y": 2}}

    expected_version, actual_version = compare_maps(expected, actual)

    assert expected_version == '{\n\t"y": 1\n}'
    assert actual_version == '{\n\t"y": 2\n}'
