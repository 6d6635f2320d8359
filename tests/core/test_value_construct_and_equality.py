import json

import pytest

from jsonbundle.core.errors import EncodeError
from jsonbundle.core.value import JsonKind, JsonValue


def test_from_object_roundtrip_and_raw_encoding():
    m = {"a": 1, "b": [1, "x", None, True], "c": {"d": 1.5}, "e": "é"}
    v = JsonValue.from_object(m)
    assert v.kind is JsonKind.OBJECT
    assert v.as_object == m
    assert v.as_array == []
    # Compact, insertion-ordered, unicode kept verbatim.
    assert v.raw == '{"a":1,"b":[1,"x",null,true],"c":{"d":1.5},"e":"é"}'.encode("utf-8")
    assert json.loads(v.raw) == m


def test_from_object_copies_input():
    m = {"a": 1}
    v = JsonValue.from_object(m)
    m["a"] = 2
    assert v.as_object == {"a": 1}


def test_from_object_accepts_tuples_as_arrays():
    v = JsonValue.from_object({"a": (1, 2), "nested": {"pairs": ((1, "x"), (2, "y"))}})
    assert v.as_object == {"a": [1, 2], "nested": {"pairs": [[1, "x"], [2, "y"]]}}
    assert v.raw == b'{"a":[1,2],"nested":{"pairs":[[1,"x"],[2,"y"]]}}'
    assert JsonValue.from_array(({"t": (True, None)},)).as_array == [{"t": [True, None]}]


def test_from_array_roundtrip():
    a = [{"x": 1}, {"x": 2, "tags": ["p", "q"]}]
    v = JsonValue.from_array(a)
    assert v.kind is JsonKind.ARRAY
    assert v.as_array == a
    assert v.as_object == {}
    assert v.raw == b'[{"x":1},{"x":2,"tags":["p","q"]}]'


def test_from_array_empty():
    v = JsonValue.from_array([])
    assert v.is_array
    assert v.raw == b"[]"


@pytest.mark.parametrize(
    "bad",
    [
        {"a": object()},
        {"when": {1, 2}},
        {1: "non-string key"},
        {"nested": {2: "non-string key"}},
        {"nan": float("nan")},
        {"inf": float("inf")},
    ],
)
def test_from_object_rejects_unencodable_values(bad):
    with pytest.raises(EncodeError):
        JsonValue.from_object(bad)


def test_from_object_rejects_non_mapping():
    with pytest.raises(EncodeError):
        JsonValue.from_object([{"a": 1}])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "bad",
    [
        [{"x": 1}, 2],
        [{"x": 1}, [{"y": 2}]],
        ["a"],
        "not a list",
        {"x": 1},
        [{"x": object()}],
    ],
)
def test_from_array_rejects_non_object_elements(bad):
    with pytest.raises(EncodeError):
        JsonValue.from_array(bad)  # type: ignore[arg-type]


def test_bytes_and_object_construction_compare_equal():
    assert JsonValue.from_bytes(b'{"a":1}') == JsonValue.from_object({"a": 1})
    assert JsonValue.from_bytes(b'[{"x": 1}]') == JsonValue.from_array([{"x": 1}])


def test_equality_ignores_key_order_whitespace_and_raw_bytes():
    left = JsonValue.from_bytes(b'{"a": 1, "b": {"c": [1, 2]}}')
    right = JsonValue.from_bytes(b'{"b":{"c":[1,2]},"a":1}')
    assert left.raw != right.raw
    assert left == right


def test_equality_is_structural_not_textual():
    assert JsonValue.from_bytes(b'{"a": 1}') != JsonValue.from_bytes(b'{"a": 2}')
    assert JsonValue.from_bytes(b'{"a": 1}') != JsonValue.from_bytes(b'{"a": 1, "b": 1}')
    assert JsonValue.from_bytes(b'[{"x": 1}, {"x": 2}]') != JsonValue.from_bytes(b'[{"x": 2}, {"x": 1}]')
    # Numbers compare numerically.
    assert JsonValue.from_bytes(b'{"a": 1}') == JsonValue.from_bytes(b'{"a": 1.0}')
    # Strings are not numbers.
    assert JsonValue.from_bytes(b'{"a": 1}') != JsonValue.from_bytes(b'{"a": "1"}')


def test_sharp_edges_hidden_by_rendered_equality():
    # Both views are empty for NONE and for an empty object, so comparing
    # renderings of the two views would call these equal. Kinds differ.
    none = JsonValue.none()
    empty_object = JsonValue.from_object({})
    empty_array = JsonValue.from_array([])
    assert none.as_object == empty_object.as_object
    assert none.as_array == empty_object.as_array
    assert none != empty_object
    assert none != empty_array
    assert empty_object != empty_array
    # Python treats True == 1; JSON booleans are not numbers.
    assert JsonValue.from_bytes(b'{"a": true}') != JsonValue.from_bytes(b'{"a": 1}')
    assert JsonValue.from_bytes(b'{"a": [false]}') != JsonValue.from_bytes(b'{"a": [0]}')
    assert JsonValue.from_bytes(b'{"a": null}') != JsonValue.from_bytes(b'{"a": false}')


def test_all_none_values_are_equal():
    assert JsonValue.from_bytes(b"42") == JsonValue.from_bytes(b"null")
    assert JsonValue.from_bytes(b"[1, 2]") == JsonValue.none()


def test_comparison_with_other_types_and_hashing():
    v = JsonValue.from_object({"a": 1})
    assert v != {"a": 1}
    with pytest.raises(TypeError):
        hash(v)
