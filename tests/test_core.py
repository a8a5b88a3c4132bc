"""Core tests for xmind-outline: value model and field filter."""

import pytest

import xmind_outline
from xmind_outline import (
    WHITELIST,
    Array,
    Bool,
    Null,
    Number,
    Object,
    String,
    filter_value,
    from_python,
    to_python,
)


def _all_objects(value):
    """Yield every Object in a Value tree."""
    if isinstance(value, Object):
        yield value
        for item in value.values():
            yield from _all_objects(item)
    elif isinstance(value, Array):
        for item in value:
            yield from _all_objects(item)


SHEET = from_python([
    {
        "id": "sheet-1",
        "class": "sheet",
        "title": "Sheet 1",
        "rootTopic": {
            "id": "root",
            "class": "topic",
            "title": "Central Topic",
            "structureClass": "org.xmind.ui.map.unbalanced",
            "style": {"properties": {"title": "ignored", "fill": "#fff"}},
            "children": {
                "attached": [
                    {"id": "a", "title": "Main Topic 1", "markers": [{"markerId": "priority-1"}]},
                    {
                        "id": "b",
                        "title": "Main Topic 2",
                        "children": {
                            "attached": [{"id": "c", "title": "Subtopic", "notes": {"plain": {}}}],
                            "detached": [{"id": "d", "title": "Floating"}],
                        },
                    },
                ]
            },
        },
        "theme": {"title": "Business", "children": []},
        "extensions": [],
    }
])


# --- value model ---

def test_object_preserves_order():
    o = Object.of(("b", Number(1)), ("a", Number(2)))
    assert o.keys() == ["b", "a"]
    assert list(o) == ["b", "a"]
    assert o["a"] == Number(2)
    assert o.get("missing") is None
    assert "b" in o and "c" not in o
    assert len(o) == 2


def test_object_rejects_duplicate_keys():
    with pytest.raises(ValueError):
        Object.of(("a", Null()), ("a", Null()))


def test_object_equality_is_order_sensitive():
    assert Object.of(("a", Null()), ("b", Null())) == Object.of(("a", Null()), ("b", Null()))
    assert Object.of(("a", Null()), ("b", Null())) != Object.of(("b", Null()), ("a", Null()))


def test_values_are_immutable():
    s = String("x")
    with pytest.raises(AttributeError):
        s.value = "y"


def test_from_python_bool_is_not_number():
    assert from_python(True) == Bool(True)
    assert from_python(1) == Number(1)
    assert from_python(None) == Null()


def test_from_python_rejects_unknown_types():
    with pytest.raises(TypeError):
        from_python({"a": object()})


def test_to_python_roundtrip():
    data = {"z": [1, 2.5, None, True, "s"], "a": {"nested": []}}
    assert to_python(from_python(data)) == data
    assert list(to_python(from_python(data))) == ["z", "a"]


# --- field filter ---

def test_filter_keeps_only_whitelisted_keys():
    result = filter_value(SHEET)
    for obj in _all_objects(result):
        assert set(obj.keys()) <= WHITELIST


def test_filter_sheet_structure():
    result = to_python(filter_value(SHEET))
    assert result == [
        {
            "title": "Sheet 1",
            "rootTopic": {
                "title": "Central Topic",
                "children": {
                    "attached": [
                        {"title": "Main Topic 1"},
                        {
                            "title": "Main Topic 2",
                            "children": {"attached": [{"title": "Subtopic"}]},
                        },
                    ]
                },
            },
        }
    ]


def test_filter_is_idempotent():
    once = filter_value(SHEET)
    assert filter_value(once) == once


def test_filter_preserves_key_order():
    o = from_python({"title": "t", "id": "x", "children": [], "attached": [], "rootTopic": {}})
    assert filter_value(o).keys() == ["title", "children", "attached", "rootTopic"]


def test_filter_does_not_rescue_nested_keys():
    o = from_python({"style": {"title": "x"}, "title": "y"})
    assert filter_value(o) == from_python({"title": "y"})


def test_filter_drops_whole_subtree_under_unknown_key():
    o = from_python({"extensions": [{"rootTopic": {"title": "deep"}}]})
    assert filter_value(o) == Object()


def test_filter_array_keeps_length_and_order():
    a = from_python([{"id": 1}, 2, [{"title": "t", "x": 0}], None, {"children": "c"}])
    result = filter_value(a)
    assert len(result) == len(a)
    for original, filtered in zip(a, result):
        assert filtered == filter_value(original)
    assert to_python(result) == [{}, 2, [{"title": "t"}], None, {"children": "c"}]


def test_filter_empty_containers():
    assert filter_value(Object()) == Object()
    assert filter_value(Array()) == Array()


def test_filter_scalars_pass_through():
    assert filter_value(Number(5)) == Number(5)
    assert filter_value(Null()) == Null()
    assert filter_value(Bool(True)) == Bool(True)
    assert filter_value(String("title")) == String("title")


def test_filter_does_not_modify_input():
    before = to_python(SHEET)
    filter_value(SHEET)
    assert to_python(SHEET) == before


def test_filter_whitelisted_scalar_values_kept():
    # a whitelisted key keeps its value whatever its type
    o = from_python({"title": None, "children": 3, "attached": False})
    assert filter_value(o) == o


def test_filter_custom_fields():
    o = from_python({"title": "t", "id": "x", "notes": {"id": "n", "title": "nt"}})
    assert to_python(filter_value(o, {"id", "notes"})) == {"id": "x", "notes": {"id": "n"}}


def test_filter_deep_nesting():
    value = from_python({"title": "leaf", "id": 0})
    expected = from_python({"title": "leaf"})
    for depth in range(50):
        value = Object.of(("children", Object.of(("attached", Array.of(value)), ("id", Number(depth)))))
        expected = Object.of(("children", Object.of(("attached", Array.of(expected)))))
    assert filter_value(value) == expected


def test_whitelist_is_fixed():
    assert xmind_outline.WHITELIST == frozenset({"rootTopic", "attached", "title", "children"})
    assert isinstance(WHITELIST, frozenset)
