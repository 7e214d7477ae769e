"""Tests for PathEditor.delete()."""

import pytest

from pathedit import Empty, InvalidPathError, PathEditor


def test_delete_mapping_key():
    ed = PathEditor({"a": {"b": 1, "c": 2}}).delete("a.b")
    assert ed.get() == {"a": {"c": 2}}


def test_delete_list_element_shifts():
    ed = PathEditor({"list": [{"v": 1}, {"v": 2}]}).delete("list[0]")
    assert ed.get("list") == [{"v": 2}]


def test_delete_leaves_original():
    root = {"a": {"b": 1}}
    PathEditor(root).delete("a.b")
    assert root == {"a": {"b": 1}}


def test_delete_none_value():
    ed = PathEditor({"a": None}).delete("a")
    assert ed.get() == {}


def test_delete_then_get_is_empty():
    ed = PathEditor({}).set("x.y", 1).delete("x.y")
    assert ed.get("x.y") is Empty
    assert ed.get("x") == {}


def test_delete_missing_leaf_is_noop():
    root = {"a": {}}
    assert PathEditor(root).delete("a.b").get() is root


def test_delete_missing_intermediate_is_noop():
    root = {"a": 1}
    ed = PathEditor(root).delete("a.b.c")
    assert ed.get() is root


def test_delete_does_not_vivify():
    root = {}
    assert PathEditor(root).delete("x[0].y").get() == {}


def test_delete_out_of_range_is_noop():
    root = {"l": [1]}
    assert PathEditor(root).delete("l[3]").get() is root


def test_delete_shares_siblings():
    sibling = {"keep": True}
    root = {"a": {"b": 1}, "s": sibling}
    ed = PathEditor(root).delete("a.b")
    assert ed.get("s") is sibling
    assert ed.get("a") is not root["a"]


@pytest.mark.parametrize("bad", ["", None])
def test_delete_rejects_invalid_path(bad):
    with pytest.raises(InvalidPathError):
        PathEditor({}).delete(bad)
