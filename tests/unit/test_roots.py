"""Unit tests for comment_threads.roots."""

from __future__ import annotations

from comment_threads.normalize import CommentNode
from comment_threads.roots import collect_child_ids, identity_key, select_roots


def _node(comment_id, *replies: CommentNode) -> CommentNode:
    return CommentNode(id=comment_id, author="a", text="t", replies=tuple(replies))


def test_flattened_reply_is_removed_from_top_level() -> None:
    b = _node("B")
    a = _node("A", b)
    assert select_roots([a, b]) == (a,)


def test_duplicates_several_levels_deep_are_removed() -> None:
    d = _node("D")
    a = _node("A", _node("B", _node("C", d)))
    e = _node("E")
    assert select_roots([d, a, e]) == (a, e)


def test_top_level_order_is_preserved() -> None:
    forest = [_node(str(index)) for index in range(4)]
    assert select_roots(forest) == tuple(forest)


def test_nested_duplicates_are_left_alone() -> None:
    shared = _node("S")
    a = _node("A", shared, shared)
    (root,) = select_roots([a])
    assert root.replies == (shared, shared)


def test_ids_compare_by_value() -> None:
    a = _node({"k": 1, "j": 2}, _node({"j": 2, "k": 1}))
    dup = _node({"k": 1, "j": 2})
    assert select_roots([dup]) == (dup,)
    # A top-level copy of a nested id is dropped, here the parent itself.
    assert select_roots([a]) == ()


def test_string_and_number_ids_are_distinct() -> None:
    child = _node(1)
    parent = _node("p", child)
    lookalike = _node("1")
    assert select_roots([parent, lookalike]) == (parent, lookalike)


def test_integral_float_ids_match_integer_ids() -> None:
    parent = _node("p", _node(1.0))
    duplicate = _node(1)
    assert select_roots([parent, duplicate]) == (parent,)
    assert identity_key([2.0, {"k": 3.0}]) == identity_key([2, {"k": 3}])
    assert identity_key(1.5) != identity_key(1)


def test_boolean_ids_stay_distinct_from_numbers() -> None:
    parent = _node("p", _node(1))
    flag = _node(True)
    assert select_roots([parent, flag]) == (parent, flag)


def test_collect_child_ids_skips_roots() -> None:
    forest = [_node("A", _node("B", _node("C"))), _node("D")]
    assert collect_child_ids(forest) == {identity_key("B"), identity_key("C")}


def test_empty_forest() -> None:
    assert select_roots([]) == ()
    assert collect_child_ids([]) == set()
