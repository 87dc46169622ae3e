import pytest

from kb_dict.tree.builder import build_tree, insert


def test_insert_single_segment_sets_leaf() -> None:
    tree = {}
    insert(tree, "text", ["1"])
    assert tree == {"1": "text"}


def test_insert_creates_interior_nodes() -> None:
    tree = {}
    insert(tree, "text", ["1", "2", "3"])
    assert tree == {"1": {"2": {"3": "text"}}}


def test_insert_reuses_existing_interior_nodes() -> None:
    tree = {}
    insert(tree, "text1", ["1", "2"])
    insert(tree, "text2", ["1", "3"])
    assert tree == {"1": {"2": "text1", "3": "text2"}}


def test_insert_independent_paths() -> None:
    tree = {}
    insert(tree, "x", ["a", "b"])
    insert(tree, "y", ["c"])
    assert tree == {"a": {"b": "x"}, "c": "y"}


def test_insert_empty_path_is_noop() -> None:
    tree = {"a": "x"}
    insert(tree, "ignored", [])
    assert tree == {"a": "x"}


def test_insert_same_pair_twice_is_idempotent() -> None:
    once = {}
    insert(once, "v", ["a", "b"])
    twice = {}
    insert(twice, "v", ["a", "b"])
    insert(twice, "v", ["a", "b"])
    assert once == twice


def test_insert_same_path_last_write_wins() -> None:
    tree = {}
    insert(tree, "v1", ["a", "b"])
    insert(tree, "v2", ["a", "b"])
    assert tree == {"a": {"b": "v2"}}


def test_insert_through_existing_leaf_keeps_first_leaf() -> None:
    # Longer sequences behind an existing leaf are dropped silently.
    tree = {}
    insert(tree, "x", ["a"])
    insert(tree, "y", ["a", "b"])
    assert tree == {"a": "x"}


def test_insert_prefix_after_longer_path_replaces_interior() -> None:
    tree = {}
    insert(tree, "y", ["a", "b"])
    insert(tree, "x", ["a"])
    assert tree == {"a": "x"}


def test_insert_accepts_tuple_paths() -> None:
    tree = {}
    insert(tree, "v", ("a", "b"))
    assert tree == {"a": {"b": "v"}}


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([], {}),
        ([(["1"], "text")], {"1": "text"}),
        ([(["1", "2"], "text")], {"1": {"2": "text"}}),
        ([(["1"], "text1"), (["2"], "text2")], {"1": "text1", "2": "text2"}),
        ([(["1", "2"], "text1"), (["1", "3"], "text2")], {"1": {"2": "text1", "3": "text2"}}),
    ],
    ids=["empty", "one-by-one", "one-by-two", "two-by-one", "two-by-two"],
)
def test_build_tree(items: list[tuple[list[str], str]], expected: dict) -> None:
    assert build_tree(items) == expected
