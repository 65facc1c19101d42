import pytest
from hypothesis import given, strategies as st

from ftkit.lists import LinkedList, Node, delete_node


def test_new_node_has_content_and_no_next():
    node = Node("abc")
    assert node.content == "abc"
    assert node.next is None


def test_construct_from_contents_preserves_order():
    items = [1, 2, 3]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list_size_and_last():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert not lst


def test_add_front_makes_new_head():
    lst = LinkedList(["b", "c"])
    node = Node("a")
    lst.add_front(node)
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_add_front_on_empty_list():
    lst = LinkedList()
    lst.add_front(Node("x"))
    assert list(lst) == ["x"]


def test_add_front_none_raises():
    with pytest.raises(TypeError):
        LinkedList().add_front(None)


def test_add_back_appends():
    lst = LinkedList(["a"])
    node = Node("b")
    lst.add_back(node)
    assert lst.last() is node
    assert list(lst) == ["a", "b"]


def test_add_back_on_empty_becomes_head():
    lst = LinkedList()
    node = Node("z")
    lst.add_back(node)
    assert lst.head is node


def test_add_back_none_leaves_list_unchanged():
    lst = LinkedList(["a", "b"])
    lst.add_back(None)
    assert list(lst) == ["a", "b"]


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    assert lst.last().content == "c"
    assert lst.last().next is None


def test_delete_node_calls_delete_with_content():
    seen = []
    node = Node("payload", Node("other"))
    delete_node(node, seen.append)
    assert seen == ["payload"]
    assert node.next is None


def test_delete_node_without_function_does_nothing():
    node = Node("payload")
    delete_node(node, None)
    assert node.content == "payload"


def test_clear_deletes_all_in_order():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(seen.append)
    assert seen == ["a", "b", "c"]
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_function_keeps_list():
    lst = LinkedList(["a", "b"])
    lst.clear(None)
    assert list(lst) == ["a", "b"]


def test_iterate_visits_every_content():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.iterate(seen.append)
    assert seen == ["a", "b", "c"]


def test_iterate_without_function_is_harmless():
    lst = LinkedList(["a"])
    lst.iterate(None)
    assert list(lst) == ["a"]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper, None)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_on_empty_or_without_func_gives_empty():
    assert len(LinkedList().map(str.upper, None)) == 0
    assert len(LinkedList(["a"]).map(None, None)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == "c":
            raise RuntimeError("boom")
        return value * 2

    lst = LinkedList(["a", "b", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]
    assert list(lst) == ["a", "b", "c"]


@given(st.lists(st.integers()))
def test_roundtrip_and_size(items):
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)
    assert list(lst.map(lambda x: x, None)) == items