import pytest

from rdecontainers.linked_list import LinkedList

ARRAY = [1, 4, 9, 16, 25, 36]

PUSH_POP_SEQUENCE = [
    ("push_front", 5), ("push_back", 3), ("pop_back",), ("push_back", 6),
    ("pop_back",), ("push_back", 7), ("push_back", 8), ("pop_front",),
    ("push_front", 1), ("push_front", 9), ("push_back", 2),
    ("push_back", 100), ("push_front", 10),
]


def apply(lst, ops):
    for name, *args in ops:
        getattr(lst, name)(*args)
    return lst


@pytest.mark.parametrize(
    "ops, expected",
    [
        pytest.param([("push_front", 5)], [5], id="push_front_one"),
        pytest.param([("push_front", 5), ("push_front", 3)], [3, 5], id="push_front_two"),
        pytest.param([("push_back", 5)], [5], id="push_back_one"),
        pytest.param([("push_back", 5), ("push_back", 3)], [5, 3], id="push_back_two"),
        pytest.param(
            [("push_front", 5), ("push_front", 3), ("pop_front",)], [5], id="pop_front"
        ),
        pytest.param(
            [("push_front", 5), ("push_front", 3), ("pop_front",), ("pop_front",)],
            [],
            id="pop_front_all",
        ),
        pytest.param(
            [("push_front", 5), ("push_back", 3), ("pop_back",)], [5], id="pop_back"
        ),
        pytest.param(
            [("push_front", 5), ("push_back", 3), ("pop_back",), ("pop_back",)],
            [],
            id="pop_back_all",
        ),
        pytest.param([("push_front", 5), ("clear",)], [], id="clear"),
        pytest.param(PUSH_POP_SEQUENCE, [10, 9, 1, 7, 8, 2, 100], id="mixed"),
    ],
)
def test_operation_sequences(ops, expected):
    lst = apply(LinkedList(), ops)
    assert list(lst) == expected
    assert len(lst) == len(expected)
    assert (lst.begin() == lst.end()) == (not expected)
    if expected:
        assert (lst.front(), lst.back()) == (expected[0], expected[-1])


def test_pops_return_removed_values():
    lst = LinkedList([1, 2, 3])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]


def test_push_pop_insert():
    lst = apply(LinkedList(), PUSH_POP_SEQUENCE)
    lst.insert(lst.begin().advance(), 11)
    assert len(lst) == 8
    assert lst.front() == 10
    assert lst.back() == 100
    assert list(lst) == [10, 11, 9, 1, 7, 8, 2, 100]


def test_iter_one_elem():
    lst = LinkedList([5])
    it = lst.begin()
    assert it != lst.end()
    assert it.value == 5


def test_iter_traverse():
    lst = apply(LinkedList(), [("push_back", v) for v in (2, 3, 4, 5)])
    lst.push_front(1)
    backwards = []
    it = lst.end()
    while it != lst.begin():
        it = it.retreat()
        backwards.append(it.value)
    assert backwards == [5, 4, 3, 2, 1]
    forwards = []
    while it != lst.end():
        forwards.append(it.value)
        it = it.advance()
    assert forwards == [1, 2, 3, 4, 5]


def test_assign_ctor():
    lst = LinkedList(ARRAY)
    assert len(lst) == 6
    assert lst.front() == 1
    assert lst.back() == 36


def test_insert():
    lst = LinkedList(ARRAY)
    it2 = lst.insert(lst.end().retreat().retreat(), 20)
    assert it2.value == 20
    assert len(lst) == 7
    assert it2.retreat().value == 16
    assert it2.advance().value == 25
    assert list(lst) == [1, 4, 9, 16, 20, 25, 36]


def test_erase():
    lst = LinkedList(ARRAY)
    it = lst.begin().advance().advance().advance()
    assert it.value == 16
    it = lst.erase(it)
    assert it.value == 25
    assert len(lst) == 5
    assert it.advance().value == 36
    assert it.retreat().value == 9


def test_erase_all():
    lst = LinkedList(ARRAY)
    result = lst.erase_range(lst.begin(), lst.end())
    assert len(lst) == 0
    assert result == lst.end()


def test_assignment():
    lst = LinkedList(ARRAY)
    lst2 = LinkedList()
    lst2.assign(lst)
    assert list(lst2) == ARRAY
    assert lst2 == lst


def test_position_value_attribute():
    class Foo:
        def __init__(self, k):
            self.k = k

    lst = LinkedList([Foo(11)])
    assert lst.front().k == 11
    assert lst.begin().value.k == 11


def test_position_value_setter():
    lst = LinkedList([1, 2, 3])
    lst.begin().advance().value = 20
    assert list(lst) == [1, 20, 3]


def test_reversed():
    assert list(reversed(LinkedList(ARRAY))) == ARRAY[::-1]


@pytest.mark.parametrize("method", ["front", "back", "pop_front", "pop_back"])
def test_empty_errors(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_erase_end_raises():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.erase(lst.end())


def test_erase_stale_position_raises():
    lst = LinkedList([1, 2])
    pos = lst.begin()
    lst.erase(pos)
    with pytest.raises(ValueError):
        lst.erase(pos)
    assert list(lst) == [2]


def test_foreign_position_raises():
    a = LinkedList([1])
    b = LinkedList([2])
    with pytest.raises(ValueError):
        a.insert(b.begin(), 3)
    assert list(a) == [1]


def test_end_value_raises():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.end().value