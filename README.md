# rdecontainers

A small collection of container classes and search helpers. They behave like
classic node- and array-based containers and also work as ordinary Python
objects: they can be iterated, measured with `len()`, indexed and compared.

## Installation

```
pip install rdecontainers
```

With the test dependencies:

```
pip install "rdecontainers[test]"
```

## What is included

| Module | Contents |
| --- | --- |
| `rdecontainers.algorithm` | `lower_bound`, `upper_bound`, `find`, `find_if`, `accumulate`, `absolute`, `minimum`, `maximum`, `fill_n`, `move_n`, `move_range`, and the predicates `less`, `greater`, `equal_to` |
| `rdecontainers.allocator` | `Allocator`, which hands out fresh `bytearray` blocks, and `BufferAllocator`, a bump allocator over one fixed buffer |
| `rdecontainers.fixed_array` | `FixedArray`, a sequence whose length cannot change |
| `rdecontainers.linked_list` | `LinkedList`, a doubly linked list, with `ListPosition` cursors |
| `rdecontainers.fixed_list` | `FixedList`, a doubly linked list with a fixed capacity, with `FixedListPosition` cursors |
| `rdecontainers.intrusive_list` | `IntrusiveList` of `IntrusiveListNode` objects |
| `rdecontainers.intrusive_slist` | `IntrusiveSList` of `IntrusiveSListNode` objects |
| `rdecontainers.fixed_substring` | `FixedSubstring`, a string truncated at a fixed capacity |
| `rdecontainers.cow_string` | `CowString`, a copy-on-write string with character and substring search |

## Examples

Binary search over a sorted sequence returns an index:

```python
from rdecontainers.algorithm import lower_bound, upper_bound, less

values = [1, 4, 9, 16, 25, 36]
i = lower_bound(values, 11, less)
assert values[i] == 16

j = upper_bound([1, 2, 3, 3, 3, 5, 8], 5, less)
assert j == 6
```

`find` and `find_if` return the number of elements when nothing matches, in
the same way the bounds return the length.

A linked list with positions. Positions are immutable: `advance()` and
`retreat()` return a new position, and `value` reads or writes the element.

```python
from rdecontainers.linked_list import LinkedList

lst = LinkedList([1, 4, 9, 16, 25, 36])
pos = lst.begin().advance()
new_pos = lst.insert(pos, 2)      # inserted before 4
assert new_pos.value == 2
assert list(lst) == [1, 2, 4, 9, 16, 25, 36]
assert lst.front() == 1 and lst.back() == 36
assert lst.pop_back() == 36
```

A fixed-capacity list. Adding to a full list raises `OverflowError`; reading or
popping from an empty one raises `IndexError`:

```python
from rdecontainers.fixed_list import FixedList

fl = FixedList(4, [2, 4, 6, 8])
assert len(fl) == 4 and fl.capacity == 4
try:
    fl.push_back(10)
except OverflowError:
    pass
```

A fixed array with `front` and `back` properties:

```python
from rdecontainers.fixed_array import FixedArray

arr = FixedArray(5, [1, 2, 3, 4, 5])
arr.back = 6
arr.fill(0)
assert list(arr) == [0, 0, 0, 0, 0]
```

Intrusive lists link the node objects themselves and do not own them.
Subclasses must call `super().__init__()`:

```python
from rdecontainers.intrusive_list import IntrusiveList, IntrusiveListNode

class Item(IntrusiveListNode):
    def __init__(self, data):
        super().__init__()
        self.data = data

items = IntrusiveList()
a, b = Item(5), Item(10)
items.push_back(a)
items.push_back(b)
assert items.back() is b
assert [n.data for n in items] == [5, 10]
```

Bounded and copy-on-write strings:

```python
from rdecontainers.fixed_substring import FixedSubstring
from rdecontainers.cow_string import CowString

s = FixedSubstring(9, "Hello ")
s.append("world")
assert str(s) == "Hello wor"

t = CowString("hello world rde stl is fast")
assert t.find("st") == 16
assert t.rfind("st") == 25
assert t.find("java") == CowString.NPOS

u = t.copy()
assert u.shares_buffer_with(t)
u.append("!")                     # u gets its own buffer
assert not u.shares_buffer_with(t)
```

`CowString` orders strings by length first and only then by characters, so
`CowString("b") < CowString("aa")`.

## What is not included

The package has no growable vector, hash map, sorted map or set, stack, string
stream or sorting routines. The allocators stand alone: none of the containers
takes an allocator or draws memory from one.

## Running the tests

```
pytest
```