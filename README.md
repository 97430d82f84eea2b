# listkit

Plain, dependency-free list containers holding integers.

## What is inside

- `listkit.chain.Chain` is a bare linked chain of `Node`s. `push`, `pop` and `peek`
  work at the head. `enqueue` appends at the tail, so `pop` then returns values
  in queue order. `search` reports whether a value is present. `delete` unlinks
  the first matching node and returns whether one was found. It supports
  `len()`, iteration and `in`. Calling `pop` or `peek` on an empty chain raises
  `IndexError`. `str()` gives `1 -> 2 -> NULL`.
- `listkit.arraylist.ArrayList` is a growable array that keeps track of its
  capacity. A non-positive initial capacity becomes 4. The capacity doubles
  when the list is full. It halves when the list falls below a quarter full,
  but only while the capacity is above 4. It offers:
  - `append` and `insert`. `insert` accepts an index from 0 to `len` inclusive.
  - `index_of`, which returns -1 when the value is absent.
  - `delete_at` and `remove_last`, which both return the removed value.
  - `clear`, which keeps the capacity.
  - The `capacity` property, indexing and iteration.

  A bad index raises `IndexError`, and so does `remove_last` on an empty list.
- `listkit.singly_linked_list.SinglyLinkedList` is a linked list that tracks
  its head, tail and size. It offers:
  - `push_head`, `push_tail` and `pop` (from the head).
  - `peek_head` and `peek_tail`.
  - `search`, and `in`.
  - `modify(old_value, new_value)`, which replaces the first match and returns
    whether one was found.
  - `clear` and `is_empty`.

  Popping or peeking an empty list raises `UnderflowError`, a subclass of
  `IndexError`.
- `listkit.stack.Stack` is a last-in, first-out stack built on the singly
  linked list. It offers `push`, `pop`, `peek`, `is_empty`, `clear` and `len()`.

## Installing

```
pip install .
```

## Using it

```python
from listkit.arraylist import ArrayList
from listkit.singly_linked_list import SinglyLinkedList, UnderflowError
from listkit.stack import Stack

items = ArrayList(2)
for value in (10, 20, 30):
    items.append(value)
items.insert(0, 5)
print(items)               # ArrayList (size: 4, capacity: 4): [5, 10, 20, 30]
print(items.index_of(20))  # 2

linked = SinglyLinkedList([3, 5, 465])
linked.push_tail(100)
linked.modify(465, 4)
print(linked.peek_head(), linked.peek_tail())  # 3 100

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.pop())         # 20

try:
    SinglyLinkedList().pop()
except UnderflowError:
    print("nothing to pop")
```

## Demo

A walk-through of the containers is installed as a command. With no argument it
runs every demo. Name one demo to run only that one: `arraylist`, `linkedlist`
or `stack`.

```
listkit-demo
listkit-demo stack
```

The same demos can be called from Python as `listkit.demos.arraylist_demo()`,
`linked_list_demo()` and `stack_demo()`.

## Running the tests

```
pip install ".[test]"
pytest
```