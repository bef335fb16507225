# containerkit

Three small container utilities with no dependencies beyond the standard
library.

## easyfind

`containerkit.easyfind.easyfind(container, value)` walks any iterable and
returns the zero-based position of the first element equal to `value`. If no
element matches it raises `ValueNotFoundError` (a subclass of `LookupError`)
with the message `Value not found`.

```python
from containerkit.easyfind import easyfind

easyfind([10, 20, 30, 42, 50], 42)  # 3
```

## Span

`containerkit.span.Span(max_size=0)` holds at most `max_size` integers. A
negative `max_size` raises `ValueError`; the capacity is readable through the
`max_size` property.

- `add_number(n)` stores one integer, or raises `SpanFullError` (a subclass of
  `OverflowError`) with `Span is full` when the span is at capacity.
- `add_range(values)` stores every value of an iterable at once. If they would
  not all fit, it raises `SpanFullError` and stores none of them.
- `shortest_span()` returns the smallest gap between any two stored numbers.
- `longest_span()` returns the gap between the smallest and the largest.

Both span queries raise `SpanTooSmallError` (a subclass of `ValueError`) when
fewer than two numbers are stored. A `Span` supports `len()` and iterates its
numbers in the order they were added.

```python
from containerkit.span import Span

span = Span(5)
for n in (6, 3, 17, 9, 11):
    span.add_number(n)
print(span.shortest_span(), span.longest_span())  # 2 14
```

## MutantStack

`containerkit.mutant_stack.MutantStack(items=None)` is a last-in, first-out
stack, optionally filled from an iterable (the last item ends up on top).

- `push(item)`, `pop()`, `top()` and `empty()` behave as on any stack;
  `pop()` and `top()` raise `IndexError` on an empty stack.
- `copy()` returns an independent stack with the same elements.
- `len()` gives the number of elements; iterating goes from the bottom of the
  stack to the top, and `reversed()` goes from the top down.
- Two stacks compare equal when they hold the same elements in the same order.

```python
from containerkit.mutant_stack import MutantStack

stack = MutantStack()
for n in (5, 17):
    stack.push(n)
print(stack.top())  # 17
stack.pop()
print(list(stack))  # [5]
```

The stack always keeps its elements in a `collections.deque`; the storage type
cannot be chosen.

## Demonstrations

Each utility has a demo that prints a series of examples and waits for ENTER
between them. They take no options:

```
containerkit-easyfind
containerkit-span
containerkit-mutant-stack
```

## Tests

```
pip install -e .[test]
pytest
```