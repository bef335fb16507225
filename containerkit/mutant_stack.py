"""A last-in, first-out stack whose contents can also be iterated."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_MAGENTA = "\033[35m"
_RESET = "\033[0m"
_SEPARATOR = f"{_CYAN}-----------------------------{_RESET}\n"


class MutantStack(Generic[T]):
    """A stack that also iterates over its elements from bottom to top."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: deque[T] = deque(items if items is not None else ())

    def push(self, item: T) -> None:
        """Place ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top element; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top element without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True when the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutantStack):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"MutantStack({list(self._items)!r})"

    def copy(self) -> MutantStack[T]:
        """Return an independent stack holding the same elements."""
        return MutantStack(self._items)


def _press_enter() -> None:
    print(f"{_YELLOW}Press ENTER to continue...{_RESET}", flush=True)
    sys.stdin.readline()


def _fill_sample(stack: MutantStack[int]) -> None:
    for value in (3, 5, 737, 0):
        stack.push(value)


def _demo_sample() -> None:
    print(f"{_MAGENTA}💻 C++ Sample Test{_RESET}")
    stack: MutantStack[int] = MutantStack()
    stack.push(5)
    stack.push(17)
    print(stack.top())
    stack.pop()
    print(len(stack))
    _fill_sample(stack)
    for value in stack:
        print(value)
    stack.copy()
    _press_enter()


def _demo_integers() -> None:
    print(_SEPARATOR)
    print("🔢 MutantStack<int> Test")
    stack: MutantStack[int] = MutantStack()
    stack.push(5)
    stack.push(17)
    print(f"Top: {stack.top()}")
    stack.pop()
    print(f"Size after pop: {len(stack)}")
    _fill_sample(stack)
    print("Contents:")
    print("".join(f"{value} " for value in stack))
    duplicate = stack.copy()
    print(f"Copied stack top: {duplicate.top()}")
    _press_enter()


def _demo_characters() -> None:
    print(_SEPARATOR)
    print("🔡 MutantStack<char> Test")
    stack: MutantStack[str] = MutantStack()
    for char in "hello!":
        stack.push(char)
    print("Contents:")
    print("".join(f"{char} " for char in stack))
    _press_enter()


def _demo_strings() -> None:
    print(_SEPARATOR)
    print("🧵 MutantStack<std::string> Test")
    stack: MutantStack[str] = MutantStack()
    for word in ("first", "second", "third"):
        stack.push(word)
    print("".join(f"{word} " for word in stack))
    _press_enter()


def _demo_prefilled() -> None:
    print(_SEPARATOR)
    print("📦 Choose underlyint container type")
    stack: MutantStack[int] = MutantStack()
    stack.push(10)
    stack.push(20)
    for value in stack:
        print(value)
    _press_enter()


_DEMOS: tuple[Callable[[], None], ...] = (
    _demo_integers,
    _demo_characters,
    _demo_strings,
    _demo_prefilled,
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive MutantStack demonstration."""
    _demo_sample()
    print("\nMy Tests:")
    for demo in _DEMOS:
        demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())